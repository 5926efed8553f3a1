#!/usr/bin/env python3
"""
alp-serve: run the pricing API under uvicorn.

    alp-serve --config config/server.yaml --port 3000 --grid terminal
"""
from __future__ import annotations

import argparse
import logging

import uvicorn

from alp.api import create_app
from alp.config import ALPConfig, add_common_args
from alp.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="American option lattice pricing service")
    return add_common_args(p)


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    cfg = ALPConfig.load(args.config, vars(args))

    log_cfg = cfg.get("logging", {}) or {}
    setup_logging(
        log_cfg.get("level", "INFO"),
        colored=bool(log_cfg.get("colored", False)),
        log_file=log_cfg.get("file"),
    )

    host = cfg["server"]["host"]
    port = int(cfg["server"]["port"])
    app = create_app(cfg)
    logger.info("Server is running on http://%s:%d (exercise grid: %s)",
                host, port, cfg["pricing"]["grid"])
    uvicorn.run(app, host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
