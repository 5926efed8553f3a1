"""Logging setup for entrypoints (``alp-serve``, the Streamlit app).

Library modules only do ``logger = logging.getLogger(__name__)``; the
process entrypoint calls ``setup_logging(...)`` once.
"""

from __future__ import annotations

import logging
from pathlib import Path


class _ColorFormatter(logging.Formatter):
    """Colors the levelname only; used on the console handler."""
    _RESET = "\033[0m"
    _LEVEL_COLOR: dict[int, str] = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[1;31m",
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self._LEVEL_COLOR.get(record.levelno)
        if not color:
            return super().format(record)

        original = record.levelname
        record.levelname = f"{color}{original}{self._RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def coerce_level(level: int | str) -> int:
    """Accept ``logging.INFO``, ``"info"`` or ``"20"``."""
    if isinstance(level, int):
        return level

    s = str(level).strip().upper()
    if not s:
        raise ValueError("Empty logging level")
    if s.isdigit():
        return int(s)

    mapping = logging.getLevelNamesMapping()
    if s == "WARN":
        s = "WARNING"
    try:
        return mapping[s]
    except KeyError as e:
        raise ValueError(f"Unknown logging level: {level!r}") from e


def setup_logging(
    level: int | str = "INFO",
    *,
    fmt: str = "%(asctime)s %(levelname)s %(name)s - %(message)s",
    datefmt: str = "%Y-%m-%d %H:%M:%S",
    log_file: str | Path | None = None,
    colored: bool = False,
) -> None:
    root_level = coerce_level(level)
    handlers: list[logging.Handler] = []

    console = logging.StreamHandler()
    formatter_cls = _ColorFormatter if colored else logging.Formatter
    console.setFormatter(formatter_cls(fmt=fmt, datefmt=datefmt))
    handlers.append(console)

    if log_file is not None:
        p = Path(log_file)
        p.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(p, encoding="utf-8")
        fh.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
        handlers.append(fh)

    # force=True so reruns (Streamlit reruns the script) don't stack handlers
    logging.basicConfig(level=root_level, handlers=handlers, force=True)
