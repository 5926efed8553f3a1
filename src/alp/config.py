# src/alp/config.py
from __future__ import annotations
import argparse, copy, os, pathlib, typing as t
from dataclasses import dataclass
import yaml

DEFAULTS: dict = {
    "server":  {"host": "127.0.0.1", "port": 3000},
    "pricing": {"grid": "terminal", "check_probability": False, "max_steps": 10000},
    "logging": {"level": "INFO", "colored": False, "file": None},
}


@dataclass
class ALPConfig:
    raw: dict

    @classmethod
    def load(cls, path: str | None = None, cli_overrides: t.Dict[str, t.Any] | None = None) -> "ALPConfig":
        data = copy.deepcopy(DEFAULTS)
        if path:
            with open(path, "r") as f:
                loaded = yaml.safe_load(f) or {}
            for section, values in loaded.items():
                if isinstance(values, dict):
                    data.setdefault(section, {}).update(values)
                else:
                    data[section] = values
        cli_overrides = cli_overrides or {}
        # Shallow override: --host/--port/--grid/--log-level
        if cli_overrides.get("host"):
            data["server"]["host"] = cli_overrides["host"]
        if cli_overrides.get("port"):
            data["server"]["port"] = int(cli_overrides["port"])
        if cli_overrides.get("grid"):
            data["pricing"]["grid"] = cli_overrides["grid"]
        if cli_overrides.get("log_level"):
            data["logging"]["level"] = cli_overrides["log_level"]
        return cls(raw=data)

    def dump_to(self, path: str) -> None:
        pathlib.Path(os.path.dirname(path) or ".").mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.safe_dump(self.raw, f)

    def __getitem__(self, k): return self.raw[k]
    def get(self, k, d=None): return self.raw.get(k, d)


def add_common_args(p: argparse.ArgumentParser) -> argparse.ArgumentParser:
    p.add_argument("--config", type=str)
    p.add_argument("--host", type=str)
    p.add_argument("--port", type=int)
    p.add_argument("--grid", type=str, choices=["terminal", "node"])
    p.add_argument("--log-level", dest="log_level", type=str)
    return p
