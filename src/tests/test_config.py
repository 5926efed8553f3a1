# src/tests/test_config.py
import argparse

from alp.config import ALPConfig, add_common_args


def test_load_and_override(tmp_path):
    yml = tmp_path/"t.yaml"
    yml.write_text("server:\n  port: 8080\npricing:\n  grid: 'node'\n")
    cfg = ALPConfig.load(str(yml), {"host": "0.0.0.0", "log_level": "DEBUG"})
    assert cfg["server"]["port"] == 8080
    assert cfg["server"]["host"] == "0.0.0.0"
    assert cfg["pricing"]["grid"] == "node"
    assert cfg["pricing"]["check_probability"] is False
    assert cfg["logging"]["level"] == "DEBUG"


def test_defaults_without_file():
    cfg = ALPConfig.load()
    assert cfg["server"]["port"] == 3000
    assert cfg["pricing"]["grid"] == "terminal"
    assert cfg.get("missing", 1) == 1


def test_defaults_are_not_shared():
    a = ALPConfig.load(cli_overrides={"port": 1})
    b = ALPConfig.load()
    assert a["server"]["port"] == 1
    assert b["server"]["port"] == 3000


def test_dump_roundtrip(tmp_path):
    out = tmp_path/"nested"/"cfg.yaml"
    ALPConfig.load(cli_overrides={"grid": "node"}).dump_to(str(out))
    assert ALPConfig.load(str(out))["pricing"]["grid"] == "node"


def test_common_args():
    p = add_common_args(argparse.ArgumentParser())
    ns = p.parse_args(["--port", "9000", "--grid", "node", "--log-level", "debug"])
    assert ns.port == 9000 and ns.grid == "node" and ns.log_level == "debug"
    assert ns.config is None
