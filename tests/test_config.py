"""Tests for config loading and validation."""

import logging
import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from dbc.config import EnsureConfig, LoggingSettings, configure, load_config


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str) -> Path:
        p = tmp_path / "ensure.yaml"
        p.write_text(textwrap.dedent(content))
        return p

    return _write


def test_defaults():
    cfg = EnsureConfig()
    assert cfg.logging == LoggingSettings(level="WARNING", debug_file=None, verbose=False)


def test_empty_file_gives_defaults(tmp_yaml):
    cfg = load_config(tmp_yaml(""))
    assert cfg == EnsureConfig()


def test_load_full_config(tmp_yaml):
    path = tmp_yaml("""\
        logging:
          level: info
          debug_file: /var/log/app/contracts.log
          verbose: true
    """)
    cfg = load_config(path)
    assert cfg.logging.level == "INFO"
    assert cfg.logging.debug_file == "/var/log/app/contracts.log"
    assert cfg.logging.verbose is True


def test_relative_debug_file_resolved_against_config_dir(tmp_yaml, tmp_path):
    path = tmp_yaml("""\
        logging:
          debug_file: logs/contracts.log
    """)
    cfg = load_config(path)
    assert cfg.logging.debug_file == str((tmp_path / "logs" / "contracts.log").resolve())


def test_debug_file_expands_env_vars(tmp_yaml, tmp_path, monkeypatch):
    monkeypatch.setenv("DBC_LOG_DIR", str(tmp_path / "env"))
    path = tmp_yaml("""\
        logging:
          debug_file: ${DBC_LOG_DIR}/contracts.log
    """)
    cfg = load_config(path)
    assert cfg.logging.debug_file == str(tmp_path / "env" / "contracts.log")


def test_debug_file_env_var_default(tmp_yaml, tmp_path, monkeypatch):
    monkeypatch.delenv("DBC_UNSET_DIR", raising=False)
    path = tmp_yaml(f"""\
        logging:
          debug_file: ${{DBC_UNSET_DIR:-{tmp_path}}}/contracts.log
    """)
    cfg = load_config(path)
    assert cfg.logging.debug_file == str(tmp_path / "contracts.log")


def test_debug_file_missing_env_var_raises(tmp_yaml, monkeypatch):
    monkeypatch.delenv("DBC_UNSET_DIR", raising=False)
    path = tmp_yaml("""\
        logging:
          debug_file: ${DBC_UNSET_DIR}/contracts.log
    """)
    with pytest.raises(ValidationError, match="DBC_UNSET_DIR"):
        load_config(path)


def test_unknown_level_rejected(tmp_yaml):
    path = tmp_yaml("""\
        logging:
          level: loud
    """)
    with pytest.raises(ValidationError, match="Unknown log level"):
        load_config(path)


def test_unknown_keys_rejected(tmp_yaml):
    path = tmp_yaml("""\
        logging:
          colour: red
    """)
    with pytest.raises(ValidationError):
        load_config(path)


def test_configure_installs_handlers(tmp_yaml, tmp_path):
    path = tmp_yaml("""\
        logging:
          level: warning
          debug_file: contracts.log
    """)
    logger = configure(path)
    assert logger.name == "dbc"
    assert logger.level == logging.WARNING
    assert [type(h).__name__ for h in logger.handlers] == ["FileHandler"]
    assert (tmp_path / "contracts.log").exists()


def test_example_config_is_valid(monkeypatch):
    monkeypatch.delenv("DBC_LOG_DIR", raising=False)
    example = Path(__file__).resolve().parents[1] / "examples" / "ensure.yaml"
    cfg = load_config(example)
    assert cfg.logging.level == "WARNING"
    assert cfg.logging.debug_file == str(example.parent.resolve() / "logs" / "contracts.log")
