"""Write the finished configuration to disk and read it back."""

import os
from dataclasses import asdict
from pathlib import Path

import yaml
from loguru import logger

from .record import ArchConfig, BOOL_FIELDS, FIELD_NAMES

DEFAULT_OUTPUT = "arch_config.yaml"


class PersistenceError(Exception):
    """The configuration file could not be written or read."""


def dump_config(cfg: ArchConfig) -> str:
    """Serialize a complete record as a YAML mapping in field order."""
    if not cfg.is_complete():
        raise PersistenceError(f"configuration is incomplete: {', '.join(cfg.missing())}")
    try:
        return yaml.safe_dump(asdict(cfg), sort_keys=False, allow_unicode=True)
    except yaml.YAMLError as e:
        raise PersistenceError(f"could not serialize configuration: {e}") from e


def save_config(cfg: ArchConfig, path: str | Path = DEFAULT_OUTPUT) -> Path:
    """Write *cfg* to *path* atomically and return the path written."""
    path = Path(path)
    content = dump_config(cfg)
    tmp_path = path.with_name(f".{path.name}.tmp")
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_path, path)
    except OSError as e:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise PersistenceError(f"could not write {path}: {e.strerror or e}") from e
    logger.info("configuration written to {}", path)
    return path


def load_config(path: str | Path = DEFAULT_OUTPUT) -> ArchConfig:
    """Read a file written by save_config() back into an ArchConfig."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise PersistenceError(f"config file not found: {path}") from None
    except OSError as e:
        raise PersistenceError(f"could not read {path}: {e.strerror or e}") from e
    except yaml.YAMLError as e:
        raise PersistenceError(f"invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise PersistenceError(f"{path} must contain a YAML mapping, got {type(data).__name__}")

    missing = [name for name in FIELD_NAMES if name not in data]
    if missing:
        raise PersistenceError(f"{path} is missing: {', '.join(missing)}")

    cfg = ArchConfig()
    for name in FIELD_NAMES:
        value = data[name]
        expected = bool if name in BOOL_FIELDS else str
        if not isinstance(value, expected):
            raise PersistenceError(
                f"'{name}' in {path} must be {expected.__name__}, got {type(value).__name__}"
            )
        cfg.answer(name, value)
    return cfg
