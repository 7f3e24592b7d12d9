import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

import yaml

from tasktimer.errors import ValidationError
from tasktimer.lib import paths

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Settings:
    db_path: Path
    log_level: str = DEFAULT_LOG_LEVEL


def _validate_config(cfg: dict) -> None:
    """Validate config structure. Fail fast on invalid types."""
    if not isinstance(cfg, dict):
        raise ValidationError(f"Config must be a mapping, got {type(cfg).__name__}")

    for key in ("db_path", "log_level"):
        if key in cfg and not isinstance(cfg[key], str):
            raise ValidationError(f"Config '{key}' must be a string")

    level = cfg.get("log_level")
    if level and not isinstance(logging.getLevelName(level.upper()), int):
        raise ValidationError(f"Config 'log_level' is not a logging level: {level}")


def _clear_cache():
    load_config.cache_clear()


@lru_cache(maxsize=1)
def load_config() -> dict:
    """Load config.yaml from the data dir, returning an empty dict if not found."""
    path = paths.config_file()
    if not path.exists():
        return {}
    with open(path) as f:
        try:
            cfg = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValidationError(f"Config {path} is not valid YAML: {e}") from e
    if cfg is None:
        return {}
    _validate_config(cfg)
    return cfg


def _resolve_db(raw: str | Path) -> Path:
    db = Path(raw).expanduser()
    if not db.is_absolute():
        db = paths.data_dir() / db
    return db


def load_settings(db_override: Path | None = None) -> Settings:
    """Merge config file, environment and CLI override. Later sources win."""
    cfg = load_config()

    db: str | Path = cfg.get("db_path") or paths.default_db()
    env_db = os.environ.get(paths.DB_ENV)
    if env_db:
        db = env_db
    if db_override is not None:
        db = db_override

    return Settings(
        db_path=_resolve_db(db),
        log_level=(cfg.get("log_level") or DEFAULT_LOG_LEVEL).upper(),
    )
