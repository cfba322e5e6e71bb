import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)
    DEBUG_DIR: Path = field(init=False)

    MAX_RESULTS: int = 50
    MAX_BOARD_CELLS: int = 400

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "dictionary.txt"
        self.DEBUG_DIR = self.BASE_DIR / "debug"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _coerce(getattr(self, fld), env_val))


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Fields that may be changed while the server is running
EDITABLE_FIELDS: dict[str, type] = {
    "MAX_RESULTS": int,
    "MAX_BOARD_CELLS": int,
    "LOG_LEVEL": str,
    "DEBUG": bool,
}


def _coerce(current, value):
    # bool before int: bool is a subclass of int
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        return str(value).lower() in ("1", "true", "yes")
    if isinstance(current, int):
        return int(value)
    if isinstance(current, float):
        return float(value)
    if isinstance(current, Path):
        return Path(value)
    return str(value)


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply editable values to cfg. Returns {field: error} for the ones rejected."""
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in cfg.__dataclass_fields__:
            errors[name] = "unknown field"
            continue
        if name not in EDITABLE_FIELDS:
            errors[name] = "field is not editable"
            continue
        try:
            coerced = _coerce(getattr(cfg, name), value)
        except (TypeError, ValueError) as e:
            errors[name] = f"invalid {EDITABLE_FIELDS[name].__name__}: {e}"
            continue
        if name == "LOG_LEVEL":
            coerced = coerced.upper()
            if coerced not in LOG_LEVELS:
                errors[name] = f"must be one of {', '.join(LOG_LEVELS)}"
                continue
        if EDITABLE_FIELDS[name] is int and coerced < 0:
            errors[name] = "must be >= 0"
            continue
        setattr(cfg, name, coerced)
    return errors


settings = Settings()
