from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os


@dataclass(frozen=True)
class Config:
    bind: str
    port: int
    document_root: Path
    interpreter: str
    script_extension: str
    buffer_size: int
    max_path_length: int
    create_samples: bool
    log_level: str


def _env_value(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    return value


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def load_config() -> Config:
    document_root = Path(_env_value("SCRIPTSERVE_DOCUMENT_ROOT", "./www")).expanduser().resolve()

    bind = _env_value("SCRIPTSERVE_BIND", "0.0.0.0")
    port = _env_int("SCRIPTSERVE_PORT", 8080)
    interpreter = _env_value("SCRIPTSERVE_INTERPRETER", "/usr/bin/php")
    script_extension = _env_value("SCRIPTSERVE_SCRIPT_EXTENSION", "php").strip().lstrip(".").lower()
    if not script_extension:
        script_extension = "php"
    buffer_size = max(1, _env_int("SCRIPTSERVE_BUFFER_SIZE", 4096))
    max_path_length = max(2, _env_int("SCRIPTSERVE_MAX_PATH_LENGTH", 256))
    create_samples = _env_bool("SCRIPTSERVE_CREATE_SAMPLES", True)
    log_level = _env_value("SCRIPTSERVE_LOG_LEVEL", "info").lower()

    return Config(
        bind=bind,
        port=port,
        document_root=document_root,
        interpreter=interpreter,
        script_extension=script_extension,
        buffer_size=buffer_size,
        max_path_length=max_path_length,
        create_samples=create_samples,
        log_level=log_level,
    )
