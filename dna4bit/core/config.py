# dna4bit/core/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

# .env values never override variables already set in the OS environment
load_dotenv(override=False)

DEFAULT_DNA_DIR = "data/dna"
DEFAULT_CORS_ORIGINS = ("http://localhost:3000", "http://127.0.0.1:3000")


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    return v.strip()


def _env_bool(name: str, default: bool = False) -> bool:
    v = _env(name)
    if v is None:
        return default
    return v.lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: Tuple[str, ...] = ()) -> Tuple[str, ...]:
    """Comma-separated list: "http://localhost:3000,https://browser.example.org"."""
    v = _env(name)
    if v is None:
        return default
    return tuple(x.strip() for x in v.split(",") if x.strip())


@dataclass(frozen=True)
class Settings:
    app_name: str
    env: str
    debug: bool
    log_level: str
    api_prefix: str

    # directory holding <chrom>.dna.4bit files
    dna_dir: Path
    # fail startup when dna_dir is missing
    check_dna_dir_on_startup: bool

    # browser genome viewers calling the API directly
    cors_origins: Tuple[str, ...]

    enable_docs: bool


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    env = _env("ENV", "local")
    return Settings(
        app_name=_env("APP_NAME", "dna4bit"),
        env=env,
        debug=_env_bool("DEBUG", default=(env == "local")),
        log_level=_env("LOG_LEVEL", "INFO"),
        api_prefix=_env("API_PREFIX", "/api"),
        dna_dir=Path(_env("DNA_DIR", DEFAULT_DNA_DIR)),
        check_dna_dir_on_startup=_env_bool("CHECK_DNA_DIR_ON_STARTUP", default=False),
        cors_origins=_env_list("CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
        enable_docs=not _env_bool("DISABLE_DOCS", default=False),
    )
