# core/config_loader.py

import json
import os
from pathlib import Path

from dotenv import load_dotenv

from core.config_schema import ScannerConfig
from core.paths import CONFIG_PATH, ENV_PATH

# Path constants (adjust if your layout differs)
DEFAULT_CONFIG_PATH = CONFIG_PATH
DEFAULT_ENV_PATH = ENV_PATH

# Spellings accepted for the built-in locales
LOCALE_ALIASES = {
    "english": "en",
    "inglés": "en",
    "ingles": "en",
    "spanish": "es",
    "español": "es",
    "espanol": "es",
    "castellano": "es",
}

TRUE_STRINGS = {"1", "true", "yes", "on"}
FALSE_STRINGS = {"0", "false", "no", "off"}


def normalize_locale(raw_locale):
    """
    Maps "en_US", "es-ES", "English", "Español" ... to a bare locale code.
    Unknown values are returned lower-cased so the schema can reject them.
    """
    if not isinstance(raw_locale, str):
        return raw_locale
    value = raw_locale.strip().lower()
    if value in LOCALE_ALIASES:
        return LOCALE_ALIASES[value]
    # Strip region and codeset: "es_ES.UTF-8" -> "es"
    value = value.split(".")[0]
    for sep in ("_", "-"):
        value = value.split(sep)[0]
    return value


def parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in TRUE_STRINGS:
        return True
    if value in FALSE_STRINGS:
        return False
    raise ValueError(f"Cannot interpret '{raw}' as a boolean")


def load_raw_config(path: Path = DEFAULT_CONFIG_PATH) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found at {path.resolve()}")
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def apply_env_overrides(raw: dict) -> dict:
    """
    SCANNER_LOCALE / SCANNER_ENCODING / SCANNER_LOG_EVENTS win over the file.
    """
    merged = dict(raw)
    if os.getenv("SCANNER_LOCALE"):
        merged["locale"] = os.getenv("SCANNER_LOCALE")
    if os.getenv("SCANNER_ENCODING"):
        merged["encoding"] = os.getenv("SCANNER_ENCODING")
    if os.getenv("SCANNER_LOG_EVENTS"):
        merged["log_events"] = parse_bool(os.getenv("SCANNER_LOG_EVENTS"))
    return merged


def load_config(path: Path | str | None = None) -> ScannerConfig:
    """
    Loads .env, the optional JSON config and env overrides, normalizes the
    locale, validates against schema, and returns a typed ScannerConfig.
    """
    # Load .env early so any env overrides are present
    if DEFAULT_ENV_PATH.exists():
        load_dotenv(dotenv_path=DEFAULT_ENV_PATH)
    else:
        load_dotenv()

    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if path is not None or config_path.exists():
        raw = load_raw_config(config_path)
    else:
        raw = {}

    try:
        raw = apply_env_overrides(raw)
        if "locale" in raw:
            raw["locale"] = normalize_locale(raw["locale"])
        return ScannerConfig(**raw)
    except Exception as e:
        # Fail fast with clear message
        raise RuntimeError(f"Configuration validation failed: {e}") from e
