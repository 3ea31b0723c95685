# core/config_schema.py

import codecs

from pydantic import BaseModel, field_validator

from scanner.messages import LOCALES, DEFAULT_LOCALE


class ScannerConfig(BaseModel):
    locale: str = DEFAULT_LOCALE
    encoding: str = "utf-8"
    log_events: bool = False

    @field_validator("locale")
    def locale_must_be_registered(cls, v):
        code = v.strip().lower()
        if code not in LOCALES:
            raise ValueError(f"unsupported locale '{v}' (available: {', '.join(sorted(LOCALES))})")
        return code

    @field_validator("encoding")
    def encoding_must_exist(cls, v):
        try:
            return codecs.lookup(v.strip()).name
        except LookupError:
            raise ValueError(f"unknown encoding '{v}'")
