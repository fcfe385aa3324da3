# newrial/config/settings.py
# -*- coding: utf-8 -*-
"""
Settings manager for NewRial.

Features:
  - Starts from a small dict of safe defaults (language, direction, log level).
  - Overlays values from the environment; a local `.env` file is honoured via
    python-dotenv.
  - Keeps everything in memory: nothing is ever written back to disk.
"""

from __future__ import annotations
import os
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv

from .constants import (
    DEFAULT_LANG,
    SUPPORTED_LANGS,
    DEFAULT_LOG_LEVEL,
    ENV_LANG,
    ENV_REVERSE,
    ENV_LOG_LEVEL,
)

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class SettingsManager:
    """Holds converter preferences; environment overrides the defaults."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None, *, use_dotenv: bool = True) -> None:
        self.default_settings: Dict[str, Any] = {
            "lang": DEFAULT_LANG,          # "fa" | "en"
            "reverse": False,              # False: old → new/qeran, True: new/qeran → old
            "log_level": DEFAULT_LOG_LEVEL,
        }
        if environ is None:
            if use_dotenv:
                load_dotenv()
            environ = os.environ
        self.settings: Dict[str, Any] = self.load_settings(environ)

    # ---------- load ----------
    def load_settings(self, environ: Mapping[str, str]) -> Dict[str, Any]:
        """Overlay recognised environment values onto defaults. Never raises."""
        merged = self.default_settings.copy()

        lang = str(environ.get(ENV_LANG, "")).strip().lower()
        if lang in SUPPORTED_LANGS:
            merged["lang"] = lang

        rev = str(environ.get(ENV_REVERSE, "")).strip().lower()
        if rev in _TRUTHY:
            merged["reverse"] = True
        elif rev in _FALSY:
            merged["reverse"] = False

        level = str(environ.get(ENV_LOG_LEVEL, "")).strip().upper()
        if level in _LOG_LEVELS:
            merged["log_level"] = level

        return merged

    # ---------- generic API ----------
    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting, returning default if missing."""
        return self.settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a setting for this session."""
        self.settings[key] = value

    # ---------- helpers: language ----------
    def lang(self) -> str:
        """Return the current UI language ('fa' or 'en')."""
        v = str(self.settings.get("lang", DEFAULT_LANG))
        return v if v in SUPPORTED_LANGS else DEFAULT_LANG

    def set_lang(self, lang: str) -> None:
        """Set the UI language; unknown values fall back to the default."""
        v = str(lang or "").strip().lower()
        self.set("lang", v if v in SUPPORTED_LANGS else DEFAULT_LANG)

    # ---------- helpers: direction ----------
    def reverse(self) -> bool:
        return bool(self.settings.get("reverse", False))

    def set_reverse(self, value: bool) -> None:
        self.set("reverse", bool(value))

    # ---------- helpers: logging ----------
    def log_level(self) -> str:
        return str(self.settings.get("log_level", DEFAULT_LOG_LEVEL))
