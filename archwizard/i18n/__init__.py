"""Translations for the wizard's screen chrome and status messages.

Question prompts and option labels are not translated; they mirror the
values written to the configuration file.
"""

import json
import os

DEFAULT_LANG = "en"

_translations: dict = {}
_active: str | None = None


def _catalog_path(lang: str) -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), f"{lang}.json")


def _read_catalog(lang: str) -> dict:
    with open(_catalog_path(lang), "r", encoding="utf-8") as f:
        return json.load(f)


def get_available_langs() -> list[dict]:
    """Return [{"code": "en", "name": "English"}, ...] for every bundled catalog."""
    here = os.path.dirname(_catalog_path(DEFAULT_LANG))
    langs = []
    for name in sorted(os.listdir(here)):
        if name.endswith(".json"):
            code = name[:-5]
            langs.append({"code": code, "name": _read_catalog(code).get("lang_name", code)})
    return langs


def init(lang: str = DEFAULT_LANG):
    """Activate *lang*; exits listing the bundled codes if it is unknown."""
    global _translations, _active
    if not os.path.exists(_catalog_path(lang)):
        available = ", ".join(l["code"] for l in get_available_langs())
        raise SystemExit(f"Unknown language: '{lang}'. Available: {available}")
    _translations = _read_catalog(lang)
    _active = lang


def t(key: str, **kwargs) -> str:
    """Look up a dot-separated *key*, falling back to the key itself.

    The default language is loaded on first use if init() was never called.
    """
    if _active is None:
        init(DEFAULT_LANG)
    value = _translations
    for part in key.split("."):
        if not isinstance(value, dict) or part not in value:
            return key
        value = value[part]
    if not isinstance(value, str):
        return key
    if kwargs:
        try:
            return value.format(**kwargs)
        except (KeyError, IndexError, ValueError):
            return value
    return value
