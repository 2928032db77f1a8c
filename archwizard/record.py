"""The configuration record filled in by the wizard."""

from dataclasses import dataclass, fields


@dataclass
class ArchConfig:
    """Holds the answers collected during one session.

    Each field starts unset (None) and is written exactly once, when its
    question is confirmed.
    """
    hostname: str | None = None
    username: str | None = None
    password: str | None = None
    timezone: str | None = None
    locale: str | None = None
    keyboard_layout: str | None = None
    format_type: str | None = None
    package_manager: str | None = None
    bootloader: str | None = None
    desktop_environment: str | None = None
    reflector_country: str | None = None
    enable_ssh: bool | None = None

    def answer(self, key: str, value: str | bool) -> None:
        """Write *value* into field *key*, refusing to overwrite."""
        if key not in FIELD_NAMES:
            raise KeyError(key)
        expected = bool if key in BOOL_FIELDS else str
        if not isinstance(value, expected):
            raise TypeError(f"{key} expects {expected.__name__}, got {type(value).__name__}")
        if getattr(self, key) is not None:
            raise ValueError(f"{key} has already been answered")
        setattr(self, key, value)

    def missing(self) -> list[str]:
        """Names of the fields that have not been answered yet."""
        return [name for name in FIELD_NAMES if getattr(self, name) is None]

    def is_complete(self) -> bool:
        return not self.missing()


FIELD_NAMES: tuple[str, ...] = tuple(f.name for f in fields(ArchConfig))
BOOL_FIELDS = frozenset({"enable_ssh"})
