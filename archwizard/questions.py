"""The fixed, ordered catalog of installer questions."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class FreeText:
    """Typed answer, accepted as-is (including empty)."""


@dataclass(frozen=True)
class Boolean:
    """Yes/No answer; "Yes" is always the first row."""


@dataclass(frozen=True)
class MultipleChoice:
    """Pick one of *options*, narrowed by a live filter."""
    options: tuple[str, ...]


QuestionKind = Union[FreeText, Boolean, MultipleChoice]

BOOLEAN_LABELS: tuple[str, str] = ("Yes", "No")


@dataclass(frozen=True)
class QuestionSpec:
    """One catalog entry.

    Attributes:
        key: ArchConfig field the answer is written to
        prompt: Label shown to the user
        kind: FreeText, Boolean or MultipleChoice
    """
    key: str
    prompt: str
    kind: QuestionKind


CATALOG: tuple[QuestionSpec, ...] = (
    QuestionSpec("hostname",            "Hostname",            FreeText()),
    QuestionSpec("username",            "Username",            FreeText()),
    QuestionSpec("password",            "Password",            FreeText()),
    QuestionSpec("timezone",            "Timezone",            MultipleChoice((
        "UTC", "America/New_York", "Europe/London", "Asia/Tokyo", "Australia/Sydney",
    ))),
    QuestionSpec("locale",              "Locale",              MultipleChoice((
        "en_US.UTF-8", "de_DE.UTF-8", "fr_FR.UTF-8", "ja_JP.UTF-8", "zh_CN.UTF-8",
    ))),
    QuestionSpec("keyboard_layout",     "Keyboard Layout",     MultipleChoice((
        "us", "de", "fr", "es", "jp",
    ))),
    QuestionSpec("format_type",         "Format Type",         MultipleChoice((
        "btrfs", "ext4", "xfs",
    ))),
    QuestionSpec("package_manager",     "Package Manager",     MultipleChoice((
        "pacman", "yay", "paru",
    ))),
    QuestionSpec("bootloader",          "Bootloader",          MultipleChoice((
        "grub", "systemd-boot",
    ))),
    QuestionSpec("desktop_environment", "Desktop Environment", MultipleChoice((
        "gnome", "kde", "xfce", "dwm", "wayland",
    ))),
    QuestionSpec("reflector_country",   "Reflector Country",   MultipleChoice((
        "US", "DE", "FR", "CA", "JP",
    ))),
    QuestionSpec("enable_ssh",          "Enable SSH",          Boolean()),
)


def visible_options(question: QuestionSpec, filter_text: str) -> list[str]:
    """Return the rows the user can currently select for *question*.

    MultipleChoice options are matched by case-insensitive substring
    against *filter_text*, keeping catalog order. Boolean questions ignore
    the filter. FreeText questions have no rows.
    """
    kind = question.kind
    if isinstance(kind, MultipleChoice):
        needle = filter_text.lower()
        return [opt for opt in kind.options if needle in opt.lower()]
    if isinstance(kind, Boolean):
        return list(BOOLEAN_LABELS)
    return []


def find_question(key: str, catalog=CATALOG) -> QuestionSpec:
    """Look up a catalog entry by its record field name."""
    for question in catalog:
        if question.key == key:
            return question
    raise KeyError(key)
