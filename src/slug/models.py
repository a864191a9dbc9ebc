"""Data models for slug generation."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum


class Mode(Enum):
    """Built-in slug modes."""

    PRETTY = "pretty"
    RFC3986 = "rfc3986"


# Option keys a caller may override; everything else comes from the mode preset
OPTION_KEYS = ("replacement", "multicharmap", "charmap", "remove", "lower", "trim")


@dataclass
class ModePreset:
    """Formatting defaults bundled under a mode name."""

    replacement: str
    charmap: dict[str, str]
    multicharmap: dict[str, str]
    remove: re.Pattern[str] | None = None
    lower: bool = True
    trim: bool = True


@dataclass
class Defaults:
    """Process-wide defaults shared by every slug call on a store."""

    charmap: dict[str, str]
    multicharmap: dict[str, str]
    mode: str = Mode.PRETTY.value
    modes: dict[str, ModePreset] = field(default_factory=dict)

    @classmethod
    def build(cls, charmap: dict[str, str], multicharmap: dict[str, str]) -> "Defaults":
        """Return defaults whose presets all alias the given maps."""
        return cls(
            charmap=charmap,
            multicharmap=multicharmap,
            mode=Mode.PRETTY.value,
            modes={
                Mode.RFC3986.value: ModePreset(
                    replacement="-",
                    charmap=charmap,
                    multicharmap=multicharmap,
                ),
                Mode.PRETTY.value: ModePreset(
                    replacement="-",
                    charmap=charmap,
                    multicharmap=multicharmap,
                ),
            },
        )


@dataclass(frozen=True)
class SlugOptions:
    """Options resolved for a single slug call."""

    mode: str
    replacement: str
    charmap: dict[str, str]
    multicharmap: dict[str, str]
    remove: re.Pattern[str] | None
    lower: bool
    trim: bool

    @property
    def is_rfc3986(self) -> bool:
        """Check if the rfc3986 character rules apply."""
        return self.mode == Mode.RFC3986.value
