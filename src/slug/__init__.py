"""Slug generation: transliterate and sanitize text into URL-safe slugs.

The module-level functions share one process-wide ConfigurationStore.
Its maps are shared mutable state: ``extend()`` changes them for every
later call and ``reset()`` swaps in fresh copies of the built-in tables.
Create a separate ``ConfigurationStore`` and ``Slugifier`` for isolated
configuration.
"""

import logging
import sys
import types
from collections.abc import Mapping, MutableMapping
from typing import Any

from slug.charmaps import CHARMAP, MULTICHARMAP
from slug.errors import InvalidArgumentError, MapFileError, SlugError, UnknownModeError
from slug.models import Defaults, Mode, ModePreset, SlugOptions
from slug.slugifier import Slugifier
from slug.store import ConfigurationStore, OptionsArg

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

_default_slugifier = Slugifier(ConfigurationStore())


def get_store() -> ConfigurationStore:
    """Return the process-wide configuration store."""
    return _default_slugifier.store


def slug(text: str, options: OptionsArg = None, /, **overrides: Any) -> str:
    """Convert text to a slug using the process-wide store.

    Examples:
        >>> slug("foo bar baz")
        'foo-bar-baz'
        >>> slug("Café", mode="pretty")
        'cafe'
        >>> slug("foo bar baz", "_")
        'foo_bar_baz'
    """
    return _default_slugifier.slugify(text, options, **overrides)


def extend(custom_map: Mapping[str, str]) -> None:
    """Add substitutions to the process-wide maps."""
    get_store().extend(custom_map)


def reset() -> None:
    """Restore the process-wide maps and presets to the built-in tables."""
    get_store().reset()


class _SlugModule(types.ModuleType):
    """Module type whose map attributes read and write the live store."""

    @property
    def charmap(self) -> MutableMapping[str, str]:
        return get_store().charmap

    @charmap.setter
    def charmap(self, value: MutableMapping[str, str]) -> None:
        get_store().charmap = value

    @property
    def multicharmap(self) -> MutableMapping[str, str]:
        return get_store().multicharmap

    @multicharmap.setter
    def multicharmap(self, value: MutableMapping[str, str]) -> None:
        get_store().multicharmap = value

    @property
    def defaults(self) -> Defaults:
        return get_store().defaults

    @defaults.setter
    def defaults(self, value: Defaults) -> None:
        get_store().defaults = value


sys.modules[__name__].__class__ = _SlugModule


__all__ = [
    "CHARMAP",
    "ConfigurationStore",
    "Defaults",
    "InvalidArgumentError",
    "MULTICHARMAP",
    "MapFileError",
    "Mode",
    "ModePreset",
    "SlugError",
    "SlugOptions",
    "Slugifier",
    "UnknownModeError",
    "extend",
    "get_store",
    "reset",
    "slug",
]
