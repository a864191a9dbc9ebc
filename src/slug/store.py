"""Configuration store for slug generation.

The store owns the substitution maps and mode presets read by every slug
call. The top-level maps, the ``Defaults`` object and each built-in preset
all reference the same two dict instances, so a change made through any
one of them is visible through all.
"""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Mapping, MutableMapping
from pathlib import Path
from typing import Any

from slug.charmaps import CHARMAP, MULTICHARMAP
from slug.errors import InvalidArgumentError, UnknownModeError, describe_type
from slug.models import OPTION_KEYS, Defaults, Mode, ModePreset, SlugOptions
from slug.utils.config import MapFileManager

logger = logging.getLogger(__name__)

OptionsArg = str | Mapping[str, Any] | SlugOptions | None


class ConfigurationStore:
    """Holds the live substitution maps and mode presets."""

    def __init__(self) -> None:
        """Initialize the store with fresh copies of the built-in tables."""
        self._lock = threading.RLock()
        self._defaults = Defaults.build(dict(CHARMAP), dict(MULTICHARMAP))

    @property
    def lock(self) -> threading.RLock:
        """Lock serializing map reads and writes."""
        return self._lock

    @property
    def defaults(self) -> Defaults:
        """Default mode, mode presets and the live maps."""
        return self._defaults

    @defaults.setter
    def defaults(self, value: Defaults) -> None:
        if not isinstance(value, Defaults):
            raise InvalidArgumentError(f"defaults must be Defaults, received {describe_type(value)}")
        with self._lock:
            self._defaults = value

    @property
    def charmap(self) -> MutableMapping[str, str]:
        """The live single-character map."""
        return self.defaults.charmap

    @charmap.setter
    def charmap(self, value: MutableMapping[str, str]) -> None:
        _require_mutable_mapping("charmap", value)
        with self._lock:
            self._rebind("charmap", self.defaults.charmap, value)

    @property
    def multicharmap(self) -> MutableMapping[str, str]:
        """The live multi-character map."""
        return self.defaults.multicharmap

    @multicharmap.setter
    def multicharmap(self, value: MutableMapping[str, str]) -> None:
        _require_mutable_mapping("multicharmap", value)
        with self._lock:
            self._rebind("multicharmap", self.defaults.multicharmap, value)

    def resolve(self, options: OptionsArg = None, **overrides: Any) -> SlugOptions:
        """Merge caller options over the selected mode's preset.

        The caller's options object is copied, never modified.

        Args:
            options: A replacement string, a mapping of option keys, or
                previously resolved SlugOptions.
            **overrides: Option keys applied on top of ``options``.

        Returns:
            SlugOptions for a single slug call.

        Raises:
            InvalidArgumentError: If an option has the wrong type.
            UnknownModeError: If the mode has no preset.
        """
        given = _options_to_dict(options)
        given.update(overrides)

        unknown = sorted(str(key) for key in set(given) - {"mode", *OPTION_KEYS})
        if unknown:
            logger.debug("Ignoring unknown slug option(s): %s", ", ".join(unknown))

        with self._lock:
            mode = given.get("mode") or self.defaults.mode
            if isinstance(mode, Mode):
                mode = mode.value
            preset = self.defaults.modes.get(mode)
            if preset is None:
                raise UnknownModeError(f"Unknown slug mode: {mode!r}")

            values = {
                key: given[key] if key in given else getattr(preset, key)
                for key in OPTION_KEYS
            }

        replacement = values["replacement"]
        if not isinstance(replacement, str):
            raise InvalidArgumentError(
                f"replacement must be a string, received {describe_type(replacement)}"
            )
        for key in ("charmap", "multicharmap"):
            if not isinstance(values[key], Mapping):
                raise InvalidArgumentError(
                    f"{key} must be a mapping, received {describe_type(values[key])}"
                )

        return SlugOptions(
            mode=mode,
            replacement=replacement,
            charmap=values["charmap"],
            multicharmap=values["multicharmap"],
            remove=_compile_remove(values["remove"]),
            lower=bool(values["lower"]),
            trim=bool(values["trim"]),
        )

    def extend(self, custom_map: Mapping[str, str]) -> None:
        """Merge substitutions into the live maps.

        Single code point keys go to the charmap, longer keys to the
        multicharmap.

        Raises:
            InvalidArgumentError: If the map is not a mapping of non-empty
                strings to strings.
        """
        if not isinstance(custom_map, Mapping):
            raise InvalidArgumentError(
                f"extend() requires a mapping, received {describe_type(custom_map)}"
            )

        single: dict[str, str] = {}
        multi: dict[str, str] = {}
        for key, value in custom_map.items():
            if not isinstance(key, str) or not key:
                raise InvalidArgumentError(f"Substitution keys must be non-empty strings: {key!r}")
            if not isinstance(value, str):
                raise InvalidArgumentError(
                    f"Substitution for {key!r} must be a string, received {describe_type(value)}"
                )
            if len(key) == 1:
                single[key] = value
            else:
                multi[key] = value

        with self._lock:
            self.charmap.update(single)
            self.multicharmap.update(multi)

        logger.debug(
            "Extended charmap with %d and multicharmap with %d substitutions",
            len(single),
            len(multi),
        )

    def extend_from_file(self, path: Path | str) -> None:
        """Load a JSON substitution map from path and extend with it."""
        self.extend(MapFileManager(Path(path)).load())

    def reset(self) -> None:
        """Restore the built-in maps and presets.

        New dicts replace the live maps, so references taken before the
        reset keep their old contents.
        """
        with self._lock:
            charmap = dict(CHARMAP)
            multicharmap = dict(MULTICHARMAP)
            fresh = Defaults.build(charmap, multicharmap)

            self._rebind("charmap", self.defaults.charmap, charmap)
            self._rebind("multicharmap", self.defaults.multicharmap, multicharmap)
            self.defaults.mode = fresh.mode
            for name, preset in fresh.modes.items():
                current = self.defaults.modes.get(name)
                if current is None:
                    self.defaults.modes[name] = preset
                    continue
                current.replacement = preset.replacement
                current.remove = preset.remove
                current.lower = preset.lower
                current.trim = preset.trim

        logger.debug("Reset slug maps and presets to built-in defaults")

    def _rebind(self, attr: str, old: Mapping[str, str], new: MutableMapping[str, str]) -> None:
        """Point every holder of the old map at the new one."""
        setattr(self.defaults, attr, new)
        for name, preset in self.defaults.modes.items():
            if name in (Mode.PRETTY.value, Mode.RFC3986.value) or getattr(preset, attr) is old:
                setattr(preset, attr, new)


def _options_to_dict(options: OptionsArg) -> dict[str, Any]:
    """Copy caller options into a plain dict."""
    if options is None:
        return {}
    if isinstance(options, str):
        return {"replacement": options}
    if isinstance(options, SlugOptions):
        return {"mode": options.mode, **{key: getattr(options, key) for key in OPTION_KEYS}}
    if isinstance(options, Mapping):
        return dict(options)
    raise InvalidArgumentError(
        f"slug() options must be a string or a mapping, received {describe_type(options)}"
    )


def _compile_remove(remove: Any) -> re.Pattern[str] | None:
    """Compile the removal pattern, if any."""
    if remove is None or isinstance(remove, re.Pattern):
        return remove
    if not isinstance(remove, str):
        raise InvalidArgumentError(
            f"remove must be a pattern or a string, received {describe_type(remove)}"
        )
    try:
        return re.compile(remove)
    except re.error as e:
        raise InvalidArgumentError(f"Invalid remove pattern {remove!r}: {e}") from e


def _require_mutable_mapping(name: str, value: Any) -> None:
    if not isinstance(value, MutableMapping):
        raise InvalidArgumentError(f"{name} must be a mutable mapping, received {describe_type(value)}")
