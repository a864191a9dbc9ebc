"""Slugifier for converting arbitrary text to URL-safe slugs."""

from __future__ import annotations

import logging
import re
import string
from typing import Any

from slug.errors import InvalidArgumentError, describe_type
from slug.models import SlugOptions
from slug.store import ConfigurationStore, OptionsArg
from slug.utils.surrogates import encode_base64, repair_surrogates

logger = logging.getLogger(__name__)

ASCII_ALNUM = frozenset(string.ascii_letters + string.digits)
RFC3986_UNRESERVED = frozenset("_-.~")

# ECMAScript whitespace; str.isspace() would also accept the C0 separators and NEL
WHITESPACE = frozenset(
    chr(code)
    for code in (
        0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20, 0xA0, 0x1680,
        *range(0x2000, 0x200B),
        0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF,
    )
)
_WHITESPACE_CHARS = "".join(sorted(WHITESPACE))
_WHITESPACE_RUN = re.compile("[" + "".join(re.escape(char) for char in _WHITESPACE_CHARS) + "]+")


def is_allowed(char: str, rfc3986: bool = False) -> bool:
    """Check if a character survives the disallowed-character filter.

    Pretty mode keeps ASCII letters, digits and whitespace. rfc3986 mode
    also keeps ``_``, ``-``, ``.`` and ``~``.
    """
    if char in ASCII_ALNUM or char in WHITESPACE:
        return True
    return rfc3986 and char in RFC3986_UNRESERVED


class Slugifier:
    """Converts strings to slugs using the maps held by a ConfigurationStore."""

    def __init__(self, store: ConfigurationStore | None = None) -> None:
        """Initialize the slugifier.

        Args:
            store: Configuration to read maps and presets from. A private
                store is created when omitted.
        """
        self.store = store if store is not None else ConfigurationStore()

    def slugify(self, text: str, options: OptionsArg = None, /, **overrides: Any) -> str:
        """Convert text to a slug.

        When transliteration leaves nothing, the text is repaired of lone
        surrogates, base64-encoded and slugified once more, so non-empty
        input never yields an empty slug.

        Args:
            text: The input string to slugify.
            options: A replacement string or a mapping of slug options.
            **overrides: Slug options applied on top of ``options``.

        Returns:
            The slug string.

        Raises:
            InvalidArgumentError: If text is not a string or an option is invalid.
            UnknownModeError: If the requested mode has no preset.
        """
        if not isinstance(text, str):
            raise InvalidArgumentError(
                f"slug() requires a string argument, received {describe_type(text)}"
            )

        with self.store.lock:
            resolved = self.store.resolve(options, **overrides)
            result = self.transform(text, resolved)

            if result == "" and text:
                encoded = encode_base64(repair_surrogates(text))
                logger.debug("Empty slug for %r, falling back to base64 %r", text, encoded)
                result = self.transform(encoded, resolved)

        return result

    def transform(self, text: str, options: SlugOptions) -> str:
        """Transliterate and sanitize text without the base64 fallback.

        Args:
            text: The input string.
            options: Resolved options for this call.

        Returns:
            The slug, possibly empty.
        """
        charmap = options.charmap
        multicharmap = options.multicharmap
        replacement = options.replacement
        rfc3986 = options.is_rfc3986

        # Longest keys first so overlapping sequences match greedily
        lengths = sorted({len(key) for key in multicharmap if key}, reverse=True)

        parts = []
        index = 0
        while index < len(text):
            for length in lengths:
                chunk = text[index:index + length]
                if len(chunk) == length and chunk in multicharmap:
                    parts.append(multicharmap[chunk])
                    index += length
                    break
            else:
                parts.append(self._substitute(text[index], charmap, replacement, rfc3986))
                index += 1

        result = "".join(parts)

        if options.remove is not None:
            result = options.remove.sub("", result)

        if options.trim:
            result = result.strip(_WHITESPACE_CHARS)

        # Collapse whitespace runs into a single replacement
        result = _WHITESPACE_RUN.sub(lambda _match: replacement, result)

        if options.lower:
            result = result.lower()

        return result

    @staticmethod
    def _substitute(char: str, charmap: Any, replacement: str, rfc3986: bool) -> str:
        """Map a single character.

        The replacement string is swapped for a space so it survives the
        disallowed-character filter and comes back through whitespace
        collapsing.
        """
        if char in charmap:
            mapped = charmap[char]
            return mapped.replace(replacement, " ") if replacement else mapped
        if replacement and char == replacement:
            return " "
        return char if is_allowed(char, rfc3986) else ""
