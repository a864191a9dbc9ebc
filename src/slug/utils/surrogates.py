"""Surrogate repair and base64 encoding for the empty-slug fallback."""

import base64

HIGH_SURROGATES = range(0xD800, 0xDC00)
LOW_SURROGATES = range(0xDC00, 0xE000)


def repair_char(text: str, index: int) -> tuple[str, int]:
    """Return the whole character at ``index`` and the index it ends on.

    Python strings may still carry UTF-16 surrogate halves, for example
    after decoding with ``surrogatepass`` or building text with ``chr()``.

    - A non-surrogate character is returned as is, index unchanged.
    - A high surrogate followed by a low surrogate is combined into the
      code point they encode, and the index moves onto the low half.
    - Any other surrogate is unpaired and becomes a single space,
      index unchanged.

    Args:
        text: The string being scanned.
        index: Position of the character to read.

    Returns:
        Tuple of the repaired character and the last index it consumed.

    Raises:
        IndexError: If index is outside the string.
    """
    if not 0 <= index < len(text):
        raise IndexError(f"Index {index} out of range for string of length {len(text)}")

    code = ord(text[index])
    if code not in HIGH_SURROGATES and code not in LOW_SURROGATES:
        return text[index], index

    if code in HIGH_SURROGATES:
        if index + 1 >= len(text):
            return " ", index
        following = ord(text[index + 1])
        if following not in LOW_SURROGATES:
            return " ", index
        combined = 0x10000 + ((code - 0xD800) << 10) + (following - 0xDC00)
        return chr(combined), index + 1

    # A low surrogate with a valid partner is consumed by the high half,
    # so reaching one here means it is unpaired
    return " ", index


def repair_surrogates(text: str) -> str:
    """Replace every unpaired surrogate in text with a space."""
    parts = []
    index = 0
    while index < len(text):
        char, index = repair_char(text, index)
        parts.append(char)
        index += 1
    return "".join(parts)


def encode_base64(text: str) -> str:
    """Base64-encode the UTF-8 bytes of text."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")
