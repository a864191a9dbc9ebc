"""Tests for slug error types."""

import pytest

from slug import slug
from slug.errors import (
    InvalidArgumentError,
    MapFileError,
    SlugError,
    UnknownModeError,
    describe_type,
)


class TestErrorHierarchy:
    """Errors are catchable both as SlugError and as the builtin they refine."""

    def test_invalid_argument_is_type_error(self) -> None:
        assert issubclass(InvalidArgumentError, SlugError)
        assert issubclass(InvalidArgumentError, TypeError)

    def test_unknown_mode_is_value_error(self) -> None:
        assert issubclass(UnknownModeError, SlugError)
        assert issubclass(UnknownModeError, ValueError)

    def test_map_file_error_is_slug_error(self) -> None:
        assert issubclass(MapFileError, SlugError)


class TestInvalidArgumentMessages:
    """Error messages name the rejected type."""

    @pytest.mark.parametrize(
        "value, type_name",
        [(None, "None"), (1, "int"), (b"foo", "bytes"), (["foo"], "list")],
    )
    def test_non_string_text(self, value: object, type_name: str) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            slug(value)
        assert str(exc_info.value) == f"slug() requires a string argument, received {type_name}"

    def test_describe_type(self) -> None:
        assert describe_type(None) == "None"
        assert describe_type(3.5) == "float"
