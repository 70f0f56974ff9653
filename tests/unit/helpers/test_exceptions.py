"""Unit tests for nozombie.helpers.exceptions module.

Tests custom exception classes.
"""

import pytest

from nozombie.helpers.exceptions import (
    ComponentDeleteError,
    ComponentParseError,
    ConfigError,
    FilesystemReadError,
)


class TestPathErrors:
    """Tests for exceptions that carry the failing path."""

    @pytest.mark.unit
    @pytest.mark.parametrize("error_cls", [FilesystemReadError, ComponentDeleteError])
    def test_stores_path_and_prefixes_message(self, error_cls) -> None:
        """The path is kept as an attribute and leads the message."""
        error = error_cls("/src/Foo.tsx", "Permission denied")
        assert error.path == "/src/Foo.tsx"
        assert str(error) == "/src/Foo.tsx: Permission denied"

    @pytest.mark.unit
    def test_filesystem_read_error_can_be_raised(self) -> None:
        with pytest.raises(FilesystemReadError, match="No such file"):
            raise FilesystemReadError("/missing", "No such file or directory")


class TestPlainErrors:
    """Tests for message-only exceptions."""

    @pytest.mark.unit
    @pytest.mark.parametrize("error_cls", [ComponentParseError, ConfigError])
    def test_is_exception_with_message(self, error_cls) -> None:
        assert issubclass(error_cls, Exception)
        assert str(error_cls("bad input")) == "bad input"
