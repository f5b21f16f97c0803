"""Tests for the exception hierarchy."""

import pytest

import yggdrasilctl
from yggdrasilctl.exceptions import (
    CliError,
    ConnectError,
    DecodeError,
    EncodeError,
    MalformedResponseError,
    ProtocolError,
    UsageError,
)

_SUBCLASSES = [
    UsageError,
    ConnectError,
    EncodeError,
    DecodeError,
    ProtocolError,
    MalformedResponseError,
]


class TestExceptionHierarchy:
    def test_cli_error_is_exception(self):
        assert issubclass(CliError, Exception)

    @pytest.mark.parametrize("cls", _SUBCLASSES)
    def test_subclass_of_cli_error(self, cls):
        assert issubclass(cls, CliError)

    @pytest.mark.parametrize("cls", [CliError] + _SUBCLASSES)
    def test_exit_code(self, cls):
        assert cls.exit_code == 1

    def test_message_preserved(self):
        assert str(ProtocolError("Admin socket returned an error: disabled")) == (
            "Admin socket returned an error: disabled"
        )


class TestPackageExports:
    @pytest.mark.parametrize("cls", [CliError] + _SUBCLASSES)
    def test_re_exported(self, cls):
        assert getattr(yggdrasilctl, cls.__name__) is cls
