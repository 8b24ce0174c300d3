from __future__ import annotations

import pytest

from core.domain.models import Result
from core.errors import ExecutionFailure, TermkitError, ValidationFailure, format_error, wrap_error


def test_format_error_extracts_exception_message():
    assert format_error(RuntimeError("Something went wrong")) == "Something went wrong"


def test_format_error_returns_strings_as_is():
    assert format_error("String error") == "String error"


@pytest.mark.parametrize("value", [None, 42, {}, object()])
def test_format_error_default_for_unknown_types(value):
    assert format_error(value) == "Unknown error"


def test_format_error_custom_default():
    assert format_error(None, "Custom default") == "Custom default"


def test_wrap_error():
    assert wrap_error(ConnectionError("Connection refused"), "Failed to connect") == "Failed to connect: Connection refused"
    assert wrap_error("timeout", "Request failed") == "Request failed: timeout"
    assert wrap_error(None, "Operation failed") == "Operation failed: Unknown error"


def test_execution_failure_defaults_code_to_one():
    failure = ExecutionFailure("killed")
    assert failure.code == 1
    assert str(failure) == "Command failed with code 1: killed"


def test_execution_failure_appends_stderr():
    failure = ExecutionFailure("exited", code=2, stderr="boom")
    assert str(failure) == "Command failed with code 2: exited\nboom"


def test_error_hierarchy():
    assert issubclass(ValidationFailure, ValueError)
    assert issubclass(ValidationFailure, TermkitError)
    assert issubclass(ExecutionFailure, RuntimeError)
    assert issubclass(ExecutionFailure, TermkitError)


def test_result_constructors():
    ok = Result[int].ok(5)
    assert ok.success is True and ok.data == 5 and ok.error is None

    failed = Result[int].fail("nope")
    assert failed.success is False and failed.data is None and failed.error == "nope"

