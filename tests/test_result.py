import pytest

from exprtree.result import DEFAULT_ERROR_MESSAGE, Error, Result


def test_default_error_message():
    assert Error().message == "DEFAULT ERROR"
    assert str(Error()) == DEFAULT_ERROR_MESSAGE


def test_error_message_kept():
    err = Error("cannot divide by zero")
    assert err.message == "cannot divide by zero"
    assert str(err) == "cannot divide by zero"


def test_ok_carries_value():
    result = Result.ok(3.0)
    assert result.is_success()
    assert result.value() == 3.0
    assert result.errors() == []


def test_ok_without_value():
    result = Result.ok()
    assert result.is_success()
    assert result.value() is None


def test_fail_single_error():
    result = Result.fail(Error("cannot divide by zero"))
    assert not result.is_success()
    assert result.errors() == [Error("cannot divide by zero")]
    assert result.value() is None


def test_fail_many_errors_keeps_order():
    errors = [Error("first"), Error("second")]
    result = Result.fail(errors)
    assert [e.message for e in result.errors()] == ["first", "second"]


def test_fail_copies_the_given_list():
    errors = [Error("first")]
    result = Result.fail(errors)
    errors.append(Error("second"))
    assert result.errors() == [Error("first")]


def test_errors_returns_independent_list():
    result = Result.fail(Error("first"))
    result.errors().clear()
    assert result.errors() == [Error("first")]


def test_fail_with_no_errors_rejected():
    with pytest.raises(ValueError):
        Result.fail([])


def test_equality():
    assert Result.ok(1) == Result.ok(1)
    assert Result.fail(Error("x")) == Result.fail([Error("x")])
    assert not (Result.ok(1) == Result.fail(Error("x")))