import pytest

from src.libs.result import Error, Return


def test_ok_result_exposes_value():
    result = Return.ok({"status": "sent"})

    assert result.is_ok()
    assert not result.is_err()
    assert result.value == {"status": "sent"}
    with pytest.raises(ValueError):
        result.error


def test_err_result_exposes_error():
    result = Return.err(Error("INVALID_TOKEN", "Invalid or expired password reset token"))

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
    with pytest.raises(ValueError):
        result.value


def test_ok_none_is_still_ok():
    assert Return.ok(None).is_ok()
