"""Unit tests for Result / RemoteCallResult"""
import pytest
from libs.result import Result, RemoteCallResult, Return


class TestRemoteCallResult:

    def test_ok_result_carries_value_and_status(self):
        result = Return.ok({"count": 1}, status_code=200)

        assert isinstance(result, Result)
        assert result.is_ok()
        assert not result.is_err()
        assert result.value == {"count": 1}
        assert result.status_code == 200
        assert result.unwrap() == {"count": 1}

    def test_err_result_raises_on_unwrap(self):
        error = RuntimeError("boom")
        result = Return.err(error, status_code=500)

        assert result.is_err()
        assert result.error is error
        assert result.value is None
        with pytest.raises(RuntimeError, match="boom"):
            result.unwrap()

    def test_status_defaults_to_none(self):
        result = RemoteCallResult(error=ConnectionError("refused"))

        assert result.status_code is None
        assert "refused" in repr(result)
