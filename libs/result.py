from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Result(Generic[T]):
    def __init__(self, value=None, error=None):
        self._value = value
        self._error = error

    def is_ok(self) -> bool:
        return self._error is None

    def is_err(self) -> bool:
        return self._error is not None

    @property
    def value(self) -> T:
        return self._value

    @property
    def error(self) -> Optional[Exception]:
        return self._error


class RemoteCallResult(Result[T]):
    """Outcome of one request/response exchange with a remote service.

    Carries the HTTP status (None when no response was received) next to
    either the decoded value or the error describing the failure.
    """

    def __init__(self, value=None, error=None, status_code: Optional[int] = None):
        super().__init__(value=value, error=error)
        self._status_code = status_code

    @property
    def status_code(self) -> Optional[int]:
        return self._status_code

    def unwrap(self) -> T:
        if self._error is not None:
            raise self._error
        return self._value

    def __repr__(self) -> str:
        if self.is_err():
            return f"RemoteCallResult(status_code={self._status_code}, error={self._error!r})"
        return f"RemoteCallResult(status_code={self._status_code}, value={self._value!r})"


class Return:
    @staticmethod
    def ok(value, status_code: Optional[int] = None):
        return RemoteCallResult(value=value, status_code=status_code)

    @staticmethod
    def err(error, status_code: Optional[int] = None):
        return RemoteCallResult(error=error, status_code=status_code)
