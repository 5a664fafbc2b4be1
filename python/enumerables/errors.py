from __future__ import annotations


class BaseEnumerablesError(Exception):
    """Base exception class for all enumerables errors."""

    def __init__(self, msg: str, error_path: str = "") -> None:
        super().__init__(msg)
        self._msg = f"[{error_path}] {msg}" if error_path else msg
        self._error_path = error_path

    @property
    def error_path(self) -> str:
        return self._error_path

    def __str__(self) -> str:
        return self._msg


class InvalidArgumentError(BaseEnumerablesError):
    """Exception class for arguments a traversal cannot work with."""

    def __init__(self, msg: str, error_path: str = "") -> None:
        msg = f"invalid argument: {msg}"
        super().__init__(msg, error_path)


class EmptySequenceNoInitialError(BaseEnumerablesError):
    """Exception class for folding an empty sequence without initial value."""

    def __init__(self, msg: str = "cannot fold an empty sequence without an initial value") -> None:
        super().__init__(msg, "sequence")

