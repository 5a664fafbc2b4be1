from __future__ import annotations

import inspect
from collections.abc import Mapping
from typing import Any, Generic, Iterator, List, Tuple, TypeVar, Union

from typing_extensions import Protocol, runtime_checkable

from .errors import InvalidArgumentError

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Lengthable(Protocol):
    def __len__(self) -> int: ...


@runtime_checkable
class Indexable(Protocol[T_co]):
    def __getitem__(self, index: int) -> T_co: ...


@runtime_checkable
class IndexableSequence(Lengthable, Indexable[T_co], Protocol[T_co]):
    """Anything with a length and zero-based positional access."""


def is_truthy(value: Any) -> bool:
    """Only 'False' and 'None' are falsy, everything else (0, "", [], ...) is truthy."""
    return value is not False and value is not None


def check_sequence(sequence: Any) -> None:
    if isinstance(sequence, Mapping):
        raise InvalidArgumentError(
            f"associative container '{type(sequence).__name__}' is not an ordered sequence", "sequence"
        )
    if not isinstance(sequence, IndexableSequence):
        raise InvalidArgumentError(
            f"'{type(sequence).__name__}' does not support length query and positional access", "sequence"
        )


def check_callback(callback: Any, arity: int, name: str) -> None:
    if not callable(callback):
        raise InvalidArgumentError(f"expected a callable, got '{type(callback).__name__}'", name)

    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        # some builtins do not expose their signature
        return

    try:
        signature.bind(*([None] * arity))
    except TypeError as e:
        raise InvalidArgumentError(f"cannot be called with {arity} positional argument(s): {e}", name) from e


class SequenceView(Generic[T]):
    """
    Restartable lazy view over a sequence.

    Every iteration starts again from the first position and reads the
    underlying sequence at that time. With 'with_index' the view yields
    '(element, index)' pairs.
    """

    def __init__(self, sequence: IndexableSequence[T], with_index: bool = False) -> None:
        self._sequence = sequence
        self._with_index = with_index

    def __iter__(self) -> Iterator[Union[T, Tuple[T, int]]]:
        for i in range(len(self._sequence)):
            yield (self._sequence[i], i) if self._with_index else self._sequence[i]

    def __len__(self) -> int:
        return len(self._sequence)

    def __getitem__(self, index: int) -> Union[T, Tuple[T, int]]:
        if not isinstance(index, int):
            raise TypeError(f"view indices must be integers, not '{type(index).__name__}'")
        if index < 0:
            index += len(self._sequence)
        if not 0 <= index < len(self._sequence):
            raise IndexError("view index out of range")
        element = self._sequence[index]
        return (element, index) if self._with_index else element

    def to_list(self) -> List[Union[T, Tuple[T, int]]]:
        return list(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._sequence!r}, with_index={self._with_index})"

