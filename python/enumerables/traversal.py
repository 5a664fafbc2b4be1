"""
Traversal functions over ordered, finite, indexable sequences.

Every function visits positions 0..len-1 in increasing order, each at most
once, never mutates the sequence and never keeps a reference to it or to the
supplied callbacks after returning. Exceptions raised by callbacks propagate
unchanged.

Truthiness follows 'is_truthy': only 'False' and 'None' are falsy.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Optional, Tuple, TypeVar, Union, overload

from .errors import EmptySequenceNoInitialError, InvalidArgumentError
from .logging import get_logger
from .sequence import IndexableSequence, SequenceView, check_callback, check_sequence, is_truthy

logger = get_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")


class _ArgumentSentinel:
    def __repr__(self) -> str:
        return "<absent>"


_ABSENT: Any = _ArgumentSentinel()


def _forward(sequence: IndexableSequence[T]) -> Iterator[Tuple[int, T]]:
    for i in range(len(sequence)):
        yield i, sequence[i]


@overload
def each(sequence: IndexableSequence[T], callback: None = None) -> SequenceView[T]: ...


@overload
def each(sequence: IndexableSequence[T], callback: Callable[[T], Any]) -> IndexableSequence[T]: ...


def each(
    sequence: IndexableSequence[T], callback: Optional[Callable[[T], Any]] = None
) -> Union[IndexableSequence[T], SequenceView[T]]:
    """
    Call 'callback' with every element and return the sequence itself.

    Without a callback, a restartable 'SequenceView' over the elements is returned instead.
    """

    check_sequence(sequence)
    if callback is None:
        return SequenceView(sequence)
    check_callback(callback, 1, "callback")

    for _, element in _forward(sequence):
        callback(element)
    return sequence


def each_with_index(
    sequence: IndexableSequence[T], callback: Optional[Callable[[T, int], Any]] = None
) -> Union[IndexableSequence[T], SequenceView[T]]:
    """
    Call 'callback(element, index)' for every element and return the sequence itself.

    Without a callback, a restartable 'SequenceView' of '(element, index)' pairs is returned.
    """

    check_sequence(sequence)
    if callback is None:
        return SequenceView(sequence, with_index=True)
    check_callback(callback, 2, "callback")

    for i, element in _forward(sequence):
        callback(element, i)
    return sequence


def select(sequence: IndexableSequence[T], predicate: Callable[[T], Any]) -> List[T]:
    """Return a new list of the elements the predicate holds for, in input order."""
    check_sequence(sequence)
    check_callback(predicate, 1, "predicate")

    return [element for _, element in _forward(sequence) if is_truthy(predicate(element))]


def all_(sequence: IndexableSequence[T], predicate: Optional[Callable[[T], Any]] = None) -> bool:
    """
    Universal check, 'True' for an empty sequence.

    A predicate has to return exactly 'True' for every element, merely truthy values do not count.
    Without a predicate every element has to be truthy.
    """

    check_sequence(sequence)
    if predicate is not None:
        check_callback(predicate, 1, "predicate")

    for _, element in _forward(sequence):
        if predicate is not None:
            if predicate(element) is not True:
                return False
        elif not is_truthy(element):
            return False
    return True


def any_(sequence: IndexableSequence[T], predicate: Optional[Callable[[T], Any]] = None) -> bool:
    """Existential check, 'False' for an empty sequence. The predicate is called at most once per element."""

    check_sequence(sequence)
    if predicate is not None:
        check_callback(predicate, 1, "predicate")

    for _, element in _forward(sequence):
        result = predicate(element) if predicate is not None else element
        if is_truthy(result):
            return True
    return False


def none(sequence: IndexableSequence[T], predicate: Optional[Callable[[T], Any]] = None) -> bool:
    """Return 'False' at the first element the predicate (or the element itself) holds for, 'True' otherwise."""
    check_sequence(sequence)
    if predicate is not None:
        check_callback(predicate, 1, "predicate")

    for _, element in _forward(sequence):
        result = predicate(element) if predicate is not None else element
        if is_truthy(result):
            return False
    return True


def count(sequence: IndexableSequence[T], predicate: Optional[Callable[[T], Any]] = None) -> int:
    """Number of elements the predicate holds for, or the length of the sequence without one."""
    check_sequence(sequence)
    if predicate is None:
        return len(sequence)
    check_callback(predicate, 1, "predicate")

    matching = 0
    for _, element in _forward(sequence):
        if is_truthy(predicate(element)):
            matching += 1
    return matching


@overload
def map_(sequence: IndexableSequence[T], transform: None = None) -> SequenceView[T]: ...


@overload
def map_(sequence: IndexableSequence[T], transform: Callable[[T], U]) -> List[U]: ...


def map_(
    sequence: IndexableSequence[T], transform: Optional[Callable[[T], U]] = None
) -> Union[List[U], SequenceView[T]]:
    """
    Return a new list with 'transform' applied to every element.

    Without a transform, a restartable 'SequenceView' over the untransformed elements is returned.
    """

    check_sequence(sequence)
    if transform is None:
        return SequenceView(sequence)
    check_callback(transform, 1, "transform")

    return [transform(element) for _, element in _forward(sequence)]


def _inject_arguments(args: Tuple[Any, ...], initial: Any, combiner: Any) -> Tuple[Any, Callable[[Any, Any], Any]]:
    if len(args) > 2:
        raise InvalidArgumentError(f"expected at most 2 positional arguments, got {len(args)}", "args")

    if len(args) == 2:
        if initial is not _ABSENT:
            raise InvalidArgumentError("given both positionally and by keyword", "initial")
        if combiner is not _ABSENT:
            raise InvalidArgumentError("given both positionally and by keyword", "combiner")
        initial, combiner = args
    elif len(args) == 1:
        # a single positional argument is the combiner, unless the combiner was given by keyword
        if combiner is _ABSENT:
            combiner = args[0]
        elif initial is _ABSENT:
            initial = args[0]
        else:
            raise InvalidArgumentError("unexpected positional argument, both initial and combiner given", "args")

    if combiner is _ABSENT:
        raise InvalidArgumentError("a combiner is required", "combiner")
    check_callback(combiner, 2, "combiner")
    return initial, combiner


def inject(sequence: IndexableSequence[T], *args: Any, initial: Any = _ABSENT, combiner: Any = _ABSENT) -> Any:
    """
    Left fold of the sequence.

    Accepted forms are 'inject(seq, combiner)' and 'inject(seq, initial, combiner)', where either
    argument may also be passed by keyword. Without an initial value the fold starts with the first
    element as accumulator and combines from the second one on. An explicit 'None' initial value
    is a real initial value.

    Raises:
        InvalidArgumentError: The call form is malformed or the combiner is not a binary callable.
        EmptySequenceNoInitialError: The sequence is empty and no initial value was given.
    """

    check_sequence(sequence)
    initial, combiner = _inject_arguments(args, initial, combiner)

    positions = _forward(sequence)
    if initial is _ABSENT:
        logger.debug(f"Folding {len(sequence)} element(s) without initial value")
        first = next(positions, None)
        if first is None:
            raise EmptySequenceNoInitialError()
        accumulator = first[1]
    else:
        logger.debug(f"Folding {len(sequence)} element(s) with initial value")
        accumulator = initial

    for _, element in positions:
        accumulator = combiner(accumulator, element)
    return accumulator


reduce = inject
