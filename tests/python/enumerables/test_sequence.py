import operator
from collections import OrderedDict, deque
from typing import Any

import pytest

from enumerables.errors import InvalidArgumentError
from enumerables.sequence import (
    Indexable,
    IndexableSequence,
    Lengthable,
    SequenceView,
    check_callback,
    check_sequence,
    is_truthy,
)


@pytest.mark.parametrize("value", [0, 0.0, "", [], {}, (), "false", object()])
def test_is_truthy(value: Any) -> None:
    assert is_truthy(value)


@pytest.mark.parametrize("value", [False, None])
def test_is_falsy(value: Any) -> None:
    assert not is_truthy(value)


@pytest.mark.parametrize("seq", [[], [1], (1, 2), "abc", range(3), deque([1, 2]), b"bytes"])
def test_capabilities(seq: Any) -> None:
    assert isinstance(seq, Lengthable)
    assert isinstance(seq, Indexable)
    assert isinstance(seq, IndexableSequence)
    check_sequence(seq)


@pytest.mark.parametrize("seq", [{}, {"a": 1}, OrderedDict(a=1)])
def test_check_sequence_rejects_mappings(seq: Any) -> None:
    with pytest.raises(InvalidArgumentError, match="associative container"):
        check_sequence(seq)


@pytest.mark.parametrize("seq", [set(), frozenset([1]), (x for x in []), 1, None])
def test_check_sequence_rejects_non_indexable(seq: Any) -> None:
    with pytest.raises(InvalidArgumentError) as error:
        check_sequence(seq)
    assert error.value.error_path == "sequence"


@pytest.mark.parametrize(
    "callback,arity",
    [
        (lambda a: a, 1),
        (lambda a, b: a, 2),
        (lambda *args: args, 1),
        (lambda *args: args, 2),
        (lambda a, b=1: a, 1),
        (operator.add, 2),
        (print, 1),
        (str, 1),
    ],
)
def test_check_callback(callback: Any, arity: int) -> None:
    check_callback(callback, arity, "callback")


@pytest.mark.parametrize(
    "callback,arity",
    [
        (None, 1),
        (1, 1),
        ("callback", 2),
        (lambda: None, 1),
        (lambda a: a, 2),
        (lambda a, b, c: a, 2),
        (operator.add, 1),
    ],
)
def test_check_callback_invalid(callback: Any, arity: int) -> None:
    with pytest.raises(InvalidArgumentError) as error:
        check_callback(callback, arity, "combiner")
    assert error.value.error_path == "combiner"
    assert str(error.value).startswith("[combiner] invalid argument: ")


def test_sequence_view() -> None:
    view = SequenceView(["a", "b", "c"])
    assert len(view) == 3
    assert list(view) == ["a", "b", "c"]
    assert view.to_list() == ["a", "b", "c"]
    assert view[0] == "a"
    assert view[-1] == "c"
    with pytest.raises(IndexError):
        view[3]
    with pytest.raises(TypeError):
        view["0"]  # type: ignore[index]


def test_sequence_view_with_index() -> None:
    view = SequenceView("xy", with_index=True)
    assert list(view) == [("x", 0), ("y", 1)]
    assert view[1] == ("y", 1)
    assert view[-2] == ("x", 0)


def test_sequence_view_is_restartable() -> None:
    view = SequenceView((1, 2, 3))
    it = iter(view)
    assert next(it) == 1
    assert list(view) == [1, 2, 3]
    assert list(it) == [2, 3]
    assert list(view) == [1, 2, 3]


def test_sequence_view_is_a_sequence() -> None:
    view = SequenceView([1, 2])
    assert isinstance(view, IndexableSequence)
    check_sequence(view)
