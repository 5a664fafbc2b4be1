from .constants import VERSION
from .errors import BaseEnumerablesError, EmptySequenceNoInitialError, InvalidArgumentError
from .sequence import Indexable, IndexableSequence, Lengthable, SequenceView, is_truthy
from .traversal import all_, any_, count, each, each_with_index, inject, map_, none, reduce, select

__version__ = VERSION

__all__ = [
    "BaseEnumerablesError",
    "EmptySequenceNoInitialError",
    "Indexable",
    "IndexableSequence",
    "InvalidArgumentError",
    "Lengthable",
    "SequenceView",
    "all_",
    "any_",
    "count",
    "each",
    "each_with_index",
    "inject",
    "is_truthy",
    "map_",
    "none",
    "reduce",
    "select",
]
