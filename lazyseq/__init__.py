"""lazyseq - lazy, composable sequence transformations for iterables and async iterables.

A transformation is described once as a transducer and runs unchanged over
synchronous sources (`Sequence`) or asynchronous ones (`AsyncSequence`).
Nothing is evaluated until the result is consumed.
"""

from lazyseq.errors import LazySeqError
from lazyseq.errors import UnsupportedSourceError
from lazyseq.generators import add
from lazyseq.generators import increment
from lazyseq.generators import iterate
from lazyseq.generators import range
from lazyseq.generators import repeat
from lazyseq.generators import subtract
from lazyseq.helpers import async_array
from lazyseq.helpers import iterable
from lazyseq.helpers import sync_array
from lazyseq.reducers import Sum
from lazyseq.reducers import create_reducer
from lazyseq.sequence import AsyncSequence
from lazyseq.sequence import Sequence
from lazyseq.sequence import sequence
from lazyseq.transducers import Transducer
from lazyseq.transducers import compose
from lazyseq.transducers import decompose
from lazyseq.transducers import identity
from lazyseq.transducers import transducer
from lazyseq.types import Reducer

__all__ = [
  "Sequence",
  "AsyncSequence",
  "sequence",
  "Transducer",
  "transducer",
  "identity",
  "compose",
  "decompose",
  "Reducer",
  "Sum",
  "create_reducer",
  "range",
  "iterate",
  "repeat",
  "increment",
  "add",
  "subtract",
  "iterable",
  "sync_array",
  "async_array",
  "LazySeqError",
  "UnsupportedSourceError",
]
