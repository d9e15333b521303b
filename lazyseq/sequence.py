"""Lazy sequence facades and the `sequence` factory."""

from collections.abc import AsyncIterable
from collections.abc import AsyncIterator
from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Iterator
from typing import Any
from typing import Self
from typing import overload

from lazyseq.helpers import get_logger
from lazyseq.helpers import is_async_iterable
from lazyseq.helpers import is_iterable
from lazyseq.helpers import probe
from lazyseq.transducers import Transducer
from lazyseq.transducers import identity
from lazyseq.types import Contract
from lazyseq.types import Mapper
from lazyseq.types import Predicate
from lazyseq.types import Reducer
from lazyseq.types import SourceKind

logger = get_logger(__name__)


class BaseSequence[A](Contract[A]):
  """Pairs an unconsumed source with a transducer stack.

  Chaining methods never touch the source. Each returns a new facade of the
  same kind that shares the source and extends the stack by one stage.

  Note:
      The source is shared, not copied. When it is a single-pass iterator
      (a generator, a file, a network stream) every facade derived from it
      draws from the same elements, and consuming one exhausts them for the
      others. Consuming two such facades concurrently is a usage error and
      is not guarded against.
  """

  def __init__(self, source: Any, transducer: Transducer[Any, A] | None = None) -> None:
    self.source = source
    self.transducer: Transducer[Any, A] = transducer if transducer is not None else identity()

  def _pipe(self, transducer: Transducer[Any, Any]) -> Any:
    """Return a facade over the same source driven by `transducer`."""
    return type(self)(self.source, transducer)

  def apply[B](self, transducer: Transducer[A, B]) -> "BaseSequence[B]":
    """Append a prebuilt transducer to the stack.

    This lets a pipeline be defined once as a bare transducer and reused over
    both synchronous and asynchronous sources.

    Example:
        >>> evens = identity().filter(lambda x: x % 2 == 0)
        >>> Sequence.of([1, 2, 3, 4]).apply(evens).to_list()
        [2, 4]
    """
    return self._pipe(self.transducer.compose(transducer))

  def map[B](self, mapper: Mapper[A, B]) -> "BaseSequence[B]":
    """Transform every element with `mapper`."""
    return self._pipe(self.transducer.map(mapper))

  def filter(self, predicate: Predicate[A]) -> Self:
    """Keep only the elements for which `predicate` holds."""
    return self._pipe(self.transducer.filter(predicate))

  def find(self, predicate: Predicate[A]) -> Self:
    """Keep only the first element for which `predicate` holds."""
    return self._pipe(self.transducer.find(predicate))

  def first(self) -> Self:
    return self._pipe(self.transducer.first())

  def last(self) -> Self:
    """Keep only the final element. A final `None` is dropped."""
    return self._pipe(self.transducer.last())

  def take(self, count: int) -> Self:
    """Keep at most `count` elements.

    The resulting facade is single-use: once the count is spent, consuming it
    again yields nothing.
    """
    return self._pipe(self.transducer.take(count))

  def take_while(self, predicate: Predicate[A]) -> Self:
    """Keep elements up to, not including, the first one failing `predicate`."""
    return self._pipe(self.transducer.take_while(predicate))

  def scan[B](self, reducer: Reducer[A, B]) -> "BaseSequence[B]":
    """Emit the running fold after each element. Single-use, like `take`."""
    return self._pipe(self.transducer.scan(reducer))

  def reduce[B](self, reducer: Reducer[A, B]) -> "BaseSequence[B]":
    """Fold the whole sequence into a single element."""
    return self._pipe(self.transducer.reduce(reducer))


class Sequence[A](BaseSequence[A]):
  """A lazy, chainable view over a synchronous iterable.

  Example:
      >>> Sequence.of(range(10)).filter(lambda x: x % 2 == 0).map(lambda x: x * 10).take(3).to_list()
      [0, 20, 40]
  """

  def __init__(self, source: Iterable[Any], transducer: Transducer[Any, A] | None = None) -> None:
    super().__init__(source, transducer)

  @classmethod
  def of[T](cls, source: Iterable[Any], transducer: Transducer[Any, T] | None = None) -> "Sequence[T]":
    """Wrap a synchronous iterable without probing it."""
    return cls(source, transducer)  # type: ignore

  def apply[B](self, transducer: Transducer[A, B]) -> "Sequence[B]":
    return super().apply(transducer)  # type: ignore[return-value]

  def map[B](self, mapper: Mapper[A, B]) -> "Sequence[B]":
    return super().map(mapper)  # type: ignore[return-value]

  def scan[B](self, reducer: Reducer[A, B]) -> "Sequence[B]":
    return super().scan(reducer)  # type: ignore[return-value]

  def reduce[B](self, reducer: Reducer[A, B]) -> "Sequence[B]":
    return super().reduce(reducer)  # type: ignore[return-value]

  def __iter__(self) -> Iterator[A]:
    """Drive the transducer stack against the source.

    Errors raised by the source or by any mapper, predicate or reducer
    propagate from the `next()` call that triggered them.
    """
    return iter(self.transducer.sync(self.source))

  def to_list(self) -> list[A]:
    """Execute the pipeline and return the results as a list (terminal operation)."""
    return list(self)

  def each(self, function: Callable[[A], Any]) -> None:
    """Apply a function to each element for its side effects (terminal operation)."""
    for item in self:
      function(item)

  def consume(self) -> None:
    """Run the pipeline to completion, discarding the results (terminal operation)."""
    for _ in self:
      pass


class AsyncSequence[A](BaseSequence[A]):
  """A lazy, chainable view over an asynchronous iterable.

  Every pull may suspend; pulls from one facade never overlap.

  Example:
      >>> async def numbers():
      ...   for n in range(5):
      ...     yield n
      >>> await AsyncSequence.of(numbers()).map(lambda x: x + 1).to_list()
      [1, 2, 3, 4, 5]
  """

  def __init__(self, source: AsyncIterable[Any], transducer: Transducer[Any, A] | None = None) -> None:
    super().__init__(source, transducer)

  @classmethod
  def of[T](cls, source: AsyncIterable[Any], transducer: Transducer[Any, T] | None = None) -> "AsyncSequence[T]":
    """Wrap an asynchronous iterable without probing it."""
    return cls(source, transducer)  # type: ignore

  def apply[B](self, transducer: Transducer[A, B]) -> "AsyncSequence[B]":
    return super().apply(transducer)  # type: ignore[return-value]

  def map[B](self, mapper: Mapper[A, B]) -> "AsyncSequence[B]":
    return super().map(mapper)  # type: ignore[return-value]

  def scan[B](self, reducer: Reducer[A, B]) -> "AsyncSequence[B]":
    return super().scan(reducer)  # type: ignore[return-value]

  def reduce[B](self, reducer: Reducer[A, B]) -> "AsyncSequence[B]":
    return super().reduce(reducer)  # type: ignore[return-value]

  def __aiter__(self) -> AsyncIterator[A]:
    return aiter(self.transducer.async_(self.source))

  async def to_list(self) -> list[A]:
    """Await every element and return them as a list (terminal operation)."""
    return [item async for item in self]

  async def each(self, function: Callable[[A], Any]) -> None:
    """Apply a function to each element for its side effects (terminal operation)."""
    async for item in self:
      function(item)

  async def consume(self) -> None:
    """Run the pipeline to completion, discarding the results (terminal operation)."""
    async for _ in self:
      pass


type Source[A] = Iterable[A] | AsyncIterable[A] | Callable[[], Iterable[A]] | Callable[[], AsyncIterable[A]]


@overload
def sequence[A](source: AsyncIterable[A], transducer: None = None) -> AsyncSequence[A]: ...
@overload
def sequence[A](source: Iterable[A], transducer: None = None) -> Sequence[A]: ...
@overload
def sequence[A](source: Callable[[], AsyncIterable[A]], transducer: None = None) -> AsyncSequence[A]: ...
@overload
def sequence[A](source: Callable[[], Iterable[A]], transducer: None = None) -> Sequence[A]: ...
@overload
def sequence[A, B](source: AsyncIterable[B], transducer: Transducer[B, A]) -> AsyncSequence[A]: ...
@overload
def sequence[A, B](source: Iterable[B], transducer: Transducer[B, A]) -> Sequence[A]: ...


def sequence(source: Source[Any], transducer: Transducer[Any, Any] | None = None) -> Sequence[Any] | AsyncSequence[Any]:
  """Wrap a source in the facade matching its iteration protocol.

  The source is classified once, here. Facades derived from the result by
  chaining never look at it again.

  Args:
      source: One of:
              - a synchronous iterable
              - an asynchronous iterable
              - a zero-argument callable returning either, such as a
                generator function or an async generator function. It is
                called immediately; a generator's body still only runs when
                the sequence is consumed.
      transducer: Optional transducer stack to start from.

  Returns:
      An `AsyncSequence` for async iterables, otherwise a `Sequence`.

  Raises:
      UnsupportedSourceError: If the source, after calling it when it is a
          callable, is neither iterable nor async iterable.
  """
  if callable(source) and not is_async_iterable(source) and not is_iterable(source):
    source = source()

  match probe(source):
    case SourceKind.ASYNC:
      logger.debug("Wrapping %s in an AsyncSequence", type(source).__name__)
      return AsyncSequence.of(source, transducer)
    case SourceKind.SYNC:
      logger.debug("Wrapping %s in a Sequence", type(source).__name__)
      return Sequence.of(source, transducer)
