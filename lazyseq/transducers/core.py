"""Core transducer implementation for lazy sequence operations.

Every concrete transducer implements the same transformation twice, once per
execution strategy: `sync` is a generator pulling from a regular iterable and
`async_` is an async generator awaiting each pull. Chaining never evaluates
anything; it only builds a tree of `CompositeTransducer` nodes.

Note:
    `TakeTransducer` and `ScanTransducer` keep their progress on the instance.
    A pipeline containing them is single-use: consuming it a second time
    resumes from the exhausted count or the accumulated value instead of
    starting over.
"""

from collections.abc import AsyncIterable
from collections.abc import AsyncIterator
from collections.abc import Iterable
from collections.abc import Iterator
from typing import Any

from lazyseq.helpers import get_logger
from lazyseq.helpers import probe
from lazyseq.transducers.types import BaseTransducer
from lazyseq.types import Contract
from lazyseq.types import Mapper
from lazyseq.types import Predicate
from lazyseq.types import Reducer
from lazyseq.types import SourceKind

logger = get_logger(__name__)

_MISSING: Any = object()


class Transducer[A, B](BaseTransducer[A, B], Contract[B]):
  """A transducer that can be chained with further operations.

  Each chaining method returns a new composite transducer whose output is
  the output of this one fed through the new stage.

  Example:
      >>> evens_doubled = identity().filter(lambda x: x % 2 == 0).map(lambda x: x * 2)
      >>> list(evens_doubled([1, 2, 3, 4]))
      [4, 8]
  """

  def __call__(self, data: Iterable[A] | AsyncIterable[A]) -> Iterable[B] | AsyncIterable[B]:
    """Drive the transducer with the strategy matching the source.

    Args:
        data: A synchronous or asynchronous iterable.

    Returns:
        A lazy iterable of the same kind as `data`.

    Raises:
        UnsupportedSourceError: If `data` is neither iterable nor async iterable.
    """
    if probe(data) is SourceKind.ASYNC:
      return self.async_(data)  # type: ignore
    return self.sync(data)  # type: ignore

  def compose[C](self, other: "Transducer[B, C]") -> "Transducer[A, C]":
    """Run `other` on the output of this transducer."""
    return compose(other, self)

  def decompose(self) -> list["Transducer[Any, Any]"]:
    """Return the leaf stages of this transducer in application order."""
    return decompose(self)

  def map[C](self, mapper: Mapper[B, C]) -> "Transducer[A, C]":
    return map(mapper, self)

  def filter(self, predicate: Predicate[B]) -> "Transducer[A, B]":
    return filter(predicate, self)

  def find(self, predicate: Predicate[B]) -> "Transducer[A, B]":
    return find(predicate, self)

  def first(self) -> "Transducer[A, B]":
    return first(self)

  def last(self) -> "Transducer[A, B]":
    return last(self)

  def take(self, count: int) -> "Transducer[A, B]":
    return take(count, self)

  def take_while(self, predicate: Predicate[B]) -> "Transducer[A, B]":
    return take_while(predicate, self)

  def scan[C](self, reducer: Reducer[B, C]) -> "Transducer[A, C]":
    return scan(reducer, self)

  def reduce[C](self, reducer: Reducer[B, C]) -> "Transducer[A, C]":
    return reduce(reducer, self)


class IdentityTransducer[A](Transducer[A, A]):
  """Passes the source through untouched."""

  def sync(self, iterable: Iterable[A]) -> Iterable[A]:
    return iterable

  def async_(self, iterable: AsyncIterable[A]) -> AsyncIterable[A]:
    return iterable


class MapTransducer[A, B](Transducer[A, B]):
  def __init__(self, mapper: Mapper[A, B]) -> None:
    self.mapper = mapper

  def sync(self, iterable: Iterable[A]) -> Iterator[B]:
    for value in iterable:
      yield self.mapper(value)

  async def async_(self, iterable: AsyncIterable[A]) -> AsyncIterator[B]:
    async for value in iterable:
      yield self.mapper(value)


class FilterTransducer[A](Transducer[A, A]):
  def __init__(self, predicate: Predicate[A]) -> None:
    self.predicate = predicate

  def sync(self, iterable: Iterable[A]) -> Iterator[A]:
    for value in iterable:
      if self.predicate(value):
        yield value

  async def async_(self, iterable: AsyncIterable[A]) -> AsyncIterator[A]:
    async for value in iterable:
      if self.predicate(value):
        yield value


class FirstTransducer[A](Transducer[A, A]):
  """Yields the first element and stops pulling from upstream."""

  def sync(self, iterable: Iterable[A]) -> Iterator[A]:
    for value in iterable:
      yield value
      return

  async def async_(self, iterable: AsyncIterable[A]) -> AsyncIterator[A]:
    async for value in iterable:
      yield value
      return


class LastTransducer[A](Transducer[A, A]):
  """Drains upstream and yields the final element.

  Known quirk: `None` doubles as the "nothing seen" marker, so an upstream
  whose final element is `None` produces an empty sequence.
  """

  def sync(self, iterable: Iterable[A]) -> Iterator[A]:
    last = None
    for last in iterable:
      pass
    if last is not None:
      yield last

  async def async_(self, iterable: AsyncIterable[A]) -> AsyncIterator[A]:
    last = None
    async for last in iterable:
      pass
    if last is not None:
      yield last


class TakeTransducer[A](Transducer[A, A]):
  """Yields at most `count` elements.

  `count` is decremented as elements are handed out, so an instance can only
  be consumed once. A count of zero never touches upstream.
  """

  def __init__(self, count: int) -> None:
    if count < 0:
      raise ValueError(f"take() count must be non-negative, got {count}")
    self.count = count

  def sync(self, iterable: Iterable[A]) -> Iterator[A]:
    if self.count == 0:
      return
    for value in iterable:
      yield value
      self.count -= 1
      if self.count == 0:
        return

  async def async_(self, iterable: AsyncIterable[A]) -> AsyncIterator[A]:
    if self.count == 0:
      return
    async for value in iterable:
      yield value
      self.count -= 1
      if self.count == 0:
        return


class TakeWhileTransducer[A](Transducer[A, A]):
  """Yields elements until the predicate first fails; the failing element is dropped."""

  def __init__(self, predicate: Predicate[A]) -> None:
    self.predicate = predicate

  def sync(self, iterable: Iterable[A]) -> Iterator[A]:
    for value in iterable:
      if not self.predicate(value):
        return
      yield value

  async def async_(self, iterable: AsyncIterable[A]) -> AsyncIterator[A]:
    async for value in iterable:
      if not self.predicate(value):
        return
      yield value


class ScanTransducer[A, B](Transducer[A, B]):
  """Yields the running fold after every element.

  The accumulator lives on the instance and starts from `reducer.identity()`
  unless one is given explicitly. A second consumption continues from the
  value the first one left behind.
  """

  def __init__(self, reducer: Reducer[A, B], accumulator: B = _MISSING) -> None:
    self.reducer = reducer
    self.accumulator: B = reducer.identity() if accumulator is _MISSING else accumulator

  def sync(self, iterable: Iterable[A]) -> Iterator[B]:
    for value in iterable:
      self.accumulator = self.reducer.call(self.accumulator, value)
      yield self.accumulator

  async def async_(self, iterable: AsyncIterable[A]) -> AsyncIterator[B]:
    async for value in iterable:
      self.accumulator = self.reducer.call(self.accumulator, value)
      yield self.accumulator


class CompositeTransducer[A, B, C](Transducer[A, C]):
  """Feeds the output of `inner` into `outer`."""

  def __init__(self, inner: Transducer[A, B], outer: Transducer[B, C]) -> None:
    self.inner = inner
    self.outer = outer

  def sync(self, iterable: Iterable[A]) -> Iterable[C]:
    return self.outer.sync(self.inner.sync(iterable))

  def async_(self, iterable: AsyncIterable[A]) -> AsyncIterable[C]:
    return self.outer.async_(self.inner.async_(iterable))


def compose[A, B, C](outer: Transducer[B, C], inner: Transducer[A, B]) -> CompositeTransducer[A, B, C]:
  """Compose two transducers, mathematical order: `inner` runs first.

  Args:
      outer: The stage applied to the output of `inner`.
      inner: The stage applied to the source.

  Returns:
      A transducer equivalent to running `inner` then `outer`.
  """
  logger.debug("Composing %s after %s", type(outer).__name__, type(inner).__name__)
  return CompositeTransducer(inner, outer)


def decompose(transducer: Transducer[Any, Any]) -> list[Transducer[Any, Any]]:
  """Flatten a composite tree into its leaf stages, first applied first."""
  if isinstance(transducer, CompositeTransducer):
    return [*decompose(transducer.inner), *decompose(transducer.outer)]
  return [transducer]


def identity[A]() -> IdentityTransducer[A]:
  """Create a transducer that changes nothing, the usual start of a chain."""
  return IdentityTransducer()


# alias
transducer = identity


def map[A, B, C](mapper: Mapper[B, C], transducer: Transducer[A, B]) -> Transducer[A, C]:
  return compose(MapTransducer(mapper), transducer)


def filter[A, B](predicate: Predicate[B], transducer: Transducer[A, B]) -> Transducer[A, B]:
  return compose(FilterTransducer(predicate), transducer)


def find[A, B](predicate: Predicate[B], transducer: Transducer[A, B]) -> Transducer[A, B]:
  """At most one element: the first one matching `predicate`."""
  return first(filter(predicate, transducer))


def first[A, B](transducer: Transducer[A, B]) -> Transducer[A, B]:
  return compose(FirstTransducer(), transducer)


def last[A, B](transducer: Transducer[A, B]) -> Transducer[A, B]:
  return compose(LastTransducer(), transducer)


def take[A, B](count: int, transducer: Transducer[A, B]) -> Transducer[A, B]:
  return compose(TakeTransducer(count), transducer)


def take_while[A, B](predicate: Predicate[B], transducer: Transducer[A, B]) -> Transducer[A, B]:
  return compose(TakeWhileTransducer(predicate), transducer)


def scan[A, B, C](reducer: Reducer[B, C], transducer: Transducer[A, B]) -> Transducer[A, C]:
  return compose(ScanTransducer(reducer), transducer)


def reduce[A, B, C](reducer: Reducer[B, C], transducer: Transducer[A, B]) -> Transducer[A, C]:
  """The fully folded value as a one-element sequence.

  Built on `last`, so a fold that ends in `None` yields nothing.
  """
  return last(scan(reducer, transducer))
