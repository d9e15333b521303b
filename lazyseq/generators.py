"""Unbounded and bounded numeric sequences built from the sequence vocabulary.

Each function returns a fresh `Sequence` with its own state on every call.
"""

from collections.abc import Callable
from collections.abc import Iterator
from numbers import Real
from typing import overload

from lazyseq.helpers import get_logger
from lazyseq.sequence import Sequence
from lazyseq.sequence import sequence

logger = get_logger(__name__)

DEFAULT_STEP = 1


def iterate[T](generator: Callable[[T], T], value: T) -> Sequence[T]:
  """Yield `value`, `generator(value)`, `generator(generator(value))`, ... forever."""

  def iterations() -> Iterator[T]:
    current = value
    while True:
      yield current
      current = generator(current)

  return sequence(iterations)


def repeat[T](generator: Callable[[], T]) -> Sequence[T]:
  """Yield the result of calling `generator` afresh for every element, forever."""

  def repetitions() -> Iterator[T]:
    while True:
      yield generator()

  return sequence(repetitions)


def increment[N: Real](n: N) -> N:
  return n + 1  # type: ignore


@overload
def add[N: Real](a: N) -> Callable[[N], N]: ...
@overload
def add[N: Real](a: N, b: N) -> N: ...


def add(a, b=None):
  """Add two numbers, or return a function adding `a` when `b` is omitted."""
  if b is None:
    return lambda b: a + b
  return a + b


@overload
def subtract[N: Real](a: N) -> Callable[[N], N]: ...
@overload
def subtract[N: Real](a: N, b: N) -> N: ...


def subtract(a, b=None):
  """Compute `a - b`, or return a function subtracting `a` from its argument when `b` is omitted."""
  if b is None:
    return lambda b: b - a
  return a - b


def range[N: Real](start: N, end: N | None = None, step: N = DEFAULT_STEP) -> Sequence[N]:  # type: ignore
  """Count from `start`, optionally up or down to `end` inclusive.

  Without `end` the sequence counts up by one forever. With `end`, the
  direction comes from comparing the bounds and only the magnitude of `step`
  is used, so `range(10, 0, 3)` and `range(10, 0, -3)` both yield
  10, 7, 4, 1. Counting stops before the first value past `end`.

  Args:
      start: The first value.
      end: Optional inclusive bound.
      step: Distance between consecutive values; its sign is ignored.

  Returns:
      A sequence of numbers.

  Raises:
      ValueError: If `end` is given and `step` is zero.

  Example:
      >>> range(0, 10, 3).to_list()
      [0, 3, 6, 9]
  """
  if end is not None and step == 0:
    raise ValueError("range() step must not be zero")

  logger.debug("Creating range from %s to %s by %s", start, end, step)

  def numbers() -> Iterator[N]:
    if end is None:
      yield from iterate(increment, start)
      return
    magnitude = abs(step)
    if end < start:
      yield from iterate(subtract(magnitude), start).take_while(lambda n: n >= end)
    else:
      yield from iterate(add(magnitude), start).take_while(lambda n: n <= end)

  return sequence(numbers)
