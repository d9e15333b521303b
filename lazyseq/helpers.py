from collections.abc import AsyncIterable
from collections.abc import Iterable
from collections.abc import Iterator
import logging
from logging import NullHandler
from typing import Any
from typing import TypeGuard

from lazyseq.errors import UnsupportedSourceError
from lazyseq.types import SourceKind


def get_logger(name: str) -> logging.Logger:
  """Return a library logger that stays silent unless the application configures logging."""
  logger = logging.getLogger(name)
  logger.addHandler(NullHandler())
  return logger


def is_iterable(instance: Any) -> TypeGuard[Iterable[Any]]:
  """Check if a value supports the synchronous iteration protocol.

  The check is structural: any object whose type defines `__iter__` qualifies,
  regardless of its class hierarchy, and so does an object that `iter()`
  accepts through the older `__getitem__` sequence protocol.

  Args:
      instance: The value to inspect.

  Returns:
      True if `iter(instance)` is expected to succeed, False otherwise.
  """
  if isinstance(instance, Iterable):
    return True
  if not hasattr(type(instance), "__getitem__"):
    return False
  try:
    iter(instance)
  except TypeError:
    return False
  return True


def is_async_iterable(instance: Any) -> TypeGuard[AsyncIterable[Any]]:
  """Check if a value supports the asynchronous iteration protocol.

  Args:
      instance: The value to inspect.

  Returns:
      True if the value's type defines `__aiter__`, False otherwise.
  """
  return isinstance(instance, AsyncIterable)


def probe(source: Any) -> SourceKind:
  """Classify a source by the iteration protocol it exposes.

  The asynchronous protocol is checked first, so an object implementing both
  is treated as asynchronous.

  Raises:
      UnsupportedSourceError: If the source exposes neither protocol.
  """
  if is_async_iterable(source):
    return SourceKind.ASYNC
  if is_iterable(source):
    return SourceKind.SYNC
  raise UnsupportedSourceError(source)


def iterable[T](*values: T) -> Iterator[T]:
  """Yield the given values once. Handy for building single-pass test sources."""
  yield from values


def sync_array[T](source: Iterable[T]) -> list[T]:
  """Drain a synchronous iterable into a list."""
  return list(source)


async def async_array[T](source: AsyncIterable[T]) -> list[T]:
  """Drain an asynchronous iterable into a list, awaiting every element."""
  return [value async for value in source]
