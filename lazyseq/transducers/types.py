from abc import ABC
from abc import abstractmethod
from collections.abc import AsyncIterable
from collections.abc import Iterable


class BaseTransducer[A, B](ABC):
  """
  Abstract base class for all transducer types.

  A transducer describes a transformation from a sequence of A to a sequence
  of B once, and can drive it over either kind of source: `sync` pulls from a
  regular iterable, `async_` awaits each pull from an async iterable. Both
  methods must yield the same elements and stop at the same point.
  """

  @abstractmethod
  def sync(self, iterable: Iterable[A]) -> Iterable[B]:
    """Lazily transform a synchronous iterable."""
    raise NotImplementedError

  @abstractmethod
  def async_(self, iterable: AsyncIterable[A]) -> AsyncIterable[B]:
    """Lazily transform an asynchronous iterable."""
    raise NotImplementedError
