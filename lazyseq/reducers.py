"""Ready-made reducers for `scan` and `reduce`."""

from collections.abc import Callable
from typing import Any

from lazyseq.types import Reducer

_MISSING: Any = object()


class Sum(Reducer[Any, Any]):
  """Adds elements together, starting from 0."""

  def call(self, accumulator: Any, value: Any) -> Any:
    return accumulator + value

  def identity(self) -> Any:
    return 0


sum = Sum()


class FunctionReducer[A, B](Reducer[A, B]):
  """Adapts a plain two-argument function and a seed to the Reducer contract.

  Exactly one of `identity` and `identity_factory` is used: the seed is
  returned as given, the factory is called once per fold.
  """

  def __init__(
    self,
    function: Callable[[B, A], B],
    identity: B = _MISSING,
    *,
    identity_factory: Callable[[], B] | None = None,
  ) -> None:
    if (identity is _MISSING) == (identity_factory is None):
      raise ValueError("Exactly one of identity and identity_factory must be given")
    self.function = function
    self._identity = identity
    self._identity_factory = identity_factory

  def call(self, accumulator: B, value: A) -> B:
    return self.function(accumulator, value)

  def identity(self) -> B:
    if self._identity_factory is not None:
      return self._identity_factory()
    return self._identity


def create_reducer[A, B](
  function: Callable[[B, A], B],
  identity: B = _MISSING,
  *,
  identity_factory: Callable[[], B] | None = None,
) -> Reducer[A, B]:
  """Create a reducer from a fold function and its starting value.

  Args:
      function: Combines the accumulator with the next element.
      identity: The seed value, returned as is even when it is callable.
      identity_factory: A zero-argument function building the seed. Use it
                        (e.g. `list`) for mutable seeds so that every fold
                        starts from a fresh object.

  Returns:
      A reducer usable with `scan` and `reduce`.

  Raises:
      ValueError: If neither or both of `identity` and `identity_factory` are given.
  """
  return FunctionReducer(function, identity, identity_factory=identity_factory)
