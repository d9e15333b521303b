"""Contracts shared by transducers and sequence facades."""

from abc import ABC
from abc import abstractmethod
from collections.abc import Callable
from enum import Enum

type Mapper[A, B] = Callable[[A], B]
type Predicate[A] = Callable[[A], bool]


class Reducer[A, B](ABC):
  """A fold step bundled with the value the fold starts from.

  `identity` is called once per fold, so implementations returning a mutable
  seed should build a fresh one on every call.
  """

  @abstractmethod
  def call(self, accumulator: B, value: A) -> B:
    raise NotImplementedError

  @abstractmethod
  def identity(self) -> B:
    raise NotImplementedError


class SourceKind(Enum):
  """The iteration protocol a source was found to support."""

  SYNC = "sync"
  ASYNC = "async"


class Contract[A](ABC):
  """The chaining vocabulary shared by transducers and sequences.

  Every operation is lazy and returns a new object of the implementing kind;
  nothing is evaluated until the result is consumed.
  """

  @abstractmethod
  def map[B](self, mapper: Mapper[A, B]) -> "Contract[B]": ...

  @abstractmethod
  def filter(self, predicate: Predicate[A]) -> "Contract[A]": ...

  @abstractmethod
  def find(self, predicate: Predicate[A]) -> "Contract[A]": ...

  @abstractmethod
  def first(self) -> "Contract[A]": ...

  @abstractmethod
  def last(self) -> "Contract[A]": ...

  @abstractmethod
  def take(self, count: int) -> "Contract[A]": ...

  @abstractmethod
  def take_while(self, predicate: Predicate[A]) -> "Contract[A]": ...

  @abstractmethod
  def scan[B](self, reducer: Reducer[A, B]) -> "Contract[B]": ...

  @abstractmethod
  def reduce[B](self, reducer: Reducer[A, B]) -> "Contract[B]": ...
