"""Exceptions raised by lazyseq.

Errors raised by user callables (mappers, predicates, reducers) and by the
underlying sources are never wrapped: they reach the consumer unchanged at
the pull that triggered them. Only misuse of the library itself is reported
through the types below.
"""


class LazySeqError(Exception):
  """Base class for errors raised by lazyseq itself."""


class UnsupportedSourceError(LazySeqError, TypeError):
  """A source exposes neither the synchronous nor the asynchronous iteration protocol."""

  def __init__(self, source: object):
    self.source = source
    super().__init__(f"Cannot build a sequence from {type(source).__name__}: it is neither iterable nor async iterable")
