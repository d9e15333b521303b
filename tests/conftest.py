import pytest


class CountingSource:
  """A single-pass iterator that records how many elements were pulled from it."""

  def __init__(self, values):
    self._values = iter(values)
    self.pulls = 0

  def __iter__(self):
    return self

  def __next__(self):
    value = next(self._values)
    self.pulls += 1
    return value


class AsyncCountingSource:
  """The asynchronous counterpart of CountingSource."""

  def __init__(self, values):
    self._values = iter(values)
    self.pulls = 0

  def __aiter__(self):
    return self

  async def __anext__(self):
    try:
      value = next(self._values)
    except StopIteration:
      raise StopAsyncIteration from None
    self.pulls += 1
    return value


async def agen(values):
  for value in values:
    yield value


@pytest.fixture
def counting():
  return CountingSource


@pytest.fixture
def async_counting():
  return AsyncCountingSource
