"""Tests for the Transducer classes and builders."""

import pytest

from lazyseq import Sum
from lazyseq import compose
from lazyseq import create_reducer
from lazyseq import decompose
from lazyseq import identity
from lazyseq import transducer
from lazyseq.transducers import CompositeTransducer
from lazyseq.transducers import FilterTransducer
from lazyseq.transducers import FirstTransducer
from lazyseq.transducers import IdentityTransducer
from lazyseq.transducers import LastTransducer
from lazyseq.transducers import MapTransducer
from lazyseq.transducers import ScanTransducer
from lazyseq.transducers import TakeTransducer
from lazyseq.transducers import TakeWhileTransducer
from lazyseq.transducers import core as builders


async def agen(values):
  for value in values:
    yield value


class TestTransducerBasics:
  """Test core transducer functionality."""

  def test_identity_returns_source_unchanged(self):
    """Test that the identity transducer hands back the very same iterable."""
    data = [1, 2, 3]
    assert identity().sync(data) is data

  def test_transducer_alias(self):
    """Test that transducer() is an alias for identity()."""
    assert isinstance(transducer(), IdentityTransducer)

  def test_call_with_iterable(self):
    """Test calling a transducer on a list drives it synchronously."""
    doubled = identity().map(lambda x: x * 2)
    assert list(doubled([1, 2, 3])) == [2, 4, 6]

  @pytest.mark.asyncio
  async def test_call_with_async_iterable(self):
    """Test calling a transducer on an async iterable drives it asynchronously."""
    doubled = identity().map(lambda x: x * 2)
    assert [x async for x in doubled(agen([1, 2, 3]))] == [2, 4, 6]

  def test_call_with_unsupported_source(self):
    """Test calling a transducer on a non-iterable raises TypeError."""
    with pytest.raises(TypeError):
      identity()(42)

  def test_building_is_lazy(self):
    """Test that chaining evaluates nothing."""
    calls = []
    pipeline = identity().map(lambda x: calls.append(x) or x)
    result = pipeline.sync([1, 2, 3])
    assert calls == []
    assert list(result) == [1, 2, 3]
    assert calls == [1, 2, 3]


class TestTransducerOperations:
  """Test individual transducer stages."""

  def test_map(self):
    """Test map transforms each element in order."""
    assert list(MapTransducer(str).sync([1, 2, 3])) == ["1", "2", "3"]

  def test_filter(self):
    """Test filter keeps only matching elements."""
    assert list(FilterTransducer(lambda x: x > 1).sync([3, 1, 2])) == [3, 2]

  def test_filter_empty_input(self):
    """Test filter over empty input is empty."""
    assert list(FilterTransducer(lambda x: True).sync([])) == []

  def test_first(self):
    """Test first yields only the first element."""
    assert list(FirstTransducer().sync([7, 8, 9])) == [7]

  def test_first_empty(self):
    """Test first over empty input is empty rather than an error."""
    assert list(FirstTransducer().sync([])) == []

  def test_last(self):
    """Test last yields only the final element."""
    assert list(LastTransducer().sync([7, 8, 9])) == [9]

  def test_last_drops_trailing_none(self):
    """Test the known quirk: a final None is indistinguishable from no element."""
    assert list(LastTransducer().sync([1, None])) == []

  def test_take(self):
    """Test take yields at most n elements."""
    assert list(TakeTransducer(2).sync([1, 2, 3])) == [1, 2]

  def test_take_more_than_available(self):
    """Test take with n larger than the input yields everything."""
    assert list(TakeTransducer(10).sync([1, 2, 3])) == [1, 2, 3]

  def test_take_negative_count(self):
    """Test take rejects a negative count."""
    with pytest.raises(ValueError):
      TakeTransducer(-1)

  def test_take_while(self):
    """Test take_while stops at the first failing element without yielding it."""
    assert list(TakeWhileTransducer(lambda x: x < 3).sync([1, 2, 3, 1])) == [1, 2]

  def test_scan(self):
    """Test scan yields the running sum."""
    assert list(ScanTransducer(Sum()).sync([1, 2, 3])) == [1, 3, 6]

  def test_scan_with_explicit_accumulator(self):
    """Test scan can start from a given accumulator instead of the identity."""
    assert list(ScanTransducer(Sum(), 10).sync([1, 2])) == [11, 13]

  def test_scan_with_function_reducer(self):
    """Test scan with a reducer built from a function and a seed factory."""
    collect = create_reducer(lambda acc, x: acc + [x], identity_factory=list)
    assert list(ScanTransducer(collect).sync("ab")) == [["a"], ["a", "b"]]

  def test_reduce(self):
    """Test reduce folds everything into one element."""
    assert list(identity().reduce(Sum()).sync([1, 2, 3, 4])) == [10]

  def test_reduce_empty(self):
    """Test reduce over empty input yields nothing."""
    assert list(identity().reduce(Sum()).sync([])) == []

  def test_find(self):
    """Test find yields the first match, or nothing."""
    even = identity().find(lambda x: x % 2 == 0)
    assert list(even.sync([1, 2, 3, 4])) == [2]
    assert list(identity().find(lambda x: x % 2 == 0).sync([1, 3, 5])) == []


class TestTransducerComposition:
  """Test composition and decomposition."""

  def test_compose_runs_inner_first(self):
    """Test compose(outer, inner) applies inner then outer."""
    composed = compose(MapTransducer(str), MapTransducer(lambda x: x + 1))
    assert list(composed.sync([1, 2])) == ["2", "3"]

  def test_compose_method_follows_chaining_order(self):
    """Test a.compose(b) runs a then b."""
    composed = MapTransducer(lambda x: x + 1).compose(MapTransducer(lambda x: x * 10))
    assert list(composed.sync([1])) == [20]

  def test_chaining_builds_composites(self):
    """Test each chaining call wraps the previous transducer."""
    pipeline = identity().map(str)
    assert isinstance(pipeline, CompositeTransducer)
    assert isinstance(pipeline.inner, IdentityTransducer)
    assert isinstance(pipeline.outer, MapTransducer)

  def test_decompose_preserves_order(self):
    """Test decompose lists the stages in the order they apply."""
    pipeline = identity().map(str).filter(bool).take(2)
    stages = [type(stage) for stage in pipeline.decompose()]
    assert stages == [IdentityTransducer, MapTransducer, FilterTransducer, TakeTransducer]

  def test_decompose_derived_operations(self):
    """Test find and reduce are built from smaller stages."""
    find_stages = [type(s) for s in decompose(identity().find(bool))]
    reduce_stages = [type(s) for s in decompose(identity().reduce(Sum()))]
    assert find_stages == [IdentityTransducer, FilterTransducer, FirstTransducer]
    assert reduce_stages == [IdentityTransducer, ScanTransducer, LastTransducer]

  def test_decompose_leaf(self):
    """Test decomposing a single stage returns just that stage."""
    stage = MapTransducer(str)
    assert decompose(stage) == [stage]

  def test_composition_is_associative(self):
    """Test grouping does not change the result or the stage order."""
    a = MapTransducer(lambda x: x + 1)
    b = FilterTransducer(lambda x: x % 2 == 0)
    c = MapTransducer(lambda x: x * 3)
    left = compose(c, compose(b, a))
    right = compose(compose(c, b), a)
    assert list(left.sync(range(10))) == list(right.sync(range(10))) == [6, 12, 18, 24, 30]
    assert decompose(left) == decompose(right) == [a, b, c]

  def test_map_then_filter_matches_manual_interleaving(self):
    """Test map followed by filter equals applying both per element by hand."""
    data = list(range(20))
    f = lambda x: x * 7 % 5  # noqa: E731
    p = lambda x: x > 1  # noqa: E731
    expected = []
    for x in data:
      y = f(x)
      if p(y):
        expected.append(y)
    assert list(identity().map(f).filter(p).sync(data)) == expected


class TestTransducerState:
  """Test the single-use behavior of stateful stages."""

  def test_take_is_single_use(self):
    """Test that a spent take yields nothing on the second run."""
    pipeline = identity().take(2)
    assert list(pipeline.sync([1, 2, 3])) == [1, 2]
    assert list(pipeline.sync([1, 2, 3])) == []

  def test_scan_keeps_accumulating(self):
    """Test that a second run of scan continues from the previous total."""
    pipeline = identity().scan(Sum())
    assert list(pipeline.sync([1, 2, 3])) == [1, 3, 6]
    assert list(pipeline.sync([1, 2, 3])) == [7, 9, 12]

  def test_stateless_stages_are_reusable(self):
    """Test map and filter can be driven any number of times."""
    pipeline = identity().map(lambda x: x * 2).filter(lambda x: x > 2)
    assert list(pipeline.sync([1, 2, 3])) == [4, 6]
    assert list(pipeline.sync([1, 2, 3])) == [4, 6]


class TestFunctionalBuilders:
  """Test the module-level builders behind the chaining methods."""

  def test_builders_match_methods(self):
    """Test each builder composes the same stage as its method counterpart."""
    built = builders.take(2, builders.filter(lambda x: x > 1, builders.map(lambda x: x + 1, identity())))
    chained = identity().map(lambda x: x + 1).filter(lambda x: x > 1).take(2)
    assert list(built.sync([0, 1, 2, 3])) == list(chained.sync([0, 1, 2, 3])) == [2, 3]
    assert [type(s) for s in built.decompose()] == [type(s) for s in chained.decompose()]

  def test_reduce_and_find_builders(self):
    """Test the derived builders."""
    assert list(builders.reduce(Sum(), identity()).sync([1, 2, 3])) == [6]
    assert list(builders.find(lambda x: x > 1, identity()).sync([1, 2, 3])) == [2]
    assert list(builders.last(builders.take_while(lambda x: x < 3, identity())).sync([1, 2, 3])) == [2]
