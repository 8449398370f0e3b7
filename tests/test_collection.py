"""Tests for non-empty collections."""
# pyright: reportUnknownMemberType=false, reportUnknownVariableType=false

from collections import OrderedDict, deque
import copy

from hypothesis import given, strategies as st
import pandas as pd
import pytest

from valuewarden import (
  EmptyCollectionError,
  ErrorKind,
  NonEmptyCollection,
  NonEmptyDeque,
  NonEmptyDict,
  NonEmptyFrozenSet,
  NonEmptyIndex,
  NonEmptyList,
  NonEmptyOrderedDict,
  NonEmptySeries,
  NonEmptySet,
  NonEmptyTuple,
)

SHAPES = [
  (NonEmptyList, list),
  (NonEmptyTuple, tuple),
  (NonEmptySet, set),
  (NonEmptyFrozenSet, frozenset),
  (NonEmptyDeque, deque),
]

MAPPINGS = [
  (NonEmptyDict, dict),
  (NonEmptyOrderedDict, OrderedDict),
]


class TestConstruction:
  """Tests for validating construction across container shapes."""

  @pytest.mark.parametrize(("wrapper", "container"), SHAPES + MAPPINGS)
  def test_empty_rejected(self, wrapper, container):
    with pytest.raises(EmptyCollectionError, match="collection is empty") as exc_info:
      wrapper.new(container())
    assert exc_info.value.kind is ErrorKind.EMPTY

  @pytest.mark.parametrize(("wrapper", "container"), SHAPES)
  def test_single_element_accepted(self, wrapper, container):
    data = container([1])
    assert wrapper.new(data).into_inner() == data

  @pytest.mark.parametrize(("wrapper", "container"), MAPPINGS)
  def test_single_entry_accepted(self, wrapper, container):
    data = container([("a", 1)])
    assert wrapper.new(data).into_inner() == data

  @pytest.mark.parametrize(("wrapper", "container"), SHAPES + MAPPINGS)
  def test_into_inner_returns_equal_container(self, wrapper, container):
    data = container({1: 2, 3: 4}) if container in (dict, OrderedDict) else container([3, 1, 2])
    inner = wrapper.new(data).into_inner()
    assert inner == data
    assert type(inner) is container

  def test_order_preserved(self):
    assert NonEmptyList.new([3, 1, 2]).into_inner() == [3, 1, 2]
    assert list(NonEmptyDeque.new(deque([3, 1, 2])).into_inner()) == [3, 1, 2]
    assert list(NonEmptyDict.new({"b": 1, "a": 2}).into_inner()) == ["b", "a"]

  def test_wrong_container_type_raises_type_error(self):
    with pytest.raises(TypeError, match="expects list, got tuple"):
      NonEmptyList.new((1, 2))

  def test_iterator_rejected(self):
    """Test a one-shot iterator is refused rather than consumed."""
    with pytest.raises(TypeError, match="expects list"):
      NonEmptyList.new(iter([1]))

  def test_base_cannot_be_instantiated(self):
    with pytest.raises(TypeError, match="no container type"):
      NonEmptyCollection.new([1])

  def test_generic_alias_construction(self):
    wrapped = NonEmptyList[int]([1, 2, 3])
    assert type(wrapped) is NonEmptyList
    assert wrapped.into_inner() == [1, 2, 3]

  def test_unchecked_accepts_empty_container(self):
    """Test a deliberately invalid value is wrapped without raising."""
    wrapped = NonEmptyList.new_unchecked([])
    assert wrapped.into_inner() == []
    assert NonEmptyDict.new_unchecked({}).into_inner() == {}


class TestReadOnlyAccess:
  """Tests for the read-only conveniences."""

  def test_len_iter_contains(self):
    wrapped = NonEmptyList.new([1, 2, 3])
    assert len(wrapped) == 3
    assert list(wrapped) == [1, 2, 3]
    assert 2 in wrapped
    assert 5 not in wrapped

  def test_first(self):
    assert NonEmptyList.new([7, 8]).first() == 7
    assert NonEmptyDict.new({"k": 1, "j": 2}).first() == "k"

  def test_no_mutators(self):
    wrapped = NonEmptyList.new([1])
    assert not hasattr(wrapped, "append")
    assert not hasattr(wrapped, "pop")
    with pytest.raises(AttributeError, match="immutable"):
      wrapped._inner = []  # type: ignore[misc]


class TestOwnership:
  """Tests that the wrapper owns a snapshot of its container."""

  def test_clearing_source_keeps_wrapper_non_empty(self):
    data = [1]
    wrapped = NonEmptyList.new(data)
    data.clear()
    assert len(wrapped) >= 1
    assert wrapped.into_inner() == [1]

  @pytest.mark.parametrize(("wrapper", "container"), SHAPES + MAPPINGS)
  def test_clearing_unwrapped_value_keeps_wrapper_non_empty(self, wrapper, container):
    data = container({"a": 1}) if container in (dict, OrderedDict) else container([1])
    wrapped = wrapper.new(data)
    inner = wrapped.into_inner()
    if hasattr(inner, "clear"):
      inner.clear()
    assert len(wrapped) >= 1
    assert wrapped.first() in ("a", 1)

  def test_each_unwrap_is_a_fresh_copy(self):
    wrapped = NonEmptyDict.new({"k": 1})
    assert wrapped.into_inner() is not wrapped.into_inner()

  def test_snapshot_is_shallow(self):
    row = [1]
    wrapped = NonEmptyList.new([row])
    assert wrapped.first() is row

  def test_deque_maxlen_preserved(self):
    wrapped = NonEmptyDeque.new(deque([1, 2], maxlen=2))
    assert wrapped.into_inner().maxlen == 2

  def test_unchecked_takes_snapshot(self):
    data = {1, 2}
    wrapped = NonEmptySet.new_unchecked(data)
    data.clear()
    assert len(wrapped) == 2

  def test_series_source_mutation_not_visible(self):
    series = pd.Series([1, 2])
    wrapped = NonEmptySeries.new(series)
    series.iloc[0] = 99
    assert wrapped.first() == 1
    wrapped.into_inner().iloc[0] = 42
    assert wrapped.first() == 1


class TestEquality:
  """Tests for structural equality, ordering and hashing."""

  def test_equal_iff_inner_equal(self):
    assert NonEmptyList.new([1, 2]) == NonEmptyList.new([1, 2])
    assert NonEmptyList.new([1, 2]) != NonEmptyList.new([2, 1])
    assert NonEmptySet.new({1, 2}) == NonEmptySet.new({2, 1})

  def test_different_shapes_never_equal(self):
    assert NonEmptyList.new([1]) != NonEmptyTuple.new((1,))

  def test_ordering_delegates(self):
    assert NonEmptyList.new([1, 2]) < NonEmptyList.new([1, 3])
    assert NonEmptyTuple.new((2,)) > NonEmptyTuple.new((1, 9))

  def test_hash_delegates(self):
    assert hash(NonEmptyTuple.new((1, 2))) == hash((1, 2))
    assert hash(NonEmptyFrozenSet.new(frozenset({1}))) == hash(frozenset({1}))
    with pytest.raises(TypeError):
      hash(NonEmptyList.new([1]))

  def test_copy_and_deepcopy(self):
    wrapped = NonEmptyList.new([[1], [2]])
    shallow = copy.copy(wrapped)
    deep = copy.deepcopy(wrapped)
    assert shallow == wrapped
    assert deep == wrapped
    assert deep.into_inner() is not wrapped.into_inner()
    assert deep.into_inner()[0] is not wrapped.into_inner()[0]


class TestPandas:
  """Tests for pandas containers."""

  def test_series(self):
    series = pd.Series([1, 2, 3])
    wrapped = NonEmptySeries.new(series)
    assert wrapped.into_inner().equals(series)
    assert wrapped == NonEmptySeries.new(pd.Series([1, 2, 3]))
    assert wrapped != NonEmptySeries.new(pd.Series([1, 2]))
    with pytest.raises(EmptyCollectionError):
      NonEmptySeries.new(pd.Series([], dtype=float))

  def test_index(self):
    index = pd.Index(["a", "b"])
    assert NonEmptyIndex.new(index).into_inner().equals(index)
    with pytest.raises(EmptyCollectionError):
      NonEmptyIndex.new(pd.Index([]))

  def test_series_rejects_list(self):
    with pytest.raises(TypeError, match="expects Series"):
      NonEmptySeries.new([1, 2])

  def test_series_unhashable(self):
    with pytest.raises(TypeError):
      hash(NonEmptySeries.new(pd.Series([1])))


@given(items=st.lists(st.integers()))
def test_emptiness_property(items):
  """Property: construction succeeds iff the container has at least one element."""
  if items:
    assert NonEmptyList.new(items).into_inner() == items
    assert NonEmptySet.new(set(items)).into_inner() == set(items)
  else:
    with pytest.raises(EmptyCollectionError):
      NonEmptyList.new(items)
    with pytest.raises(EmptyCollectionError):
      NonEmptySet.new(set(items))
