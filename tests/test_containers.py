# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for Pair, OrderedSet, and OrderedMap."""

import copy

import pytest
from hypothesis import given, settings, strategies as st

from genro_bst import (
    BST,
    KeyNotFoundError,
    OrderedMap,
    OrderedSet,
    Pair,
    swap,
)
from genro_bst import config as bst_config


@pytest.fixture
def checked(monkeypatch):
    """Validate the tree after every mutation."""
    monkeypatch.setenv("GENRO_BST_CHECK_INVARIANTS", "1")
    bst_config.reset_runtime_config_cache()
    yield
    monkeypatch.delenv("GENRO_BST_CHECK_INVARIANTS", raising=False)
    bst_config.reset_runtime_config_cache()


class TestPair:
    """Tests for Pair."""

    def test_compares_by_key(self):
        """Test ordering and equality ignore the value."""
        assert Pair(1, 'a') == Pair(1, 'b')
        assert Pair(1, 'z') < Pair(2, 'a')
        assert Pair(3) >= Pair(2)
        assert hash(Pair(1, 'a')) == hash(Pair(1, 'b'))

    def test_unpack(self):
        """Test a pair unpacks as key, value."""
        key, value = Pair('k', 'v')
        assert (key, value) == ('k', 'v')
        assert Pair('k', 'v').as_tuple() == ('k', 'v')

    def test_not_equal_to_tuple(self):
        """Test pairs only compare with pairs."""
        assert Pair(1, 2) != (1, 2)

    def test_repr(self):
        """Test string representation."""
        assert repr(Pair(1, 'a')) == "Pair(1, 'a')"


class TestOrderedMapBasic:
    """Tests for OrderedMap access and insertion."""

    def test_source_from_dict(self):
        """Test creating a map from a dict sorts the keys."""
        m = OrderedMap({'b': 2, 'a': 1, 'c': 3})
        assert list(m) == ['a', 'b', 'c']
        assert list(m.values()) == [1, 2, 3]
        assert list(m.items()) == [('a', 1), ('b', 2), ('c', 3)]

    def test_source_from_list(self):
        """Test creating a map from pairs and tuples."""
        m = OrderedMap([('x', 1), Pair('w', 0)])
        assert list(m.items()) == [('w', 0), ('x', 1)]

    def test_insert_keeps_first(self):
        """Test insert refuses an existing key."""
        m = OrderedMap()
        it, inserted = m.insert(('a', 1))
        assert inserted is True
        assert it.value.as_tuple() == ('a', 1)
        it, inserted = m.insert(('a', 2))
        assert inserted is False
        assert it.value.value == 1
        assert m.size() == 1

    def test_subscript_hit(self):
        """Test map[key] returns the stored value."""
        m = OrderedMap({'a': 1})
        assert m['a'] == 1

    def test_subscript_miss_inserts_default(self):
        """Test map[key] on a miss inserts and returns the default."""
        m = OrderedMap()
        assert m['missing'] is None
        assert 'missing' in m
        assert len(m) == 1

    def test_subscript_default_factory(self):
        """Test default_factory builds the inserted value."""
        counts = OrderedMap(default_factory=int)
        for word in ['b', 'a', 'b']:
            counts[word] += 1
        assert list(counts.items()) == [('a', 1), ('b', 2)]
        assert counts.default_factory is int

    def test_at(self):
        """Test at() returns the value or raises."""
        m = OrderedMap({'a': 1})
        assert m.at('a') == 1
        with pytest.raises(KeyNotFoundError):
            m.at('b')
        assert 'b' not in m

    def test_at_miss_is_key_error(self):
        """Test KeyNotFoundError can be caught as KeyError."""
        with pytest.raises(KeyError):
            OrderedMap().at('nope')

    def test_setitem(self):
        """Test assignment inserts or replaces values."""
        m = OrderedMap()
        m['a'] = 1
        m['a'] = 2
        m['0'] = 0
        assert list(m.items()) == [('0', 0), ('a', 2)]

    def test_get(self):
        """Test get() with default."""
        m = OrderedMap({'a': 1})
        assert m.get('a') == 1
        assert m.get('b') is None
        assert m.get('b', 'x') == 'x'
        assert 'b' not in m

    def test_find(self):
        """Test find() returns a cursor on the pair."""
        m = OrderedMap({'a': 1, 'b': 2})
        assert m.find('b').value == Pair('b', 2)
        assert m.find('z') == m.end()

    def test_begin_end_walk(self):
        """Test walking the map with a cursor."""
        m = OrderedMap({3: 'c', 1: 'a', 2: 'b'})
        keys = []
        it = m.begin()
        while it != m.end():
            keys.append(it.value.key)
            it.increment()
        assert keys == [1, 2, 3]

    def test_repr_and_eq(self):
        """Test representation and equality."""
        m = OrderedMap({'b': 2, 'a': 1})
        assert repr(m) == "OrderedMap({'a': 1, 'b': 2})"
        assert m == OrderedMap([('a', 1), ('b', 2)])
        assert m != OrderedMap({'a': 1, 'b': 3})


class TestOrderedMapRemove:
    """Tests for OrderedMap removal."""

    def test_delitem(self):
        """Test del removes the key or raises."""
        m = OrderedMap({'a': 1, 'b': 2})
        del m['a']
        assert list(m) == ['b']
        with pytest.raises(KeyNotFoundError):
            del m['a']

    def test_erase_key(self):
        """Test erase_key reports how many pairs were removed."""
        m = OrderedMap({'a': 1})
        assert m.erase_key('a') == 1
        assert m.erase_key('a') == 0
        assert m.empty()

    def test_erase_iterator(self):
        """Test erase(it) returns the following pair."""
        m = OrderedMap({1: 'a', 2: 'b', 3: 'c'})
        it = m.erase(m.find(2))
        assert it.value.key == 3
        assert list(m) == [1, 3]

    def test_erase_range(self):
        """Test erase_range removes the half-open range."""
        m = OrderedMap({k: str(k) for k in range(10)})
        it = m.erase_range(m.find(2), m.find(7))
        assert it.value.key == 7
        assert list(m) == [0, 1, 7, 8, 9]

    def test_erase_range_to_end(self):
        """Test erase_range up to end empties the tail."""
        m = OrderedMap({k: k for k in range(5)})
        it = m.erase_range(m.find(3), m.end())
        assert it.is_end
        assert list(m) == [0, 1, 2]

    def test_clear(self):
        """Test clear empties the map."""
        m = OrderedMap({'a': 1})
        m.clear()
        m.clear()
        assert m.size() == 0


class TestOrderedMapValueSemantics:
    """Tests for copy, move and swap of OrderedMap."""

    def test_copy_independence(self):
        """Test changes to the source map do not reach the copy."""
        a = OrderedMap({'x': 1, 'y': 2})
        b = a.copy()
        a['x'] = 99
        a['z'] = 3
        del a['y']
        assert list(b.items()) == [('x', 1), ('y', 2)]

    def test_copy_module(self):
        """Test copy.copy uses copy()."""
        a = OrderedMap({'x': 1}, default_factory=list)
        b = copy.copy(a)
        assert b == a
        assert b.default_factory is list

    def test_source_from_map(self):
        """Test OrderedMap(other) copies other."""
        a = OrderedMap({'x': 1})
        b = OrderedMap(a)
        a['x'] = 2
        assert b['x'] == 1

    def test_assign(self):
        """Test assign replaces the contents."""
        m = OrderedMap({'old': 0})
        m.assign({'new': 1})
        assert list(m.items()) == [('new', 1)]
        m.assign(OrderedMap({'other': 2}))
        assert list(m.items()) == [('other', 2)]

    def test_assign_generator_over_itself(self):
        """Test a lazy iterable over the map is read before clearing."""
        m = OrderedMap({'a': 1, 'b': 2, 'c': 3})
        m.assign((k, v * 10) for k, v in m.items() if k != 'b')
        assert list(m.items()) == [('a', 10), ('c', 30)]

    def test_setitem_validates_when_checked(self, checked, monkeypatch):
        """Test replacing a value validates the tree when enabled."""
        calls = []
        monkeypatch.setattr(BST, 'validate', lambda tree: calls.append(tree))
        m = OrderedMap({'a': 1})
        calls.clear()
        m['a'] = 2
        assert len(calls) == 1

    def test_move_from(self):
        """Test move_from empties the source."""
        a = OrderedMap({'x': 1})
        b = OrderedMap({'y': 2}).move_from(a)
        assert a.empty()
        assert a.size() == 0
        assert list(b.items()) == [('x', 1)]

    def test_swap(self):
        """Test both the method and the module function swap maps."""
        a = OrderedMap({'a': 1})
        b = OrderedMap({'b': 2, 'c': 3})
        swap(a, b)
        assert list(a) == ['b', 'c']
        assert list(b) == ['a']
        a.swap(b)
        assert list(a) == ['a']


class TestOrderedSet:
    """Tests for OrderedSet."""

    def test_unique_sorted(self):
        """Test duplicates are dropped and elements sorted."""
        s = OrderedSet([3, 1, 3, 2, 1])
        assert list(s) == [1, 2, 3]
        assert list(reversed(s)) == [3, 2, 1]
        assert len(s) == s.size() == 3

    def test_insert(self):
        """Test insert reports whether the element was added."""
        s = OrderedSet()
        _, inserted = s.insert(5)
        assert inserted is True
        it, inserted = s.insert(5)
        assert inserted is False
        assert it.value == 5
        s.insert_many([4, 6])
        assert list(s) == [4, 5, 6]

    def test_find_and_contains(self):
        """Test lookups."""
        s = OrderedSet(['b', 'a'])
        assert s.find('a').value == 'a'
        assert s.find('z') == s.end()
        assert 'b' in s
        assert 'z' not in s
        assert s.begin().value == 'a'

    def test_erase(self):
        """Test removal by value, cursor and range."""
        s = OrderedSet(range(10))
        assert s.erase_value(3) == 1
        assert s.erase_value(3) == 0
        it = s.erase(s.find(5))
        assert it.value == 6
        s.erase_range(s.find(7), s.end())
        assert list(s) == [0, 1, 2, 4, 6]

    def test_value_semantics(self):
        """Test copy, assign, move and swap."""
        a = OrderedSet([1, 2])
        b = a.copy()
        a.insert(3)
        assert list(b) == [1, 2]
        assert copy.copy(a) == a
        c = OrderedSet().assign(a)
        assert c == a
        c.assign([9])
        assert list(c) == [9]
        d = OrderedSet().move_from(a)
        assert a.empty()
        assert list(d) == [1, 2, 3]
        d.swap(c)
        assert list(d) == [9]
        assert list(c) == [1, 2, 3]

    def test_assign_generator_over_itself(self):
        """Test a lazy iterable over the set is read before clearing."""
        s = OrderedSet([1, 2, 3, 4])
        s.assign(v for v in s if v > 2)
        assert list(s) == [3, 4]
        s.assign(reversed(s))
        assert list(s) == [3, 4]

    def test_clear_and_repr(self):
        """Test clear and representation."""
        s = OrderedSet([2, 1])
        assert repr(s) == "OrderedSet([1, 2])"
        s.clear()
        assert s.empty()

    @settings(max_examples=100)
    @given(values=st.lists(st.integers(min_value=-20, max_value=20)))
    def test_matches_builtin_set(self, values):
        """Test contents match sorted(set(values))."""
        s = OrderedSet(values)
        assert list(s) == sorted(set(values))
        for value in set(values):
            assert value in s


class TestOrderedMapProperties:
    """Property based tests for OrderedMap."""

    @settings(max_examples=100)
    @given(
        ops=st.lists(
            st.tuples(
                st.sampled_from(['set', 'del']),
                st.integers(min_value=0, max_value=15),
                st.integers(),
            )
        )
    )
    def test_matches_dict_model(self, ops):
        """Test the map behaves like a dict with sorted keys."""
        m = OrderedMap()
        model = {}
        for op, key, value in ops:
            if op == 'set':
                m[key] = value
                model[key] = value
            else:
                assert m.erase_key(key) == (1 if key in model else 0)
                model.pop(key, None)
        assert list(m.items()) == sorted(model.items())
        assert len(m) == len(model)
