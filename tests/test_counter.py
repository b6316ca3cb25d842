"""FrequencyCounter 집계 및 선택 질의 테스트."""

from __future__ import annotations

import pytest

from freqcount.counter import FrequencyCounter


class TestCounting:
    """increment / count / has / size 의 기본 법칙."""

    def test_increment_and_lookup(self):
        counter = FrequencyCounter()
        assert not counter.has("foo")
        counter.increment("foo")
        assert counter.has("foo")
        assert counter.count("foo") == 1
        counter.increment("foo")
        assert counter.count("foo") == 2
        counter.increment("bar")
        assert counter.has("bar")
        assert counter.count("bar") == 1
        assert counter.size() == 2
        assert len(counter) == 2

    def test_lookup_does_not_materialize_entries(self):
        counter = FrequencyCounter()
        assert counter.count("missing") == 0
        assert not counter.has("missing")
        assert "missing" not in counter
        assert counter.size() == 0
        assert counter.to_dict() == {}

    def test_count_matches_number_of_increments(self):
        tokens = ["a", "b", "a", "c", "a", "b", "A", ""]
        counter = FrequencyCounter(tokens)
        for token in set(tokens):
            assert counter.count(token) == tokens.count(token)
        assert counter.size() == len(set(tokens))
        assert counter.total() == len(tokens)

    def test_tokens_are_case_and_punctuation_sensitive(self):
        counter = FrequencyCounter(["Foo", "foo", "foo."])
        assert counter.size() == 3

    def test_update_preserves_first_occurrence_order(self):
        counter = FrequencyCounter()
        counter.update(["c", "a", "c", "b"])
        assert list(counter) == ["c", "a", "b"]
        assert counter.items() == [("c", 2), ("a", 1), ("b", 1)]


class TestAll:
    def test_sorted(self, foo_bar_counter):
        assert foo_bar_counter.all(True) == ["bar", "foo"]

    def test_unsorted_is_insertion_order(self, foo_bar_counter):
        assert foo_bar_counter.all() == ["foo", "bar"]

    def test_sorted_is_strictly_ascending_code_point_order(self):
        counter = FrequencyCounter(["b", "B", "é", "a", "b", "ä", "Z"])
        values = counter.all(sort=True)
        assert values == ["B", "Z", "a", "b", "ä", "é"]
        assert all(left < right for left, right in zip(values, values[1:]))

    def test_empty(self):
        assert FrequencyCounter().all(True) == []


class TestTop:
    def test_scenarios(self, foo_bar_counter):
        assert foo_bar_counter.top(1, 6, False) == ["foo"]
        assert foo_bar_counter.top(1, 0, True) == ["foo"]
        assert foo_bar_counter.top(2, 0, True) == ["foo", "bar"]
        assert foo_bar_counter.top(3, 0, True) == ["foo", "bar"]

    @pytest.mark.parametrize("minimum", [-5, 0, 6, 100])
    @pytest.mark.parametrize("sort", [True, False])
    def test_zero_n_is_always_empty(self, foo_bar_counter, minimum, sort):
        assert foo_bar_counter.top(0, minimum, sort) == []

    def test_negative_n_returns_all_filtered(self, foo_bar_counter):
        assert foo_bar_counter.top(-1, 0, True) == ["foo", "bar"]
        assert foo_bar_counter.top(-1, 6, True) == ["foo"]

    def test_threshold_is_inclusive(self, foo_bar_counter):
        assert foo_bar_counter.top(-1, 5, True) == ["foo", "bar"]
        assert foo_bar_counter.top(-1, 11, True) == []

    def test_never_returns_token_below_minimum(self):
        counter = FrequencyCounter("aaaabbbccd")
        for minimum in range(6):
            for token in counter.top(-1, minimum, True):
                assert counter.count(token) >= minimum

    def test_length_bounded_by_n(self):
        counter = FrequencyCounter("aaaabbbccd")
        for n in range(1, 6):
            assert len(counter.top(n, 0, True)) == min(n, counter.size())

    def test_ties_keep_insertion_order(self):
        counter = FrequencyCounter(["x", "y", "z", "w", "w", "z"])
        # z, w: 2회 / x, y: 1회
        assert counter.top(-1, 0, True) == ["z", "w", "x", "y"]
        assert counter.top(3, 0, True) == ["z", "w", "x"]

    def test_unsorted_truncation_takes_insertion_prefix(self):
        counter = FrequencyCounter(["low", "high", "high", "high"])
        assert counter.top(1, 0, False) == ["low"]
        assert counter.top(1, 0, True) == ["high"]


class TestBottom:
    def test_scenarios(self, foo_bar_counter):
        assert foo_bar_counter.bottom(1, 6, False) == ["bar"]
        assert foo_bar_counter.bottom(1, -1, True) == ["bar"]
        assert foo_bar_counter.bottom(2, -1, True) == ["bar", "foo"]
        assert foo_bar_counter.bottom(3, -1, True) == ["bar", "foo"]

    @pytest.mark.parametrize("sort", [True, False])
    @pytest.mark.parametrize("n", [-1, 1, 10])
    def test_zero_maximum_is_always_empty(self, foo_bar_counter, n, sort):
        assert foo_bar_counter.bottom(n, 0, sort) == []

    @pytest.mark.parametrize("maximum", [-1, 0, 5, 100])
    def test_zero_n_is_always_empty(self, foo_bar_counter, maximum):
        assert foo_bar_counter.bottom(0, maximum, True) == []

    def test_negative_maximum_disables_threshold(self, foo_bar_counter):
        assert foo_bar_counter.bottom(-1, -1, False) == ["foo", "bar"]
        assert foo_bar_counter.bottom(-1, -100, True) == ["bar", "foo"]

    def test_never_returns_token_above_maximum(self):
        counter = FrequencyCounter("aaaabbbccd")
        for maximum in range(1, 6):
            for token in counter.bottom(-1, maximum, True):
                assert counter.count(token) <= maximum

    def test_ties_keep_insertion_order(self):
        counter = FrequencyCounter(["x", "y", "y", "z", "w"])
        assert counter.bottom(-1, -1, True) == ["x", "z", "w", "y"]


class TestSelectionResults:
    def test_queries_are_idempotent(self, foo_bar_counter):
        foo_bar_counter.update(["baz", "qux", "qux"])
        for query in (
            lambda: foo_bar_counter.all(False),
            lambda: foo_bar_counter.all(True),
            lambda: foo_bar_counter.top(2, 1, True),
            lambda: foo_bar_counter.top(-1, 0, False),
            lambda: foo_bar_counter.bottom(2, -1, True),
            lambda: foo_bar_counter.bottom(-1, 5, False),
        ):
            assert query() == query()

    def test_results_do_not_alias_counter_state(self, foo_bar_counter):
        values = foo_bar_counter.top(-1, 0, True)
        values.append("intruder")
        values.clear()
        assert foo_bar_counter.top(-1, 0, True) == ["foo", "bar"]

        dumped = foo_bar_counter.to_dict()
        dumped["foo"] = 0
        assert foo_bar_counter.count("foo") == 10

    def test_repr(self, foo_bar_counter):
        assert repr(foo_bar_counter) == "FrequencyCounter({'foo': 10, 'bar': 5})"
