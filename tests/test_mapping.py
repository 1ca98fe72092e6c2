"""Tests for mapping operations. Results are compared sorted."""

from types import MappingProxyType

from arrays import map_walk, map_for_each, map_filter, map_keys, map_values


class TestMapWalk:
    def test_pairs_to_strings(self):
        got = map_walk({"a": 1, "b": 2, "c": 3}, lambda k, v: f"{k}:{v}")
        assert sorted(got) == ["a:1", "b:2", "c:3"]

    def test_values_only(self):
        got = map_walk({"x": 10, "y": 20}, lambda k, v: f"{v * 2}")
        assert sorted(got) == ["20", "40"]

    def test_empty(self):
        assert map_walk({}, lambda k, v: k) == []


class TestMapForEach:
    def test_visits_every_pair(self):
        got = []
        map_for_each({"a": 1, "b": 2, "c": 3}, lambda k, v: got.append(f"{k}:{v}"))
        assert sorted(got) == ["a:1", "b:2", "c:3"]

    def test_single(self):
        got = []
        map_for_each({"x": 10}, lambda k, v: got.append(f"{k}:{v}"))
        assert got == ["x:10"]

    def test_empty(self):
        got = []
        map_for_each({}, lambda k, v: got.append(k))
        assert got == []


class TestMapFilter:
    def test_by_value(self):
        got = map_filter({"a": 1, "b": 2, "c": 3, "d": 4}, lambda k, v: v > 2)
        assert got == {"c": 3, "d": 4}

    def test_by_key(self):
        got = map_filter({"apple": 1, "banana": 2, "apricot": 3}, lambda k, v: k[0] == "a")
        assert got == {"apple": 1, "apricot": 3}

    def test_no_matches(self):
        assert map_filter({"a": 1, "b": 2}, lambda k, v: v > 10) == {}

    def test_all_match(self):
        assert map_filter({"a": 1, "b": 2}, lambda k, v: True) == {"a": 1, "b": 2}

    def test_empty(self):
        assert map_filter({}, lambda k, v: True) == {}

    def test_input_untouched(self):
        original = {"a": 1, "b": 2}
        got = map_filter(original, lambda k, v: True)
        got["c"] = 3
        assert original == {"a": 1, "b": 2}

    def test_read_only_mapping(self):
        got = map_filter(MappingProxyType({"a": 1, "b": 5}), lambda k, v: v > 1)
        assert got == {"b": 5}
        assert isinstance(got, dict)


class TestMapKeys:
    def test_keys(self):
        assert sorted(map_keys({"a": 1, "b": 2, "c": 3})) == ["a", "b", "c"]

    def test_single(self):
        assert map_keys({"x": 10}) == ["x"]

    def test_empty(self):
        assert map_keys({}) == []


class TestMapValues:
    def test_values(self):
        assert sorted(map_values({"a": 1, "b": 2, "c": 3})) == [1, 2, 3]

    def test_duplicates_kept(self):
        assert sorted(map_values({"a": 5, "b": 5, "c": 10})) == [5, 5, 10]

    def test_empty(self):
        assert map_values({}) == []
