"""Tests for the route set container."""

import pytest

from sipcore.core.exceptions import RouteSetError
from sipcore.sip.route_set import RouteSet


class TestRouteSet:

    def test_new_is_empty(self):
        rs = RouteSet.new()
        assert rs.is_empty
        assert len(rs) == 0

    def test_add_first_and_last(self):
        rs = RouteSet.new().add_last("b").add_first("a").add_last("c")
        assert list(rs) == ["a", "b", "c"]
        assert rs.first() == "a"
        assert rs.last() == "c"

    def test_immutable(self):
        rs = RouteSet.new().add_last("a")
        rs.add_last("b")
        assert list(rs) == ["a"]

    def test_remove(self):
        rs = RouteSet(("a", "b", "c"))
        assert list(rs.remove_first()) == ["b", "c"]
        assert list(rs.remove_last()) == ["a", "b"]

    def test_reverse(self):
        assert RouteSet(("a", "b", "c")).reverse() == RouteSet(("c", "b", "a"))

    def test_foldl(self):
        rs = RouteSet(("a", "b", "c"))
        assert rs.foldl(lambda r, acc: acc + [r], []) == ["a", "b", "c"]

    @pytest.mark.parametrize("operation", ["first", "last", "remove_first", "remove_last"])
    def test_empty_access(self, operation):
        with pytest.raises(RouteSetError):
            getattr(RouteSet.new(), operation)()
