"""Tests for the generic header container."""

from sipcore.sip.header import Header


class TestHeader:

    def test_new_is_empty(self):
        header = Header.new("Route")
        assert header.is_empty
        assert header.raw_values == ()

    def test_add_value_returns_new_header(self):
        header = Header.new("Route")
        updated = header.add_value("<sip:a>")
        assert header.is_empty
        assert updated.raw_values == ("<sip:a>",)

    def test_values_keep_order(self):
        header = Header.new("Route").add_value("<sip:a>").add_value("<sip:b>")
        assert header.raw_values == ("<sip:a>", "<sip:b>")

    def test_name_matches(self):
        assert Header.new("Record-Route").name_matches("record-route")

    def test_assemble(self):
        header = Header.new("Route").add_value("<sip:a>").add_value("<sip:b>")
        assert header.assemble() == "Route: <sip:a>, <sip:b>"
        assert header.assemble_lines() == ["Route: <sip:a>", "Route: <sip:b>"]


class TestFromLines:

    def test_strips_matching_prefix(self):
        header = Header.from_lines(
            "Route",
            ["route: <sip:a>, <sip:b>", "", "Route:<sip:c>"],
        )
        assert header.raw_values == ("<sip:a>, <sip:b>", "<sip:c>")

    def test_bare_values(self):
        """Values without a matching name prefix are kept whole."""
        header = Header.from_lines("Route", ["<sip:a>", "sip:b"])
        assert header.raw_values == ("<sip:a>", "sip:b")
