"""Tests for SIP URI parsing."""

import pytest

from sipcore.core.exceptions import ErrorCode, URIError
from sipcore.sip.uri import SipUri, parse_uri


class TestParseUri:
    """Tests for parse_uri()."""

    def test_full_uri(self):
        uri = parse_uri("sips:alice:secret@example.com:5061;transport=tcp;lr?subject=hi")
        assert uri.scheme == "sips"
        assert uri.user == "alice"
        assert uri.password == "secret"
        assert uri.host == "example.com"
        assert uri.port == 5061
        assert uri.params == (("transport", "tcp"), ("lr", None))
        assert uri.headers == (("subject", "hi"),)

    def test_host_only(self):
        assert parse_uri("sip:proxy") == SipUri(host="proxy")

    def test_scheme_case_insensitive(self):
        assert parse_uri("SIP:proxy.example.com").scheme == "sip"

    def test_ipv4(self):
        uri = parse_uri("sip:+15551234567@10.0.0.1:5060")
        assert uri.user == "+15551234567"
        assert uri.host == "10.0.0.1"
        assert uri.port == 5060

    def test_ipv6(self):
        uri = parse_uri("sip:[2001:db8::1]:5070;lr")
        assert uri.host == "[2001:db8::1]"
        assert uri.port == 5070

    @pytest.mark.parametrize(
        "text",
        [
            "sip:",
            "sip:@host",
            "sip:host:port",
            "sip:host:70000",
            "sip:ho st",
            "sip:[2001:db8::1",
            "sip:host;=x",
            "sip:host;a=",
            "sip:host?novalue",
            "sip:host:\u00b2",
            "sip:host:\u0663",
            "sip:[2001:db8::1]:\u0665\u0660\u0666\u0660",
        ],
    )
    def test_invalid(self, text):
        with pytest.raises(URIError) as exc_info:
            parse_uri(text)
        assert exc_info.value.code == ErrorCode.URI_INVALID

    def test_non_ascii_port_rejected(self):
        """Only ASCII digits form a port; other Unicode digits are not converted."""
        with pytest.raises(URIError) as exc_info:
            parse_uri("sip:a.example.com:\u0663")
        assert exc_info.value.code == ErrorCode.URI_INVALID

    @pytest.mark.parametrize("text", ["tel:+15551234567", "http://example.com", "proxy"])
    def test_unsupported_scheme(self, text):
        with pytest.raises(URIError) as exc_info:
            parse_uri(text)
        assert exc_info.value.code == ErrorCode.URI_UNSUPPORTED_SCHEME


class TestSipUriParams:
    """Tests for parameter lookups."""

    def test_has_param_case_insensitive(self):
        uri = parse_uri("sip:p.example.com;LR")
        assert uri.has_param("lr")
        assert not uri.has_param("transport")

    def test_get_param(self):
        uri = parse_uri("sip:p.example.com;transport=udp;lr")
        assert uri.get_param("transport") == "udp"
        assert uri.get_param("lr") is None
        assert uri.param_map == {"transport": "udp", "lr": None}


class TestAssemble:

    @pytest.mark.parametrize(
        "text",
        [
            "sip:p.example.com",
            "sips:alice@example.com:5061;transport=tcp;lr",
            "sip:bob:pw@[2001:db8::1]:5060;maddr=10.0.0.1?subject=x&priority=urgent",
        ],
    )
    def test_assemble(self, text):
        assert str(parse_uri(text)) == text
