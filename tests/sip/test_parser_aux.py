"""Tests for the shared lexical helpers."""

import pytest

from sipcore.core.exceptions import ErrorCode, ParamsError
from sipcore.sip.parser_aux import (
    parse_all,
    parse_params,
    parse_quoted_string,
    parse_token,
    quote_string,
    trim_lws,
    trim_lws_parser,
    unquote_string,
)


class TestTrimLws:

    def test_trims_spaces_tabs_and_newlines(self):
        assert trim_lws(" \t\r\n x ") == "x "

    def test_parser_form(self):
        assert trim_lws_parser("  x") == (None, "x")


class TestTokens:

    def test_parse_token(self):
        assert parse_token("branch=z9") == ("branch", "=z9")

    def test_parse_token_missing(self):
        with pytest.raises(ParamsError):
            parse_token("=x")


class TestQuotedString:

    def test_parse_quoted_string(self):
        assert parse_quoted_string('"a \\"b\\"" rest') == ('"a \\"b\\""', " rest")

    def test_unterminated(self):
        with pytest.raises(ParamsError) as exc_info:
            parse_quoted_string('"abc')
        assert exc_info.value.code == ErrorCode.UNTERMINATED_QUOTE

    def test_quote_unquote(self):
        """quote_string() output is read back by unquote_string()."""
        value = 'say "hi" \\ bye'
        assert unquote_string(quote_string(value)) == value


class TestParseParams:
    """Tests for parse_params()."""

    def test_key_value_and_flags(self):
        params, rest = parse_params(";", "a=1;b;c=x.y")
        assert params == [("a", "1"), ("b", ""), ("c", "x.y")]
        assert rest == ""

    def test_stops_at_foreign_character(self):
        """Remainder keeps the LWS in front of the stop character."""
        params, rest = parse_params(";", "a=1 , next")
        assert params == [("a", "1")]
        assert rest == " , next"

    def test_ipv6_value(self):
        params, _ = parse_params(";", "maddr=[2001:db8::1]")
        assert params == [("maddr", "[2001:db8::1]")]

    def test_quoted_value(self):
        params, rest = parse_params(";", 'n="a;b", x')
        assert params == [("n", '"a;b"')]
        assert rest == ", x"

    def test_other_separator(self):
        params, rest = parse_params("&", "a=1&b=2")
        assert params == [("a", "1"), ("b", "2")]
        assert rest == ""

    def test_missing_value(self):
        with pytest.raises(ParamsError) as exc_info:
            parse_params(";", "a=;b")
        assert exc_info.value.code == ErrorCode.INVALID_PARAMETERS

    def test_missing_key(self):
        with pytest.raises(ParamsError):
            parse_params(";", "a;;b")


class TestParseAll:

    def test_pipeline(self):
        results, rest = parse_all("  abc;x", [trim_lws_parser, parse_token])
        assert results == [None, "abc"]
        assert rest == ";x"

    def test_failure_propagates(self):
        with pytest.raises(ParamsError):
            parse_all(";x", [parse_token])
