"""Name-address grammar (RFC 3261 §20.10, §25.1).

    name-addr    = [ display-name ] LAQUOT addr-spec RAQUOT
    display-name = *(token LWS) / quoted-string

A bare addr-spec (no angle brackets) is accepted as well; it ends at the
first LWS, "," or ";" so trailing parameters belong to the header.
"""

from dataclasses import dataclass
from typing import Protocol

from sipcore.core.exceptions import NameAddrError, SIPParseError
from sipcore.sip.parser_aux import (
    LWS_CHARS,
    TOKEN_CHARS,
    ParseResult,
    parse_quoted_string,
    quote_string,
    trim_lws,
    unquote_string,
)
from sipcore.sip.uri import SipUri, parse_uri

ADDR_SPEC_TERMINATORS = frozenset(LWS_CHARS + ",;")


@dataclass(frozen=True)
class DisplayName:
    """Display name of a name-addr; NO_DISPLAY_NAME marks its absence."""

    text: str = ""

    @property
    def is_empty(self) -> bool:
        return self.text == ""

    def assemble(self) -> str:
        return quote_string(self.text) if self.text else ""


NO_DISPLAY_NAME = DisplayName()


class NameAddrGrammar(Protocol):
    """Capability the header grammars need from a name-addr implementation."""

    def parse(self, text: str) -> ParseResult:
        """Return ((DisplayName, uri), rest)."""
        ...

    def assemble(self, display_name: DisplayName, uri) -> str:
        ...


def _parse_token_display_name(text: str) -> ParseResult:
    # *(token LWS) directly followed by "<"; returns (None, text) when the
    # input is not of that shape
    words = []
    rest = text
    while rest and rest[0] in TOKEN_CHARS:
        end = 0
        while end < len(rest) and rest[end] in TOKEN_CHARS:
            end += 1
        words.append(rest[:end])
        rest = trim_lws(rest[end:])
    if words and rest.startswith("<"):
        return DisplayName(" ".join(words)), rest
    return None, text


def _parse_angle_uri(original: str, text: str) -> ParseResult:
    end = text.find(">")
    if end == -1:
        raise NameAddrError.invalid(original, "unbalanced '<'")
    try:
        uri = parse_uri(text[1:end])
    except SIPParseError as e:
        raise NameAddrError.invalid(original, str(e)) from e
    return uri, text[end + 1:]


def _parse_addr_spec(original: str, text: str) -> ParseResult:
    end = 0
    while end < len(text) and text[end] not in ADDR_SPEC_TERMINATORS:
        end += 1
    if end == 0:
        raise NameAddrError.invalid(original, "address expected")
    try:
        uri = parse_uri(text[:end])
    except SIPParseError as e:
        raise NameAddrError.invalid(original, str(e)) from e
    return uri, text[end:]


def parse_nameaddr(text: str) -> ParseResult:
    """Parse a display name and URI from the start of text.

    Returns:
        ((DisplayName, SipUri), rest)

    Raises:
        NameAddrError: On unbalanced brackets, unterminated quotes, a
            display name that is not followed by "<", or an invalid URI.
    """
    rest = trim_lws(text)

    if rest.startswith('"'):
        try:
            quoted, rest = parse_quoted_string(rest)
        except SIPParseError as e:
            raise NameAddrError.invalid(text, str(e)) from e
        rest = trim_lws(rest)
        if not rest.startswith("<"):
            raise NameAddrError.invalid(text, "'<' expected after display name")
        uri, rest = _parse_angle_uri(text, rest)
        return (DisplayName(unquote_string(quoted)), uri), rest

    if rest.startswith("<"):
        uri, rest = _parse_angle_uri(text, rest)
        return (NO_DISPLAY_NAME, uri), rest

    display_name, after = _parse_token_display_name(rest)
    if display_name is not None:
        uri, rest = _parse_angle_uri(text, after)
        return (display_name, uri), rest

    uri, rest = _parse_addr_spec(text, rest)
    return (NO_DISPLAY_NAME, uri), rest


def assemble_nameaddr(display_name: DisplayName, uri: SipUri) -> str:
    """Render a name-addr; the URI is always angle-bracketed."""
    if display_name.is_empty:
        return f"<{uri}>"
    return f"{display_name.assemble()} <{uri}>"


class RFC3261NameAddr:
    """NameAddrGrammar backed by parse_nameaddr() / assemble_nameaddr()."""

    def parse(self, text: str) -> ParseResult:
        return parse_nameaddr(text)

    def assemble(self, display_name: DisplayName, uri: SipUri) -> str:
        return assemble_nameaddr(display_name, uri)


RFC3261_NAMEADDR = RFC3261NameAddr()
