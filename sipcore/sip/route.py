"""SIP Route / Record-Route headers (RFC 3261 §20.30, §20.34).

    Route        = "Route" HCOLON route-param *(COMMA route-param)
    route-param  = name-addr *( SEMI rr-param )
    rr-param     = generic-param

A header field may arrive as several instances ("Route:" lines), each of
which may hold several comma-separated routes. parse() keeps document order
across both; build() renders a RouteSet back into a Header.
"""

import dataclasses
import enum
import logging
from dataclasses import dataclass
from typing import Union

from sipcore.core.config import RECORD_ROUTE_HEADER, ROUTE_HEADER
from sipcore.core.exceptions import ErrorCode, RouteError, SIPParseError
from sipcore.sip.header import Header
from sipcore.sip.nameaddr import (
    NO_DISPLAY_NAME,
    RFC3261_NAMEADDR,
    DisplayName,
    NameAddrGrammar,
)
from sipcore.sip.parser_aux import (
    parse_all,
    parse_params,
    trim_lws,
    trim_lws_parser,
)
from sipcore.sip.route_set import RouteSet
from sipcore.sip.uri import SipUri

log = logging.getLogger(__name__)

ROUTE = ROUTE_HEADER
RECORD_ROUTE = RECORD_ROUTE_HEADER


class _NoValue(enum.Enum):
    NOVALUE = "novalue"

    def __repr__(self) -> str:
        return "NOVALUE"


# Marks a parameter present without "=value" (";lr"), as opposed to an
# empty value or an absent parameter.
NOVALUE = _NoValue.NOVALUE

ParamValue = Union[str, _NoValue]
RouteParam = tuple[str, ParamValue]


@dataclass(frozen=True)
class Route:
    """One hop of a Route / Record-Route header.

    params holds the rr-params that follow the name-addr, in wire order.
    Duplicate keys are kept as they are.
    """

    uri: SipUri
    display_name: DisplayName = NO_DISPLAY_NAME
    params: tuple[RouteParam, ...] = ()

    @property
    def is_loose_route(self) -> bool:
        """True if the URI itself (not the route) carries the lr parameter."""
        return self.uri.has_param("lr")

    def set_param(self, key: str, value: ParamValue) -> "Route":
        """Return a copy with (key, value) placed in front of the existing params."""
        if not isinstance(key, str) or not isinstance(value, (str, _NoValue)):
            raise TypeError(f"route parameter must be text: {key!r}={value!r}")
        return dataclasses.replace(self, params=((key, value),) + self.params)

    def assemble(self, nameaddr: NameAddrGrammar = RFC3261_NAMEADDR) -> str:
        return assemble_route(self, nameaddr)


# =============================================================================
# Accessors
# =============================================================================

def uri(route: Route) -> SipUri:
    """Return the URI the route points at."""
    return route.uri


def is_loose_route(route: Route) -> bool:
    """Check whether the route's URI carries the lr parameter.

    Only the URI's own parameters count; an lr rr-param after the
    name-addr does not.
    """
    return route.is_loose_route


def params(route: Route) -> tuple[RouteParam, ...]:
    """Return the rr-params in wire order, NOVALUE for valueless ones."""
    return route.params


def set_param(key: str, value: ParamValue, route: Route) -> Route:
    """Add a route parameter.

    Args:
        key: Parameter name
        value: Parameter value, or NOVALUE for a bare ";key"
        route: Route to update

    Returns:
        New Route with (key, value) in front of the existing params
    """
    return route.set_param(key, value)


# =============================================================================
# Single route
# =============================================================================

def _normalize_params(raw_params: list[tuple[str, str]]) -> tuple[RouteParam, ...]:
    # The tokenizer reports ";key" as ("key", ""); keep that distinct from
    # an explicit value.
    return tuple(
        (key, NOVALUE if value == "" else value)
        for key, value in raw_params
    )


def _parse_route_params(text: str) -> tuple[tuple[RouteParam, ...], str]:
    if not text.startswith(";"):
        return (), text
    try:
        raw_params, rest = parse_params(";", text[1:])
    except SIPParseError as e:
        raise RouteError.invalid_parameters(e) from e
    return _normalize_params(raw_params), rest


def parse_route(
    text: str,
    nameaddr: NameAddrGrammar = RFC3261_NAMEADDR,
) -> tuple[Route, str]:
    """Parse one route entry from the start of text.

    Stages: name-addr, LWS, ;params, LWS.

    Returns:
        (Route, rest) where rest starts at the first unconsumed character

    Raises:
        RouteError: INVALID_ROUTE wrapping the failing stage's error.
    """
    parsers = [
        nameaddr.parse,
        trim_lws_parser,
        _parse_route_params,
        trim_lws_parser,
    ]
    try:
        results, rest = parse_all(text, parsers)
    except SIPParseError as e:
        raise RouteError.invalid_route(e) from e

    (display_name, route_uri), _, route_params, _ = results
    return Route(uri=route_uri, display_name=display_name, params=route_params), rest


def assemble_route(route: Route, nameaddr: NameAddrGrammar = RFC3261_NAMEADDR) -> str:
    """Render one route entry: name-addr followed by its params in stored order."""
    parts = [nameaddr.assemble(route.display_name, route.uri)]
    for key, value in route.params:
        if value is NOVALUE:
            parts.append(f";{key}")
        else:
            parts.append(f";{key}={value}")
    return "".join(parts)


def make_route(
    source: Union[str, SipUri],
    nameaddr: NameAddrGrammar = RFC3261_NAMEADDR,
) -> Route:
    """Create a single route from text or from a URI.

    Text must hold exactly one route entry. A URI becomes a route with no
    display name and no parameters.

    Raises:
        RouteError: GARBAGE_AT_END if text continues after the entry,
            INVALID_ROUTE if the entry itself is malformed.
    """
    if not isinstance(source, str):
        return Route(uri=source)

    route, rest = parse_route(source, nameaddr)
    if rest:
        raise RouteError.garbage_at_end(rest)
    return route


# =============================================================================
# Header level
# =============================================================================

def _add_to_route_set(
    text: str,
    rev_route_set: RouteSet,
    nameaddr: NameAddrGrammar,
) -> RouteSet:
    # Routes are prepended while scanning left to right; parse() reverses
    # once at the end.
    while True:
        route, rest = parse_route(text, nameaddr)
        rev_route_set = rev_route_set.add_first(route)
        if not rest:
            return rev_route_set
        if not rest.startswith(","):
            raise RouteError.garbage_at_end(rest)
        text = trim_lws(rest[1:])


def parse(header: Header, nameaddr: NameAddrGrammar = RFC3261_NAMEADDR) -> RouteSet:
    """Parse all instances of a Route / Record-Route header.

    Routes from earlier instances precede routes from later ones; within an
    instance, comma-separated routes keep left-to-right order. An empty
    header yields an empty RouteSet.

    Raises:
        RouteError: INVALID_ROUTE wrapping the first failure. No partial
            result is returned.
    """
    rev_route_set = RouteSet.new()
    for value in header.raw_values:
        try:
            rev_route_set = _add_to_route_set(value, rev_route_set, nameaddr)
        except RouteError as e:
            if e.code == ErrorCode.INVALID_ROUTE:
                raise
            raise RouteError.invalid_route(e) from e

    route_set = rev_route_set.reverse()
    log.debug(f"Parsed {header.name} header: {len(route_set)} route(s)")
    return route_set


def make(data: Union[str, bytes]) -> RouteSet:
    """Parse a single Route header value known to be well formed.

    Args:
        data: Header value as text or raw UTF-8 bytes

    Raises:
        RouteError: As parse(); undecodable bytes yield INVALID_ROUTE.
            Callers are expected to have validated the input already.
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise RouteError.invalid_route(e) from e
    return parse(Header.new(ROUTE).add_value(data))


def build(
    header_name: str,
    route_set: RouteSet,
    nameaddr: NameAddrGrammar = RFC3261_NAMEADDR,
) -> Header:
    """Render a RouteSet as a header; one raw value per route, in set order."""
    return route_set.foldl(
        lambda route, header: header.add_value(assemble_route(route, nameaddr)),
        Header.new(header_name),
    )
