"""SIP header grammars.

Route / Record-Route parsing and assembly plus the collaborators it relies
on: generic header container, name-addr, SIP URI and route set.
"""

from sipcore.sip.header import Header
from sipcore.sip.nameaddr import (
    NO_DISPLAY_NAME,
    RFC3261_NAMEADDR,
    DisplayName,
    NameAddrGrammar,
    assemble_nameaddr,
    parse_nameaddr,
)
from sipcore.sip.route import (
    NOVALUE,
    RECORD_ROUTE,
    ROUTE,
    Route,
    build,
    make,
    make_route,
    parse,
    parse_route,
)
from sipcore.sip.route_set import RouteSet
from sipcore.sip.uri import SipUri, parse_uri

__all__ = [
    # Containers
    "Header",
    "RouteSet",
    # Name-addr / URI
    "DisplayName",
    "NO_DISPLAY_NAME",
    "NameAddrGrammar",
    "RFC3261_NAMEADDR",
    "parse_nameaddr",
    "assemble_nameaddr",
    "SipUri",
    "parse_uri",
    # Route
    "Route",
    "NOVALUE",
    "ROUTE",
    "RECORD_ROUTE",
    "parse",
    "parse_route",
    "make",
    "make_route",
    "build",
]
