"""SIP / SIPS URI value (RFC 3261 §19.1).

Only what the header grammars need: a structured, immutable URI that keeps
parameter order for faithful re-assembly and answers parameter lookups.
"""

import re
from dataclasses import dataclass
from typing import Optional

from sipcore.core.exceptions import URIError
from sipcore.sip.parser_aux import TOKEN_CHARS

SCHEMES = frozenset({"sip", "sips"})

# hostname / IPv4address
HOSTNAME_PATTERN = re.compile(r"^[A-Za-z0-9]([A-Za-z0-9\-]*[A-Za-z0-9])?(\.[A-Za-z0-9]([A-Za-z0-9\-]*[A-Za-z0-9])?)*\.?$")
IPV6_REFERENCE_PATTERN = re.compile(r"^\[[0-9A-Fa-f:.]+\]$")

# port = 1*DIGIT (ASCII only)
PORT_PATTERN = re.compile(r"[0-9]{1,5}")

# paramchar = param-unreserved / unreserved / escaped
PARAM_CHARS = TOKEN_CHARS | frozenset("[]/:&+$()")

URIParam = tuple[str, Optional[str]]


@dataclass(frozen=True)
class SipUri:
    """Parsed SIP URI.

    Parameters without a value (``;lr``) are stored with value None.
    """

    host: str
    scheme: str = "sip"
    user: Optional[str] = None
    password: Optional[str] = None
    port: Optional[int] = None
    params: tuple[URIParam, ...] = ()
    headers: tuple[tuple[str, str], ...] = ()

    @property
    def param_map(self) -> dict[str, Optional[str]]:
        """Parameters keyed by lower-cased name; the last occurrence wins."""
        return {key.lower(): value for key, value in self.params}

    def has_param(self, key: str) -> bool:
        """Case-insensitive parameter presence test."""
        return key.lower() in self.param_map

    def get_param(self, key: str) -> Optional[str]:
        return self.param_map.get(key.lower())

    def assemble(self) -> str:
        """Serialize back to wire form."""
        s = f"{self.scheme}:"
        if self.user is not None:
            s += self.user
            if self.password is not None:
                s += f":{self.password}"
            s += "@"
        s += self.host
        if self.port is not None:
            s += f":{self.port}"
        for key, value in self.params:
            if value is None:
                s += f";{key}"
            else:
                s += f";{key}={value}"
        if self.headers:
            s += "?" + "&".join(f"{k}={v}" for k, v in self.headers)
        return s

    def __str__(self) -> str:
        return self.assemble()


def _parse_host(uri: str, hostport: str) -> tuple[str, Optional[int]]:
    # host:port, handling IPv6 [addr]:port
    if hostport.startswith("["):
        bracket_end = hostport.find("]")
        if bracket_end == -1:
            raise URIError.invalid(uri, "unterminated IPv6 reference")
        host = hostport[:bracket_end + 1]
        after = hostport[bracket_end + 1:]
        if after and not after.startswith(":"):
            raise URIError.invalid(uri, f"unexpected {after!r} after IPv6 reference")
        port_part = after[1:] if after else None
        if not IPV6_REFERENCE_PATTERN.match(host):
            raise URIError.invalid(uri, f"invalid IPv6 reference {host!r}")
    else:
        host, sep, port_part = hostport.partition(":")
        if not sep:
            port_part = None
        if not host or not HOSTNAME_PATTERN.match(host):
            raise URIError.invalid(uri, f"invalid host {host!r}")

    if port_part is None:
        return host, None
    if not PORT_PATTERN.fullmatch(port_part) or int(port_part) > 65535:
        raise URIError.invalid(uri, f"invalid port {port_part!r}")
    return host, int(port_part)


def _parse_uri_params(uri: str, param_str: str) -> tuple[URIParam, ...]:
    params = []
    for part in param_str.split(";"):
        key, sep, value = part.partition("=")
        if not key or not all(c in PARAM_CHARS for c in key):
            raise URIError.invalid(uri, f"invalid parameter {part!r}")
        if sep and (not value or not all(c in PARAM_CHARS for c in value)):
            raise URIError.invalid(uri, f"invalid parameter value {part!r}")
        params.append((key, value if sep else None))
    return tuple(params)


def _parse_uri_headers(uri: str, header_str: str) -> tuple[tuple[str, str], ...]:
    headers = []
    for hdr in header_str.split("&"):
        name, sep, value = hdr.partition("=")
        if not name or not sep:
            raise URIError.invalid(uri, f"invalid header {hdr!r}")
        headers.append((name, value))
    return tuple(headers)


def parse_uri(text: str) -> SipUri:
    """Parse a SIP/SIPS URI string into a SipUri.

    Args:
        text: URI without surrounding angle brackets

    Raises:
        URIError: If the scheme is not sip/sips or any component is malformed.
    """
    scheme, sep, rest = text.partition(":")
    if not sep or scheme.lower() not in SCHEMES:
        raise URIError.unsupported_scheme(text)
    if not rest:
        raise URIError.invalid(text, "empty URI body")

    # headers (after ?)
    rest, sep, header_str = rest.partition("?")
    headers = _parse_uri_headers(text, header_str) if sep else ()

    # userinfo may contain ';' (telephone-subscriber), so split it off first
    userinfo, at, hostpart = rest.rpartition("@")
    user = password = None
    if at:
        if not userinfo:
            raise URIError.invalid(text, "empty userinfo")
        user, colon, pw = userinfo.partition(":")
        if colon:
            password = pw

    hostport, sep, param_str = hostpart.partition(";")
    params = _parse_uri_params(text, param_str) if sep else ()
    host, port = _parse_host(text, hostport)

    return SipUri(
        host=host,
        scheme=scheme.lower(),
        user=user,
        password=password,
        port=port,
        params=params,
        headers=headers,
    )
