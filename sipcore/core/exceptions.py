"""Shared exception classes.

All parse failures carry an error code (see ErrorCode) and a human-readable
message. Callers that handle untrusted wire input catch SIPParseError (or a
subclass) and map the code as they see fit.
"""

from typing import Optional


class ErrorCode:
    """Error code registry."""
    # Lexical layer
    INVALID_PARAMETERS = "INVALID_PARAMETERS"
    UNTERMINATED_QUOTE = "UNTERMINATED_QUOTE"

    # URI layer
    URI_INVALID = "URI_INVALID"
    URI_UNSUPPORTED_SCHEME = "URI_UNSUPPORTED_SCHEME"

    # Name-address layer
    NAMEADDR_INVALID = "NAMEADDR_INVALID"

    # Route layer
    INVALID_ROUTE = "INVALID_ROUTE"
    GARBAGE_AT_END = "GARBAGE_AT_END"

    # Containers
    ROUTE_SET_EMPTY = "ROUTE_SET_EMPTY"


class SIPError(Exception):
    """Base exception for all sipcore errors."""
    pass


class SIPParseError(SIPError):
    """Base exception for grammar failures.

    Attributes:
        code: ErrorCode constant
        message: Human-readable error message
    """

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(message)


# =============================================================================
# Collaborator grammar exceptions
# =============================================================================

class ParamsError(SIPParseError):
    """Malformed ;key=value parameter list or quoted string."""

    @classmethod
    def invalid(cls, reason: str) -> "ParamsError":
        return cls(
            code=ErrorCode.INVALID_PARAMETERS,
            message=f"Invalid parameters: {reason}",
        )

    @classmethod
    def unterminated_quote(cls, text: str) -> "ParamsError":
        return cls(
            code=ErrorCode.UNTERMINATED_QUOTE,
            message=f"Unterminated quoted string: {text[:50]!r}",
        )


class URIError(SIPParseError):
    """SIP URI could not be parsed."""

    @classmethod
    def invalid(cls, uri: str, reason: str) -> "URIError":
        return cls(
            code=ErrorCode.URI_INVALID,
            message=f"Invalid URI {uri[:80]!r}: {reason}",
        )

    @classmethod
    def unsupported_scheme(cls, uri: str) -> "URIError":
        return cls(
            code=ErrorCode.URI_UNSUPPORTED_SCHEME,
            message=f"Unsupported URI scheme: {uri[:80]!r}",
        )


class NameAddrError(SIPParseError):
    """Display name / addr-spec could not be parsed."""

    @classmethod
    def invalid(cls, text: str, reason: str) -> "NameAddrError":
        return cls(
            code=ErrorCode.NAMEADDR_INVALID,
            message=f"Invalid name-addr {text[:80]!r}: {reason}",
        )


# =============================================================================
# Route exceptions
# =============================================================================

class RouteError(SIPParseError):
    """Route / Record-Route header parsing errors.

    Attributes:
        cause: Underlying exception for INVALID_ROUTE and INVALID_PARAMETERS
        rest: Unconsumed input for GARBAGE_AT_END
    """

    def __init__(
        self,
        code: str,
        message: str,
        cause: Optional[Exception] = None,
        rest: Optional[str] = None,
    ):
        super().__init__(code, message)
        self.cause = cause
        self.rest = rest

    @classmethod
    def invalid_route(cls, cause: Exception) -> "RouteError":
        """A stage of route parsing failed, or trailing garbage was found
        while folding a header."""
        return cls(
            code=ErrorCode.INVALID_ROUTE,
            message=f"Invalid route: {cause}",
            cause=cause,
        )

    @classmethod
    def garbage_at_end(cls, rest: str) -> "RouteError":
        return cls(
            code=ErrorCode.GARBAGE_AT_END,
            message=f"Unexpected data after route: {rest[:50]!r}",
            rest=rest,
        )

    @classmethod
    def invalid_parameters(cls, cause: Exception) -> "RouteError":
        return cls(
            code=ErrorCode.INVALID_PARAMETERS,
            message=f"Invalid route parameters: {cause}",
            cause=cause,
        )


class RouteSetError(SIPError):
    """Access to the first/last element of an empty route set."""

    def __init__(self, operation: str):
        self.code = ErrorCode.ROUTE_SET_EMPTY
        self.message = f"Route set is empty: cannot {operation}"
        super().__init__(self.message)
