"""Lexical helpers shared by the SIP header grammars.

RFC 3261 §25.1 building blocks: linear whitespace, tokens, quoted strings
and generic ;key=value parameter lists. Every parser here takes the input
text and returns what it consumed plus the unconsumed remainder, so parsers
can be chained with parse_all().
"""

import string
from typing import Any, Callable, Sequence, Tuple

from sipcore.core.exceptions import ParamsError

# Header folding has already been undone by the message reader, but stray
# CR/LF are still treated as whitespace.
LWS_CHARS = " \t\r\n"

# token = 1*(alphanum / "-" / "." / "!" / "%" / "*" / "_" / "+" / "`" / "'" / "~")
TOKEN_CHARS = frozenset(string.ascii_letters + string.digits + "-.!%*_+`'~")

# gen-value = token / host / quoted-string; host adds ":" for IPv6 and
# "[" "]" for IPv6 references
GEN_VALUE_CHARS = TOKEN_CHARS | frozenset(":[]")

ParseResult = Tuple[Any, str]
Parser = Callable[[str], ParseResult]


def trim_lws(text: str) -> str:
    """Strip leading linear whitespace."""
    return text.lstrip(LWS_CHARS)


def trim_lws_parser(text: str) -> ParseResult:
    """trim_lws() in (value, rest) form for use inside a parse_all() pipeline."""
    return None, trim_lws(text)


def _span(text: str, chars: frozenset) -> int:
    end = 0
    while end < len(text) and text[end] in chars:
        end += 1
    return end


def parse_token(text: str) -> ParseResult:
    """Consume one token.

    Raises:
        ParamsError: If text does not start with a token character.
    """
    end = _span(text, TOKEN_CHARS)
    if end == 0:
        raise ParamsError.invalid(f"token expected at {text[:20]!r}")
    return text[:end], text[end:]


def parse_quoted_string(text: str) -> ParseResult:
    """Consume a double-quoted string, honouring backslash escapes.

    Returns the quoted string verbatim (surrounding quotes and escapes
    included).

    Raises:
        ParamsError: If text is not a quoted string or is unterminated.
    """
    if not text.startswith('"'):
        raise ParamsError.invalid(f"quoted string expected at {text[:20]!r}")
    pos = 1
    while pos < len(text):
        c = text[pos]
        if c == "\\":
            pos += 2
            continue
        if c == '"':
            return text[:pos + 1], text[pos + 1:]
        pos += 1
    raise ParamsError.unterminated_quote(text)


def unquote_string(quoted: str) -> str:
    """Strip the quotes of a quoted string and resolve its escapes."""
    inner = quoted[1:-1]
    out = []
    pos = 0
    while pos < len(inner):
        if inner[pos] == "\\" and pos + 1 < len(inner):
            pos += 1
        out.append(inner[pos])
        pos += 1
    return "".join(out)


def quote_string(value: str) -> str:
    """Inverse of unquote_string()."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _parse_gen_value(text: str) -> ParseResult:
    if text.startswith('"'):
        return parse_quoted_string(text)
    end = _span(text, GEN_VALUE_CHARS)
    if end == 0:
        raise ParamsError.invalid(f"value expected at {text[:20]!r}")
    return text[:end], text[end:]


def parse_params(sep: str, text: str) -> ParseResult:
    """Tokenize a sep-delimited list of key[=value] items.

    The leading separator must already be consumed. A key without a value
    is returned with value "". Quoted values are kept verbatim.

    Parsing stops at the first character that is neither part of a
    parameter nor sep; that character (and any LWS before it) is returned
    as the remainder.

    Args:
        sep: Separator character, e.g. ";"
        text: Input starting at the first parameter name

    Returns:
        ([(key, value), ...], rest)

    Raises:
        ParamsError: On a missing key or an "=" without value.
    """
    params: list[tuple[str, str]] = []
    rest = text
    while True:
        key, rest = parse_token(trim_lws(rest))
        after_key = trim_lws(rest)
        if after_key.startswith("="):
            value, rest = _parse_gen_value(trim_lws(after_key[1:]))
        else:
            value = ""
        params.append((key, value))

        lookahead = trim_lws(rest)
        if not lookahead.startswith(sep):
            return params, rest
        rest = lookahead[1:]


def parse_all(text: str, parsers: Sequence[Parser]) -> ParseResult:
    """Run parsers in order, each consuming a prefix of the previous rest.

    Returns:
        ([value per parser], rest)
    """
    results = []
    rest = text
    for parser in parsers:
        value, rest = parser(rest)
        results.append(value)
    return results, rest
