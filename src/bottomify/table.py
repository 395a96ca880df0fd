"""
Static bijection between the 256 byte values and their emoji tokens.

Each byte is written as a sum of weighted characters, largest first, so
``104`` becomes ``💖💖,,,,`` (50 + 50 + 1 + 1 + 1 + 1). Zero has a token of
its own. Every forward token carries the modern delimiter at its end.
"""

import logging
from types import MappingProxyType
from typing import Final

from .errors import BottomError, DecodeError
from .separator import Separator
from .types import Byte, ForwardTable, ReverseTable, Token

log = logging.getLogger(__name__)

# largest value first: greedy decomposition relies on this order
CHARACTER_VALUES: Final[tuple[tuple[int, str], ...]] = (
    (200, "\U0001fac2"),  # people hugging
    (50, "\U0001f496"),  # sparkling heart
    (10, "\u2728"),  # sparkles
    (5, "\U0001f97a"),  # pleading face
    (1, ","),
)
NULL_TOKEN: Final[Token] = "\u2764\ufe0f"  # heavy black heart


def _token_body(value: Byte) -> Token:
    """Return the undelimited token for ``value``."""
    if value == 0:
        return NULL_TOKEN

    parts = []
    for weight, char in CHARACTER_VALUES:
        count, value = divmod(value, weight)
        parts.append(char * count)
    return "".join(parts)


def _build_tables() -> tuple[ForwardTable, ReverseTable]:
    """
    Build the forward and reverse lookup tables.

    The reverse table maps both the delimited token and its bare body to the
    byte, since fragments produced by splitting an encoded string carry no
    delimiter.

    :raises BottomError: If two byte values end up sharing a token.
    """
    bodies = [_token_body(value) for value in range(256)]
    forward = tuple(body + Separator.MODERN.value for body in bodies)

    if len(set(forward)) != len(forward):
        raise BottomError("token table is not a bijection")

    reverse: dict[Token, Byte] = {}
    for value, (body, token) in enumerate(zip(bodies, forward)):
        reverse[token] = value
        reverse[body] = value

    log.debug(f"built token table: {len(forward)} tokens, {len(reverse)} lookup keys")
    return forward, MappingProxyType(reverse)


BYTE_TO_EMOJI, EMOJI_TO_BYTE = _build_tables()


def forward(value: Byte) -> Token:
    """Return the delimited token for a byte value."""
    return BYTE_TO_EMOJI[value]


def reverse(token: Token) -> Byte:
    """
    Return the byte value for an exact token match.

    :raises DecodeError: If ``token`` is not in the table.
    """
    try:
        return EMOJI_TO_BYTE[token]
    except KeyError:
        raise DecodeError(token) from None


def _render_byte(value: Byte) -> str:
    """Show printable ASCII as itself and everything else as an escape."""
    char = chr(value)
    if value < 0x80 and char.isprintable() and not char.isspace():
        return char
    return f"\\x{value:02x}"


def render_table() -> str:
    """
    Render the whole table, one ``[byte] char token`` line per byte value.

    Tokens are shown without their trailing delimiter.
    """
    lines = []
    for value, token in enumerate(BYTE_TO_EMOJI):
        body = token.removesuffix(Separator.MODERN.value)
        lines.append(f"[{value}] {_render_byte(value)} {body}")
    return "\n".join(lines) + "\n"


__all__ = [
    "BYTE_TO_EMOJI",
    "EMOJI_TO_BYTE",
    "CHARACTER_VALUES",
    "NULL_TOKEN",
    "forward",
    "reverse",
    "render_table",
]
