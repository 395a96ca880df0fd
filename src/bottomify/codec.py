"""
Encode bytes as emoji tokens and decode them back.

Encoding works on the raw byte representation of its input: a character that
takes several bytes in UTF-8 becomes several tokens. Decoding reassembles the
bytes and reads them back as UTF-8, replacing invalid sequences instead of
failing.
"""

import logging
import operator
from typing import Final

from typing_extensions import deprecated

from .separator import Separator
from .table import forward, reverse
from .types import Byte, Token

log = logging.getLogger(__name__)

# applied in order, one plain substring pass each
ALIASES: Final[tuple[tuple[str, str], ...]] = (
    (":sparkling_heart:", "\U0001f496"),
    (":pleading_face:", "\U0001f97a"),
    (":point_left:", "\U0001f448"),
    (":point_right:", "\U0001f449"),
    (":sparkles:", "\u2728"),
)

type Encodable = str | bytes | bytearray | memoryview


def encode_byte(value: Byte) -> Token:
    """
    Return the token for a single byte value.

    :raises TypeError: If ``value`` is not an integer.
    :raises ValueError: If ``value`` is not in ``range(256)``.
    """
    if isinstance(value, bool):
        raise TypeError("byte must be an integer, got bool")
    value = operator.index(value)
    if not 0 <= value < 256:
        raise ValueError(f"byte must be in range(0, 256), got {value}")
    return forward(value)


def decode_byte(fragment: str) -> Byte:
    """
    Return the byte value whose token is exactly ``fragment``.

    No trimming or normalisation is done, ``fragment`` must match a token
    (with or without its trailing delimiter) character for character.

    :raises DecodeError: If no token matches.
    """
    return reverse(fragment)


def _to_bytes(data: Encodable) -> bytes:
    """Convert encoder input into the bytes that get encoded."""
    if isinstance(data, str):
        # lone surrogates cannot be represented in UTF-8
        return data.encode("utf-8", errors="replace")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"cannot encode object of type {type(data).__name__}")


def _to_text(data: Encodable) -> str:
    """Convert decoder input into text."""
    if isinstance(data, str):
        return data
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data).decode("utf-8", errors="replace")
    raise TypeError(f"cannot decode object of type {type(data).__name__}")


def encode_string(data: Encodable) -> str:
    """
    Encode text or raw bytes into a string of emoji tokens.

    Text is converted to UTF-8 first. Each token already ends with the modern
    delimiter, so tokens are concatenated as-is.

    :param data: Text or a bytes-like object.
    :returns: Encoded string, empty for empty input.
    :raises TypeError: If ``data`` is neither text nor bytes-like.
    """
    return "".join(forward(value) for value in _to_bytes(data))


def _delongate(text: str) -> str:
    for alias, emoji in ALIASES:
        text = text.replace(alias, emoji)
    return text


def delongate(text: str) -> str:
    """Replace spelled-out ``:alias:`` names with the emoji they stand for."""
    return _delongate(text)


def decode_string(data: Encodable, delongate: bool = False) -> str:
    """
    Decode a string of emoji tokens back into text.

    Both the zero-width space delimiter of older encoders and the current
    pointing-hands delimiter are accepted; the first one found in the input
    decides which is used for splitting.

    :param data: Encoded text, bytes-like input is read as UTF-8.
    :param delongate: Expand ``:alias:`` names before decoding.
    :returns: Decoded text, invalid UTF-8 replaced with U+FFFD.
    :raises DecodeError: On the first fragment that matches no token.
    :raises TypeError: If ``data`` is neither text nor bytes-like.
    """
    text = _to_text(data)
    if delongate:
        text = _delongate(text)

    sep = Separator.detect(text)
    fragments = sep.split_tokens(text)
    log.debug(f"decoding {len(fragments)} fragments split on {sep.name} delimiter")

    # fail fast: first unknown fragment raises
    raw = bytes(decode_byte(fragment) for fragment in fragments)
    return raw.decode("utf-8", errors="replace")


@deprecated("use decode_string(data, delongate=...) instead")
def decode_string_long(data: Encodable, do_delongate: bool) -> str:
    """Decode with an explicit alias expansion flag."""
    return decode_string(data, delongate=do_delongate)


__all__ = [
    "ALIASES",
    "encode_byte",
    "decode_byte",
    "encode_string",
    "decode_string",
    "decode_string_long",
    "delongate",
]
