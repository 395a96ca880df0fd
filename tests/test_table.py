"""Unit tests for the byte/token bijection table."""

import pytest

from bottomify.errors import DecodeError
from bottomify.separator import Separator
from bottomify.table import (
    BYTE_TO_EMOJI,
    CHARACTER_VALUES,
    EMOJI_TO_BYTE,
    NULL_TOKEN,
    forward,
    render_table,
    reverse,
)


def _token_value(body: str) -> int:
    """Sum the weights of a token body."""
    weights = {char: weight for weight, char in CHARACTER_VALUES}
    return sum(weights[char] for char in body)


# Shape and invariants
# ---------------------------------------------------------------------------


def test_forward_has_one_token_per_byte():
    """Forward table covers 0..255 with distinct tokens."""
    assert len(BYTE_TO_EMOJI) == 256
    assert len(set(BYTE_TO_EMOJI)) == 256


def test_tables_are_inverse():
    """Reverse undoes forward and forward undoes reverse on its range."""
    for value, token in enumerate(BYTE_TO_EMOJI):
        assert EMOJI_TO_BYTE[token] == value
        assert BYTE_TO_EMOJI[EMOJI_TO_BYTE[token]] == token


def test_every_token_ends_with_modern_delimiter():
    """Forward tokens carry the delimiter the decoder splits on."""
    assert all(token.endswith(Separator.MODERN.value) for token in BYTE_TO_EMOJI)


def test_bodies_sum_to_byte_value():
    """Each non-zero body is a greedy sum of weighted characters."""
    for value in range(1, 256):
        body = forward(value).removesuffix(Separator.MODERN.value)
        assert _token_value(body) == value


def test_null_byte_token():
    """Zero has its own token."""
    assert forward(0) == NULL_TOKEN + Separator.MODERN.value
    assert reverse(NULL_TOKEN) == 0


def test_reverse_table_is_read_only():
    """The shared lookup cannot be mutated."""
    with pytest.raises(TypeError):
        EMOJI_TO_BYTE["x"] = 1


def test_reverse_unknown_token_raises():
    """Unknown tokens raise DecodeError carrying the token."""
    with pytest.raises(DecodeError) as exc_info:
        reverse("🙂")
    assert exc_info.value.fragment == "🙂"


# Rendering
# ---------------------------------------------------------------------------


def test_render_table_lines():
    """One line per byte, printable ASCII shown as itself."""
    lines = render_table().splitlines()
    assert len(lines) == 256
    assert lines[0] == f"[0] \\x00 {NULL_TOKEN}"
    assert lines[ord("h")] == "[104] h 💖💖,,,,"
    assert lines[ord(" ")] == "[32] \\x20 ✨✨✨,,"
    assert lines[255] == "[255] \\xff 🫂💖🥺"
