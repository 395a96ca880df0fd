"""bottomify: reversible byte-to-emoji text codec."""

from .codec import (
    decode_byte,
    decode_string,
    decode_string_long,
    delongate,
    encode_byte,
    encode_string,
)
from .errors import BottomError, DecodeError
from .separator import Separator
from .table import render_table

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("bottomify")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "encode_byte",
    "decode_byte",
    "encode_string",
    "decode_string",
    "decode_string_long",
    "delongate",
    "render_table",
    "Separator",
    "BottomError",
    "DecodeError",
]
