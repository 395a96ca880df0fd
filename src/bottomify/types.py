"""
Core types for the emoji codec.
"""

from collections.abc import Mapping

type Byte = int
type Token = str
type ForwardTable = tuple[Token, ...]
type ReverseTable = Mapping[Token, Byte]
