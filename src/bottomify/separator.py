"""Token delimiters and delimiter detection for encoded strings."""

from enum import Enum

import regex as re


class Separator(str, Enum):
    """
    Delimiters placed after every token of an encoded string.

    Older encoders used a zero-width space; the current encoder emits a pair
    of pointing hands. Only ``MODERN`` is ever produced, both are accepted.
    """

    LEGACY = "\u200b"
    MODERN = "\U0001f449\U0001f448"

    @classmethod
    def detect(cls, text: str) -> "Separator":
        """
        Select the delimiter used by ``text``.

        The first occurrence of either the legacy character or the first
        character of the modern marker decides; text containing neither is
        treated as modern.
        """
        match = _DETECT_RE.search(text)
        if match is not None and match.group() == cls.LEGACY.value:
            return cls.LEGACY
        return cls.MODERN

    def split_tokens(self, text: str) -> list[str]:
        """
        Split ``text`` into token fragments.

        Exactly one trailing delimiter is removed before splitting. Empty
        fragments are kept so that malformed input fails on lookup.
        """
        return text.removesuffix(self.value).split(self.value)


# legacy char or the leading hand of the modern marker
_DETECT_RE = re.compile(f"[{Separator.LEGACY.value}{Separator.MODERN.value[0]}]")


__all__ = ["Separator"]
