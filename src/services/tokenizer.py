"""Tokenizer boundary: Sudachi morphemes reduced to the fields the bot reads."""

from collections.abc import Awaitable, Sequence
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Protocol

import jaconv
from sudachipy import Dictionary, Morpheme, SplitMode


class PartOfSpeech(StrEnum):
    """Coarse part-of-speech classes used by desire detection."""

    VERB = auto()
    ADJECTIVE = auto()
    AUXILIARY = auto()
    OTHER = auto()


# Sudachi main category -> coarse class
POS_MAPPING = {
    "動詞": PartOfSpeech.VERB,
    "形容詞": PartOfSpeech.ADJECTIVE,
    "助動詞": PartOfSpeech.AUXILIARY,
}

_SPLIT_MODES = {
    "A": SplitMode.A,
    "B": SplitMode.B,
    "C": SplitMode.C,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single morpheme of an input sentence."""

    surface: str
    base_form: str
    pos: PartOfSpeech
    pos_detail: str = "*"  # Conjugation type, e.g. 助動詞-ナイ

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {
            "surface": self.surface,
            "base": self.base_form,
            "pos": str(self.pos),
            "pos_detail": self.pos_detail,
        }


class Tokenizer(Protocol):
    """Anything that turns text into tokens, synchronously or not."""

    def tokenize(self, text: str) -> Sequence[Token] | Awaitable[Sequence[Token]]: ...


def normalize_text(text: str) -> str:
    """Fold half-width katakana into full-width so patterns see one script."""
    return jaconv.h2z(text).strip()


class SudachiTokenizer:
    """Tokenizer backed by a SudachiPy dictionary.

    Construction loads the dictionary and is slow; callers are expected to
    build it once and share it.
    """

    def __init__(self, dict_type: str = "full", split_mode: str = "C") -> None:
        if split_mode not in _SPLIT_MODES:
            raise ValueError(f"Unknown Sudachi split mode: {split_mode}")
        self._split_mode = _SPLIT_MODES[split_mode]
        self._tokenizer = Dictionary(dict=dict_type).create()

    @staticmethod
    def _to_token(morpheme: Morpheme) -> Token:
        pos_tuple = morpheme.part_of_speech()
        return Token(
            surface=morpheme.surface(),
            base_form=morpheme.dictionary_form(),
            pos=POS_MAPPING.get(pos_tuple[0], PartOfSpeech.OTHER),
            pos_detail=pos_tuple[4],
        )

    def tokenize(self, text: str) -> list[Token]:
        return [self._to_token(m) for m in self._tokenizer.tokenize(text, self._split_mode)]
