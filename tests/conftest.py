"""Shared fixtures: Sudachi-shaped tokens without loading a dictionary."""

import sys
from pathlib import Path

import pytest

project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root / "src"))

from services.tokenizer import PartOfSpeech, Token  # noqa: E402


def verb(surface: str, base: str, detail: str = "五段-カ行") -> Token:
    return Token(surface, base, PartOfSpeech.VERB, detail)


def aux(surface: str, base: str, detail: str) -> Token:
    return Token(surface, base, PartOfSpeech.AUXILIARY, detail)


def other(surface: str) -> Token:
    return Token(surface, surface, PartOfSpeech.OTHER)


TAI = aux("たい", "たい", "助動詞-タイ")
TAKU = aux("たく", "たい", "助動詞-タイ")
NAI = aux("ない", "ない", "助動詞-ナイ")

# Sentences as SudachiPy (mode C) splits them
SENTENCES: dict[str, list[Token]] = {
    "手紙を書きたい": [other("手紙"), other("を"), verb("書き", "書く"), TAI],
    "手紙を書きたくない": [other("手紙"), other("を"), verb("書き", "書く"), TAKU, NAI],
    "ラーメンを食べたい": [other("ラーメン"), other("を"), verb("食べ", "食べる", "下一段-バ行"), TAI],
    "ラーメンを食べたくない": [
        other("ラーメン"), other("を"), verb("食べ", "食べる", "下一段-バ行"), TAKU, NAI,
    ],
    "今日は勉強したい": [other("今日"), other("は"), other("勉強"), verb("し", "する", "サ行変格"), TAI],
    "もう勉強したくない": [other("もう"), other("勉強"), verb("し", "する", "サ行変格"), TAKU, NAI],
    "旅行してみたい": [
        other("旅行"), verb("し", "する", "サ行変格"), other("て"), verb("み", "みる", "上一段-マ行"), TAI,
    ],
    "勉強してみたくない": [
        other("勉強"), verb("し", "する", "サ行変格"), other("て"), verb("み", "みる", "上一段-マ行"), TAKU, NAI,
    ],
    "テニスしたい": [other("テニス"), verb("し", "する", "サ行変格"), TAI],
    "今日はいい天気": [other("今日"), other("は"), Token("いい", "良い", PartOfSpeech.ADJECTIVE, "形容詞"), other("天気")],
}


class FakeTokenizer:
    """Looks sentences up in SENTENCES; unknown text yields no tokens."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def tokenize(self, text: str) -> list[Token]:
        self.calls.append(text)
        return SENTENCES.get(text, [])


@pytest.fixture
def fake_tokenizer() -> FakeTokenizer:
    return FakeTokenizer()
