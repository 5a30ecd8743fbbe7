"""Sureba services module."""

from .tokenizer import PartOfSpeech, SudachiTokenizer, Token, Tokenizer
from .desire import SURU, DesireSignal, detect, extract
from .verb import ConjugationClass, classify, conjugate
from .composer import compose, extract_noun_phrase
from .responder import DesireAnalysis, DesireResponder, analyze_tokens, build_reply

__all__ = [
    # Tokenizer
    "PartOfSpeech",
    "SudachiTokenizer",
    "Token",
    "Tokenizer",
    # Desire detection
    "SURU",
    "DesireSignal",
    "detect",
    "extract",
    # Verb conjugation
    "ConjugationClass",
    "classify",
    "conjugate",
    # Replies
    "compose",
    "extract_noun_phrase",
    "DesireAnalysis",
    "DesireResponder",
    "analyze_tokens",
    "build_reply",
]
