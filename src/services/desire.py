"""Desire detection and extraction over a token sequence.

A desire is the たい auxiliary attached to a verb (食べたい), a verb or
adjective whose surface already ends in たい, or the truncated stem たく
directly followed by a negator (食べたくない). Only the first marker in a
sentence is considered.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from services.tokenizer import PartOfSpeech, Token


DESIRE_MARKER = "たい"
DESIRE_STEM = "たく"
LIGHT_VERB = "する"
TRY_VERBS = frozenset({"みる", "見る"})

# Base forms and conjugation types that mark negation
NEGATION_LEMMAS = frozenset({"ない", "無い", "ぬ"})
NEGATION_DETAILS = frozenset({"助動詞-ナイ", "助動詞-ヌ"})

_PREDICATES = frozenset({PartOfSpeech.VERB, PartOfSpeech.ADJECTIVE})


class _LightVerb(Enum):
    SURU = "する"

    def __repr__(self) -> str:
        return "SURU"


# Sentinel returned by extract() for the noun + する construction
SURU = _LightVerb.SURU

ExtractedVerb = str | _LightVerb | None


@dataclass(frozen=True, slots=True)
class DesireSignal:
    """Whether a sentence wants something, and whether that want is negated."""

    present: bool = False
    negated: bool = False


def is_negator(token: Token) -> bool:
    """Check if a token negates the predicate before it."""
    if token.pos_detail in NEGATION_DETAILS:
        return True
    return (
        token.pos in (PartOfSpeech.AUXILIARY, PartOfSpeech.ADJECTIVE)
        and token.base_form in NEGATION_LEMMAS
    )


def _is_suffixed_predicate(token: Token) -> bool:
    return token.pos in _PREDICATES and token.surface.endswith(DESIRE_MARKER)


def _follows_shite(tokens: Sequence[Token], index: int) -> bool:
    """Check for する + て right before tokens[index] (してみたい)."""
    return (
        index >= 2
        and tokens[index - 1].surface == "て"
        and tokens[index - 2].pos == PartOfSpeech.VERB
        and tokens[index - 2].base_form == LIGHT_VERB
    )


def find_marker(tokens: Sequence[Token]) -> int | None:
    """Return the index of the first desire marker, or None."""
    for i, token in enumerate(tokens):
        if token.pos == PartOfSpeech.AUXILIARY and token.surface == DESIRE_MARKER:
            return i
        if _is_suffixed_predicate(token):
            return i
        if (
            token.pos == PartOfSpeech.AUXILIARY
            and token.surface == DESIRE_STEM
            and i + 1 < len(tokens)
            and is_negator(tokens[i + 1])
        ):
            return i
    return None


def detect(tokens: Sequence[Token]) -> DesireSignal:
    """Detect a desire expression and its polarity."""
    index = find_marker(tokens)
    if index is None:
        return DesireSignal()

    negated = index + 1 < len(tokens) and is_negator(tokens[index + 1])
    return DesireSignal(present=True, negated=negated)


def extract(tokens: Sequence[Token]) -> ExtractedVerb:
    """Extract the dictionary form of the desired verb.

    Returns:
        The base form, SURU for a noun + する construction, or None when no
        verb can be located.
    """
    index = find_marker(tokens)
    if index is None:
        return None

    if index > 0 and tokens[index - 1].pos == PartOfSpeech.VERB:
        base = tokens[index - 1].base_form
        if base == LIGHT_VERB:
            return SURU
        if base in TRY_VERBS and _follows_shite(tokens, index - 1):
            return SURU
        return base or None

    marker = tokens[index]
    if _is_suffixed_predicate(marker):
        base = marker.base_form.removesuffix(DESIRE_MARKER)
        return base or None

    return None
