"""Reply templates for desire suggestions."""

import re


VERB_TEMPLATE = "じゃあ{}ええやん"
NEGATED_VERB_TEMPLATE = "じゃあ別に{}ええやん"
LIGHT_VERB_TEMPLATE = "じゃあ{}すればええやん"
NEGATED_LIGHT_VERB_TEMPLATE = "じゃあ別に{}しなかったらええやん"

# A phrase is a run without whitespace or sentence punctuation
_PHRASE = r"([^\s、。,.!?！？]+?)"
# The expression must end the clause, optionally softened with な
_END = r"な?(?=[\s、。!?！？]|$)"
_LIGHT_VERB_DESIRE = re.compile(_PHRASE + r"(?:してみ|し)たい" + _END)
_NEGATED_LIGHT_VERB_DESIRE = re.compile(_PHRASE + r"(?:してみ|し)たくない" + _END)


def extract_noun_phrase(text: str, negated: bool = False) -> str | None:
    """Find the phrase standing before したい (or したくない) in raw text.

    Examples:
        >>> extract_noun_phrase("今日は勉強したいな")
        '今日は勉強'
        >>> extract_noun_phrase("もう運動したくない", negated=True)
        'もう運動'
    """
    pattern = _NEGATED_LIGHT_VERB_DESIRE if negated else _LIGHT_VERB_DESIRE
    match = pattern.search(text)
    return match.group(1) if match else None


def compose(phrase: str, negated: bool = False, light_verb: bool = False) -> str:
    """Fill the reply template for a conjugated verb or a noun phrase."""
    if light_verb:
        template = NEGATED_LIGHT_VERB_TEMPLATE if negated else LIGHT_VERB_TEMPLATE
    else:
        template = NEGATED_VERB_TEMPLATE if negated else VERB_TEMPLATE
    return template.format(phrase)
