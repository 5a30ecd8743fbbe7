"""Japanese verb conditional conjugation.

Produces the two forms a suggestion needs from a dictionary form:
- conditional (仮定形 + ば): 書く -> 書けば, 食べる -> 食べれば
- negative past conditional (ない + たら): 書く -> 書かなかったら

Supports:
- Type I (godan/五段) verbs, one class per final kana row
- Type II (ichidan/一段) verbs: 食べる, 見る, etc.
- Irregular verbs: する (and noun + する compounds), くる/来る
"""

from enum import StrEnum, auto


class ConjugationClass(StrEnum):
    """Conjugation classes a dictionary-form verb can fall into."""

    ICHIDAN = auto()
    GODAN_U = auto()
    GODAN_TSU = auto()
    GODAN_RU = auto()
    GODAN_KU = auto()
    GODAN_GU = auto()
    GODAN_SU = auto()
    GODAN_MU = auto()
    GODAN_BU = auto()
    GODAN_NU = auto()
    SURU = auto()
    KURU = auto()
    UNKNOWN = auto()


# Hiragana vowel lookup table for godan rows
_HIRAGANA_TABLE = {
    # Base -> [あ段, い段, う段, え段, お段]
    "う": ["わ", "い", "う", "え", "お"],
    "つ": ["た", "ち", "つ", "て", "と"],
    "る": ["ら", "り", "る", "れ", "ろ"],
    "く": ["か", "き", "く", "け", "こ"],
    "ぐ": ["が", "ぎ", "ぐ", "げ", "ご"],
    "す": ["さ", "し", "す", "せ", "そ"],
    "む": ["ま", "み", "む", "め", "も"],
    "ぶ": ["ば", "び", "ぶ", "べ", "ぼ"],
    "ぬ": ["な", "に", "ぬ", "ね", "の"],
}

GODAN_CLASSES = {
    "う": ConjugationClass.GODAN_U,
    "つ": ConjugationClass.GODAN_TSU,
    "る": ConjugationClass.GODAN_RU,
    "く": ConjugationClass.GODAN_KU,
    "ぐ": ConjugationClass.GODAN_GU,
    "す": ConjugationClass.GODAN_SU,
    "む": ConjugationClass.GODAN_MU,
    "ぶ": ConjugationClass.GODAN_BU,
    "ぬ": ConjugationClass.GODAN_NU,
}

CONDITIONAL = "ば"
NEGATIVE_PAST_CONDITIONAL = "なかったら"

# Class -> (affirmative suffix, negative suffix), both replacing the final kana
SUFFIXES: dict[ConjugationClass, tuple[str, str]] = {
    GODAN_CLASSES[kana]: (row[3] + CONDITIONAL, row[0] + NEGATIVE_PAST_CONDITIONAL)
    for kana, row in _HIRAGANA_TABLE.items()
}
SUFFIXES[ConjugationClass.ICHIDAN] = ("れ" + CONDITIONAL, NEGATIVE_PAST_CONDITIONAL)
SUFFIXES[ConjugationClass.SURU] = ("すれ" + CONDITIONAL, "し" + NEGATIVE_PAST_CONDITIONAL)

# Appended to the whole word when the ending is not recognized
UNKNOWN_SUFFIXES = ("なら", "のをやめたら")

# Kana preceding る in ichidan verbs (い段/え段)
ICHIDAN_STEM_KANA = frozenset("いきしちにひみりぎじびぴえけせてねへめれげぜでべぺ")

# Ichidan verbs whose stem vowel is hidden behind a kanji
_ICHIDAN_WORDS = frozenset({
    "見る", "観る", "診る", "視る", "着る", "似る", "煮る", "居る", "射る",
    "寝る", "出る", "得る", "経る", "干る",
})

# Godan verbs that look like ichidan when written in kana
_GODAN_RU_WORDS = frozenset({
    "かえる", "はいる", "しる", "はしる", "しゃべる", "すべる", "へる",
    "ける", "あせる", "かぎる", "まじる", "いじる", "にぎる", "ちる",
})

# Special cases: verb -> {negated: complete form}
_SPECIAL_CASES: dict[str, dict[bool, str]] = {
    "ある": {True: "なかったら"},
    "有る": {True: "なかったら"},
}


def classify(verb: str) -> ConjugationClass:
    """Classify a dictionary-form verb. Never fails; falls back to UNKNOWN."""
    if not verb:
        return ConjugationClass.UNKNOWN
    if verb.endswith("する"):
        return ConjugationClass.SURU
    if verb in ("くる", "来る"):
        return ConjugationClass.KURU
    if verb in _ICHIDAN_WORDS:
        return ConjugationClass.ICHIDAN
    if verb in _GODAN_RU_WORDS:
        return ConjugationClass.GODAN_RU

    if verb.endswith("る") and len(verb) >= 2 and verb[-2] in ICHIDAN_STEM_KANA:
        return ConjugationClass.ICHIDAN

    return GODAN_CLASSES.get(verb[-1], ConjugationClass.UNKNOWN)


def _conjugate_kuru(verb: str, negated: bool) -> str:
    """Conjugate くる/来る (to come)."""
    if verb.startswith("来"):
        return "来なかったら" if negated else "来れば"
    return "こなかったら" if negated else "くれば"


def conjugate(verb: str, negated: bool = False) -> str:
    """Conjugate a verb into its conditional or negative past conditional.

    Args:
        verb: Dictionary form of the verb
        negated: Produce "if one does not" instead of "if one does"

    Returns:
        The conjugated form

    Examples:
        >>> conjugate("書く")
        '書けば'
        >>> conjugate("食べる", negated=True)
        '食べなかったら'
    """
    special = _SPECIAL_CASES.get(verb)
    if special and negated in special:
        return special[negated]

    cls = classify(verb)
    match cls:
        case ConjugationClass.KURU:
            return _conjugate_kuru(verb, negated)
        case ConjugationClass.SURU:
            head = verb[:-2]
        case ConjugationClass.UNKNOWN:
            return verb + UNKNOWN_SUFFIXES[negated]
        case _:
            head = verb[:-1]

    affirmative, negative = SUFFIXES[cls]
    return head + (negative if negated else affirmative)
