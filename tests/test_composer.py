"""Tests for reply templates and the noun + する phrase scan."""

from services.composer import compose, extract_noun_phrase


def test_compose_four_templates():
    assert compose("書けば") == "じゃあ書けばええやん"
    assert compose("書かなかったら", negated=True) == "じゃあ別に書かなかったらええやん"
    assert compose("勉強", light_verb=True) == "じゃあ勉強すればええやん"
    assert compose("勉強", negated=True, light_verb=True) == "じゃあ別に勉強しなかったらええやん"


def test_noun_phrase_before_shitai():
    assert extract_noun_phrase("今日は勉強したい") == "今日は勉強"
    assert extract_noun_phrase("ゲームしたいな") == "ゲーム"
    assert extract_noun_phrase("旅行してみたい！") == "旅行"


def test_noun_phrase_stops_at_punctuation():
    assert extract_noun_phrase("疲れた。運動したい") == "運動"
    assert extract_noun_phrase("ねえ、 散歩したい") == "散歩"


def test_negated_noun_phrase():
    assert extract_noun_phrase("もう勉強したくない", negated=True) == "もう勉強"
    assert extract_noun_phrase("もう勉強したくない") is None


def test_no_phrase_without_pattern():
    assert extract_noun_phrase("したい") is None
    assert extract_noun_phrase("何もない") is None


def test_desire_must_end_the_clause():
    assert extract_noun_phrase("勉強したいけど時間がない") is None
    assert extract_noun_phrase("勉強したい、でも眠い") == "勉強"
    assert extract_noun_phrase("散歩したいな。") == "散歩"
    assert extract_noun_phrase("運動したくないな", negated=True) == "運動"
