"""Tests for desire detection and verb extraction."""

from conftest import NAI, SENTENCES, TAI, TAKU, aux, other, verb
from services.desire import SURU, DesireSignal, detect, extract, is_negator
from services.tokenizer import PartOfSpeech, Token


def test_detects_affirmative_desire():
    assert detect(SENTENCES["手紙を書きたい"]) == DesireSignal(present=True, negated=False)


def test_detects_negated_desire():
    assert detect(SENTENCES["手紙を書きたくない"]) == DesireSignal(present=True, negated=True)


def test_no_marker_is_not_a_desire():
    signal = detect(SENTENCES["今日はいい天気"])
    assert not signal.present
    assert not signal.negated
    assert detect([]) == DesireSignal()


def test_taku_without_negator_is_not_a_desire():
    tokens = [verb("書き", "書く"), TAKU, aux("て", "て", "*")]
    assert not detect(tokens).present
    assert extract(tokens) is None


def test_tai_followed_by_negator_is_negated():
    tokens = [verb("行き", "行く"), TAI, Token("ない", "無い", PartOfSpeech.ADJECTIVE, "形容詞")]
    assert detect(tokens).negated


def test_predicate_ending_in_tai_is_a_marker():
    tokens = [Token("眠たい", "眠たい", PartOfSpeech.ADJECTIVE, "形容詞")]
    assert detect(tokens).present
    assert extract(tokens) == "眠"


def test_negator_by_detail_tag():
    assert is_negator(aux("ん", "ぬ", "助動詞-ヌ"))
    assert is_negator(NAI)
    assert not is_negator(other("ない"))


def test_extracts_preceding_verb_base_form():
    assert extract(SENTENCES["ラーメンを食べたい"]) == "食べる"
    assert extract(SENTENCES["ラーメンを食べたくない"]) == "食べる"


def test_extracts_light_verb_sentinel():
    assert extract(SENTENCES["今日は勉強したい"]) is SURU
    assert extract(SENTENCES["もう勉強したくない"]) is SURU


def test_marker_without_verb_extracts_nothing():
    tokens = [other("それ"), TAI]
    assert detect(tokens).present
    assert extract(tokens) is None


def test_only_first_marker_counts():
    tokens = [verb("寝", "寝る", "下一段-ナ行"), TAI, other("し"), verb("食べ", "食べる"), TAKU, NAI]
    assert detect(tokens) == DesireSignal(present=True, negated=False)
    assert extract(tokens) == "寝る"


def test_miru_after_shite_is_light_verb():
    assert extract(SENTENCES["旅行してみたい"]) is SURU
    assert extract(SENTENCES["勉強してみたくない"]) is SURU


def test_miru_on_its_own_is_extracted():
    tokens = [other("映画"), other("を"), verb("見", "見る", "上一段-マ行"), TAI]
    assert extract(tokens) == "見る"
    # て + みる after an ordinary verb stays みる
    tokens = [verb("書い", "書く"), other("て"), verb("み", "みる", "上一段-マ行"), TAI]
    assert extract(tokens) == "みる"
