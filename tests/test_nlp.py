import pytest

from string_analyzer.errors import Unparseable
from string_analyzer.nlp import parse_natural_language_query, translate


def test_palindromic_single_word():
    filters = translate("Show me palindromic single word strings")
    assert filters.applied() == {"is_palindrome": True, "word_count": 1}


def test_palindrome_noun():
    assert translate("all palindromes").applied() == {"is_palindrome": True}


def test_longer_than_is_strict():
    assert translate("strings longer than 5").applied() == {"min_length": 6}


def test_longer_than_zero():
    assert translate("strings longer than 0 characters").applied() == {"min_length": 1}


def test_containing_the_letter():
    assert translate("strings containing the letter z").applied() == {"contains_character": "z"}


def test_query_is_case_folded():
    assert translate("Strings Containing The Letter Q").applied() == {"contains_character": "q"}


def test_patterns_combine_in_any_order():
    filters = translate("containing the letter a, longer than 3, palindrome")
    assert filters.applied() == {
        "is_palindrome": True,
        "min_length": 4,
        "contains_character": "a",
    }


def test_first_occurrence_wins():
    assert translate("longer than 2 or longer than 9").applied() == {"min_length": 3}


def test_unrecognized_query_is_unparseable():
    with pytest.raises(Unparseable):
        translate("foo bar")


def test_longer_than_without_number_is_unparseable():
    with pytest.raises(Unparseable):
        translate("longer than usual")


def test_parse_returns_empty_dict_when_nothing_matches():
    assert parse_natural_language_query("nothing here") == {}


def test_number_too_long_to_convert_is_unparseable():
    with pytest.raises(Unparseable):
        translate("strings longer than " + "9" * 5000)
