import hashlib

from string_analyzer.analyzer import analyze, build_record, compute_sha256


def test_hash_is_sha256_of_original_value():
    props = analyze("Hello World")
    assert props.sha256_hash == hashlib.sha256("Hello World".encode("utf-8")).hexdigest()


def test_hash_is_stable_and_distinct():
    assert analyze("level").sha256_hash == analyze("level").sha256_hash
    assert compute_sha256("level") != compute_sha256("Level")
    assert compute_sha256("level") != compute_sha256("level ")


def test_palindrome_is_case_insensitive():
    assert analyze("racecar").is_palindrome is True
    assert analyze("Racecar").is_palindrome is True


def test_palindrome_keeps_internal_whitespace():
    assert analyze("race car").is_palindrome is False
    assert analyze("a b a").is_palindrome is True


def test_length_uses_original_string():
    assert analyze("  Ab  ").length == 6


def test_word_count():
    assert analyze("Hello World").word_count == 2
    assert analyze("  leading and   trailing  ").word_count == 3
    assert analyze("single").word_count == 1


def test_word_count_of_blank_string_is_zero():
    assert analyze("   ").word_count == 0
    assert analyze("").word_count == 0


def test_unique_characters_ignore_case_and_whitespace():
    props = analyze("Aa bB")
    assert props.unique_characters == 2
    assert props.character_frequency_map == {"a": 2, "b": 2}


def test_frequency_map_skips_all_whitespace():
    props = analyze("x\ty\nx")
    assert props.character_frequency_map == {"x": 2, "y": 1}
    assert props.unique_characters == 2


def test_build_record_uses_hash_as_id():
    record = build_record("Level")
    assert record.id == record.properties.sha256_hash
    assert record.value == "Level"
    assert record.created_at.tzinfo is not None


def test_lone_surrogates_are_analyzed_without_error():
    props = analyze("a\ud800")
    assert props.length == 2
    assert props.sha256_hash != analyze("a\ud801").sha256_hash
    assert props.sha256_hash == compute_sha256("a\ud800")
