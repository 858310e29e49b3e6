import hashlib
from collections import Counter
from datetime import datetime, timezone
from typing import Dict

from string_analyzer.schemas import StringProperties, StringRecord


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of the original, unmodified string"""
    # surrogatepass keeps lone surrogates hashable and distinct
    return hashlib.sha256(text.encode("utf-8", "surrogatepass")).hexdigest()


def _strip_whitespace(text: str) -> str:
    return "".join(text.split())


def is_palindrome(text: str) -> bool:
    """Case-insensitive; internal whitespace takes part in the comparison"""
    normalized = text.lower()
    return normalized == normalized[::-1]


def get_character_frequency(text: str) -> Dict[str, int]:
    """Frequency of each lowercased, non-whitespace character"""
    return dict(Counter(_strip_whitespace(text.lower())))


def count_unique_characters(text: str) -> int:
    """Count distinct lowercased, non-whitespace characters"""
    return len(set(_strip_whitespace(text.lower())))


def count_words(text: str) -> int:
    """Count words separated by whitespace; blank strings have 0 words"""
    return len(text.split())


def analyze(value: str) -> StringProperties:
    """Compute every derived property of a string"""
    return StringProperties(
        length=len(value),
        is_palindrome=is_palindrome(value),
        unique_characters=count_unique_characters(value),
        word_count=count_words(value),
        sha256_hash=compute_sha256(value),
        character_frequency_map=get_character_frequency(value),
    )


def build_record(value: str) -> StringRecord:
    """Analyze a string and wrap it into a record ready for the store"""
    properties = analyze(value)
    return StringRecord(
        id=properties.sha256_hash,
        value=value,
        properties=properties,
        created_at=datetime.now(timezone.utc),
    )
