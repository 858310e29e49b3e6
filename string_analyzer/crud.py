import logging
from typing import Any

from string_analyzer.analyzer import build_record, compute_sha256
from string_analyzer.errors import InvalidInput, NotFound
from string_analyzer.filters import apply_filters
from string_analyzer.nlp import translate
from string_analyzer.schemas import (
    FilterSet,
    InterpretedQuery,
    NaturalLanguageResult,
    QueryResult,
    StringRecord,
)
from string_analyzer.store import StringStore

logger = logging.getLogger(__name__)


def submit(store: StringStore, value: Any) -> StringRecord:
    """Analyze and store a new string"""
    if not isinstance(value, str):
        raise InvalidInput("Value must be a string")
    if not value.strip():
        raise InvalidInput("Value cannot be empty")
    if any("\ud800" <= char <= "\udfff" for char in value):
        raise InvalidInput("Value must be valid Unicode text")

    record = build_record(value)
    store.insert(record)
    logger.info(f"Stored string {record.id[:12]} (length={record.properties.length})")
    return record


def fetch_by_value(store: StringStore, value: str) -> StringRecord:
    """Get string analysis by its original value"""
    record = store.get(compute_sha256(value))
    if record is None:
        raise NotFound("String does not exist in the system")
    return record


def remove_by_value(store: StringStore, value: str) -> None:
    """Delete string analysis by its original value"""
    string_id = compute_sha256(value)
    store.delete(string_id)
    logger.info(f"Deleted string {string_id[:12]}")


def query(store: StringStore, filters: FilterSet) -> QueryResult:
    """Get all strings matching the structured filters"""
    records = apply_filters(store.list(), filters)
    return QueryResult(
        data=records,
        count=len(records),
        filters_applied=filters.applied(),
    )


def query_natural(store: StringStore, text: str) -> NaturalLanguageResult:
    """Translate a natural language query and apply the resulting filters"""
    if not isinstance(text, str) or not text.strip():
        raise InvalidInput("Query cannot be empty")

    filters = translate(text)
    logger.info(f"Interpreted '{text}' as {filters.applied()}")

    records = apply_filters(store.list(), filters)
    return NaturalLanguageResult(
        data=records,
        count=len(records),
        interpreted_query=InterpretedQuery(
            original=text,
            parsed_filters=filters.applied(),
        ),
    )
