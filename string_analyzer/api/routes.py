from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import Optional
import logging

from string_analyzer import crud
from string_analyzer.errors import Conflict, InvalidInput, NotFound, Unparseable
from string_analyzer.schemas import (
    FilterSet,
    NaturalLanguageResult,
    QueryResult,
    StringCreate,
    StringRecord,
)
from string_analyzer.store import StringStore, get_store

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/strings", response_model=StringRecord, status_code=status.HTTP_201_CREATED)
def create_string(payload: StringCreate, store: StringStore = Depends(get_store)):
    """
    Analyze and store a string.
    Returns 409 if string already exists.
    """
    try:
        return crud.submit(store, payload.value)
    except InvalidInput as e:
        logger.warning(f"Rejected string: {e}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"error": str(e)}
        )
    except Conflict as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={"error": str(e)}
        )


@router.get("/strings", response_model=QueryResult)
def get_all_strings(
    is_palindrome: Optional[bool] = Query(None),
    min_length: Optional[int] = Query(None, ge=0),
    max_length: Optional[int] = Query(None, ge=0),
    word_count: Optional[int] = Query(None, ge=0),
    contains_character: Optional[str] = Query(None, min_length=1),
    store: StringStore = Depends(get_store)
):
    """
    Get all strings with optional filtering.
    """
    filters = FilterSet(
        is_palindrome=is_palindrome,
        min_length=min_length,
        max_length=max_length,
        word_count=word_count,
        contains_character=contains_character,
    )
    return crud.query(store, filters)


# Must be registered before /strings/{string_value}
@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResult)
def filter_by_natural_language(
    query: str = Query(..., description="Natural language query"),
    store: StringStore = Depends(get_store)
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    try:
        return crud.query_natural(store, query)
    except (InvalidInput, Unparseable) as e:
        logger.warning(f"Could not interpret query '{query}': {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": str(e)}
        )


@router.get("/strings/{string_value}", response_model=StringRecord)
def get_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    try:
        return crud.fetch_by_value(store, string_value)
    except NotFound as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": str(e)}
        )


@router.delete("/strings/{string_value}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    try:
        crud.remove_by_value(store, string_value)
    except NotFound as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": str(e)}
        )
    return None
