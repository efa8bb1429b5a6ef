from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from string_analyzer.database import get_db
from string_analyzer import crud, schemas
from string_analyzer.exceptions import NotFoundError, ValidationError
from string_analyzer.nlp import parse_natural_language_query

router = APIRouter()
logger = logging.getLogger(__name__)


def list_strings(db: Session, filters: schemas.StringFilters) -> List[schemas.StringResponse]:
    """Listing shared by the query-parameter and natural language endpoints."""
    return [schemas.StringResponse.from_record(s) for s in crud.get_all_strings(db, filters)]


@router.post("/strings", response_model=schemas.StringResponse, status_code=status.HTTP_201_CREATED)
def create_string(
    string_data: schemas.StringCreate,
    db: Session = Depends(get_db)
):
    """
    Analyze and store a string.
    Returns 400 if value is missing, 422 if it is not a string, 409 if it already exists.
    """
    value = string_data.value
    if value is None or value == "":
        raise ValidationError("Missing 'value' field")
    if not isinstance(value, str):
        raise ValidationError("'value' must be a string", status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)

    db_string = crud.create_string_record(db, value)
    return schemas.StringResponse.from_record(db_string)


@router.get("/strings", response_model=schemas.StringListResponse)
def get_all_strings(
    is_palindrome: Optional[str] = Query(None, description="'true' for palindromes, anything else for non-palindromes"),
    min_length: Optional[int] = Query(None, ge=0, le=schemas.MAX_SQL_INTEGER),
    max_length: Optional[int] = Query(None, ge=0, le=schemas.MAX_SQL_INTEGER),
    word_count: Optional[int] = Query(None, ge=0, le=schemas.MAX_SQL_INTEGER),
    contains_character: Optional[str] = Query(None, min_length=1, max_length=1),
    db: Session = Depends(get_db)
):
    """
    Get all strings with optional filtering.
    """
    filters = schemas.StringFilters(
        is_palindrome=None if is_palindrome is None else is_palindrome.lower() == "true",
        min_length=min_length,
        max_length=max_length,
        word_count=word_count,
        contains_character=contains_character
    )

    data = list_strings(db, filters)
    return schemas.StringListResponse(
        data=data,
        count=len(data),
        filters_applied=filters.applied()
    )


@router.get("/strings/filter-by-natural-language", response_model=schemas.NaturalLanguageResponse)
def filter_by_natural_language(
    query: Optional[str] = Query(None, description="Natural language query"),
    db: Session = Depends(get_db)
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    if not query or not query.strip():
        raise ValidationError("Missing 'query' parameter")

    filters = parse_natural_language_query(query)
    data = list_strings(db, filters)

    return schemas.NaturalLanguageResponse(
        data=data,
        count=len(data),
        interpreted_query=schemas.InterpretedQuery(
            original=query,
            parsed_filters=filters.applied()
        )
    )


@router.get("/strings/{string_value:path}", response_model=schemas.StringResponse)
def get_string(string_value: str, db: Session = Depends(get_db)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    db_string = crud.get_string_by_value(db, string_value)
    if not db_string:
        raise NotFoundError("String does not exist in the system")
    return schemas.StringResponse.from_record(db_string)


@router.delete("/strings/{string_value:path}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(string_value: str, db: Session = Depends(get_db)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    if not crud.delete_string(db, string_value):
        raise NotFoundError("String does not exist in the system")
    return None
