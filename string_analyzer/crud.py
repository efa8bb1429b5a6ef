from sqlalchemy.orm import Session
from sqlalchemy import and_, func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from typing import List, Optional
import logging

from string_analyzer.models import StringRecord
from string_analyzer.analyzer import analyze_string
from string_analyzer.schemas import StringFilters
from string_analyzer.exceptions import ConflictError, StorageError

logger = logging.getLogger(__name__)


def create_string_record(db: Session, value: str) -> StringRecord:
    """
    Analyze and store a string.

    The unique constraint on value decides conflicts, so two concurrent
    inserts of the same string cannot both succeed.
    """
    properties = analyze_string(value)

    db_string = StringRecord(
        id=properties["sha256_hash"],
        value=value,
        length=properties["length"],
        is_palindrome=properties["is_palindrome"],
        unique_characters=properties["unique_characters"],
        word_count=properties["word_count"],
        character_frequency_map=properties["character_frequency_map"]
    )

    try:
        db.add(db_string)
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info(f"String already exists: {properties['sha256_hash']}")
        raise ConflictError("String already exists in the system")
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error storing string analysis: {e}")
        raise StorageError(str(e))

    db.refresh(db_string)
    logger.info(f"Stored string {db_string.id}")
    return db_string


def get_string_by_value(db: Session, value: str) -> Optional[StringRecord]:
    """Get string analysis by value"""
    return db.query(StringRecord).filter(StringRecord.value == value).first()


def get_all_strings(db: Session, filters: Optional[StringFilters] = None) -> List[StringRecord]:
    """Get all strings matching every filter that is set, oldest first"""
    query = db.query(StringRecord)
    filters = filters or StringFilters()

    conditions = []

    if filters.is_palindrome is not None:
        conditions.append(StringRecord.is_palindrome == filters.is_palindrome)

    if filters.min_length is not None:
        conditions.append(StringRecord.length >= filters.min_length)

    if filters.max_length is not None:
        conditions.append(StringRecord.length <= filters.max_length)

    if filters.word_count is not None:
        conditions.append(StringRecord.word_count == filters.word_count)

    if filters.contains_character is not None:
        # instr is case-sensitive, unlike LIKE on SQLite
        conditions.append(func.instr(StringRecord.value, filters.contains_character) > 0)

    if conditions:
        query = query.filter(and_(*conditions))

    try:
        return query.order_by(StringRecord.created_at, StringRecord.id).all()
    except (SQLAlchemyError, OverflowError) as e:
        logger.error(f"Error filtering strings: {e}")
        raise StorageError(str(e))


def delete_string(db: Session, value: str) -> bool:
    """Delete string analysis by value"""
    try:
        deleted = db.query(StringRecord).filter(StringRecord.value == value).delete()
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting string: {e}")
        raise StorageError(str(e))

    if deleted:
        logger.info(f"Deleted string {value!r}")
    return bool(deleted)
