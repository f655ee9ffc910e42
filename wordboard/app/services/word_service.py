"""
Word queries and mutations

(list_id, text) is unique; hitting it raises ConflictError and leaves the
session rolled back.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..board.layout import WordEntry
from ..models import Word
from .errors import ConflictError, NotFoundError
from .word_list_service import get_list

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "The same word already exists in this list"


def list_by_list_id(session: Session, list_id: str) -> List[Word]:
    """Words of a list, heaviest first, then oldest first."""
    return list(session.scalars(
        select(Word).where(Word.list_id == list_id).order_by(Word.weight.desc(), Word.created_at.asc())
    ))


def word_entries(session: Session, list_id: str) -> List[WordEntry]:
    return [WordEntry(id=w.id, text=w.text, weight=w.weight) for w in list_by_list_id(session, list_id)]


def get_word(session: Session, word_id: str) -> Word:
    word = session.get(Word, word_id)
    if word is None:
        raise NotFoundError(f"Word not found: {word_id}")
    return word


def _commit(session: Session, list_id: str, text: str) -> None:
    try:
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        logger.warning("Duplicate word %r in list %s", text, list_id)
        raise ConflictError(DUPLICATE_MESSAGE) from exc


def create_word(session: Session, list_id: str, text: str, weight: int = 1) -> Word:
    get_list(session, list_id)
    word = Word(list_id=list_id, text=text, weight=weight)
    session.add(word)
    _commit(session, list_id, text)
    logger.info("Added word %r (weight %d) to list %s", text, weight, list_id)
    return word


def update_word(session: Session, word_id: str, text: str, weight: int) -> Word:
    word = get_word(session, word_id)
    word.text = text
    word.weight = weight
    _commit(session, word.list_id, text)
    logger.info("Updated word %s", word_id)
    return word


def delete_word(session: Session, word_id: str) -> None:
    word = get_word(session, word_id)
    session.delete(word)
    session.commit()
    logger.info("Deleted word %s", word_id)
