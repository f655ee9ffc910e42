"""
Word list queries and mutations

This module provides functions to:
- Create lists (slug derived from the name when not given)
- Page through lists newest-first with an id cursor and optional search
- Look lists up by slug, with or without their words
- Rename and delete lists (deleting a list deletes its words)
"""

import logging
import re
import uuid
from typing import List, Optional, Tuple

from sqlalchemy import and_, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..models import Word, WordList
from .errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20


def slugify(name: str) -> str:
    """Rough slug: trim, lowercase, whitespace -> '-', drop anything outside [a-z0-9-]."""
    slug = re.sub(r"\s+", "-", name.strip().lower())
    return re.sub(r"[^a-z0-9-]", "", slug)


def create_list(
    session: Session,
    name: str,
    slug: Optional[str] = None,
    theme: Optional[str] = None,
    order: Optional[int] = None,
) -> WordList:
    slug = slug or slugify(name)
    if not slug:
        # names without any ascii letters or digits
        slug = f"list-{uuid.uuid4().hex[:8]}"
    word_list = WordList(name=name, slug=slug, theme=theme, order=order or 0)
    session.add(word_list)
    try:
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        logger.warning("List slug %r already taken", slug)
        raise ConflictError(f"A list with slug '{slug}' already exists") from exc
    logger.info("Created list %s (%s)", word_list.id, slug)
    return word_list


def get_list(session: Session, list_id: str) -> WordList:
    word_list = session.get(WordList, list_id)
    if word_list is None:
        raise NotFoundError(f"List not found: {list_id}")
    return word_list


def get_latest(session: Session) -> WordList:
    """The most recently created list."""
    latest = session.scalars(
        select(WordList).order_by(WordList.created_at.desc(), WordList.id.desc()).limit(1)
    ).first()
    if latest is None:
        raise NotFoundError("No word list found")
    return latest


def list_lists(
    session: Session,
    limit: int = DEFAULT_LIMIT,
    cursor: Optional[str] = None,
    search: Optional[str] = None,
) -> Tuple[List[WordList], Optional[str]]:
    """
    Page through lists newest-first.
    Returns (items, next_cursor); next_cursor is the id of the first item of the next page.
    """
    query = select(WordList)
    if search:
        needle = search.strip()
        query = query.where(or_(
            WordList.name.icontains(needle, autoescape=True),
            WordList.slug.icontains(needle, autoescape=True),
        ))
    if cursor:
        anchor = get_list(session, cursor)
        query = query.where(or_(
            WordList.created_at < anchor.created_at,
            and_(WordList.created_at == anchor.created_at, WordList.id <= anchor.id),
        ))
    query = query.order_by(WordList.created_at.desc(), WordList.id.desc()).limit(limit + 1)

    items = list(session.scalars(query))
    next_cursor = None
    if len(items) > limit:
        next_cursor = items.pop().id
    return items, next_cursor


def get_by_slug(session: Session, slug: str) -> Optional[WordList]:
    return session.scalars(select(WordList).where(WordList.slug == slug)).first()


def get_words_by_list_id(session: Session, list_id: str) -> List[Word]:
    """Words of a list, heaviest first, then alphabetical."""
    return list(session.scalars(
        select(Word).where(Word.list_id == list_id).order_by(Word.weight.desc(), Word.text.asc())
    ))


def get_list_with_words_by_slug(
    session: Session, slug: str
) -> Optional[Tuple[WordList, List[Word]]]:
    word_list = get_by_slug(session, slug)
    if word_list is None:
        return None
    return word_list, get_words_by_list_id(session, word_list.id)


def rename_list(session: Session, list_id: str, name: str) -> WordList:
    """Change the display name; the slug stays put."""
    word_list = get_list(session, list_id)
    word_list.name = name
    session.commit()
    logger.info("Renamed list %s to %r", list_id, name)
    return word_list


def delete_list(session: Session, list_id: str) -> None:
    word_list = get_list(session, list_id)
    session.delete(word_list)
    session.commit()
    logger.info("Deleted list %s", list_id)
