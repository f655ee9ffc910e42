"""
Reset the database to two demo lists.

Usage:
    python -m wordboard.app.seed
"""

import logging

from sqlalchemy import delete
from sqlalchemy.orm import Session

from .db import SessionLocal, init_db
from .models import Word, WordList

logger = logging.getLogger(__name__)

SEED_LISTS = [
    {
        "name": "Basic words",
        "slug": "basic",
        "order": 1,
        "theme": "blue",
        "words": [("sea", 1), ("mountain", 2)],
    },
    {
        "name": "Feelings",
        "slug": "feelings",
        "order": 2,
        "theme": "pink",
        "words": [("joy", 1), ("sorrow", 1), ("anger", 3)],
    },
]


def seed(session: Session) -> list:
    # words first, they reference the lists
    session.execute(delete(Word))
    session.execute(delete(WordList))

    created = []
    for entry in SEED_LISTS:
        word_list = WordList(
            name=entry["name"],
            slug=entry["slug"],
            order=entry["order"],
            theme=entry["theme"],
            words=[Word(text=text, weight=weight) for text, weight in entry["words"]],
        )
        session.add(word_list)
        created.append(word_list)
    session.commit()
    return created


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    init_db()
    with SessionLocal() as session:
        created = seed(session)
        logger.info("Seed complete: %s", ", ".join(wl.slug for wl in created))


if __name__ == "__main__":
    main()
