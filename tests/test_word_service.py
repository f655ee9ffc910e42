from datetime import datetime

import pytest
from sqlalchemy import func, select

from wordboard.app.board.layout import WordEntry
from wordboard.app.models import Word
from wordboard.app.services import word_list_service, word_service
from wordboard.app.services.errors import ConflictError, NotFoundError


@pytest.fixture
def word_list(session):
    return word_list_service.create_list(session, "Weather")


def _count(session):
    return session.scalar(select(func.count()).select_from(Word))


def test_create_word_defaults_weight(session, word_list):
    word = word_service.create_word(session, word_list.id, "rain")
    assert word.weight == 1
    assert word.list_id == word_list.id


def test_duplicate_word_in_same_list_conflicts(session, word_list):
    word_service.create_word(session, word_list.id, "rain", 3)
    with pytest.raises(ConflictError):
        word_service.create_word(session, word_list.id, "rain", 7)
    assert _count(session) == 1
    assert word_service.list_by_list_id(session, word_list.id)[0].weight == 3


def test_same_text_in_another_list_is_fine(session, word_list):
    other = word_list_service.create_list(session, "Climate")
    word_service.create_word(session, word_list.id, "rain")
    word_service.create_word(session, other.id, "rain")
    assert _count(session) == 2


def test_create_word_in_unknown_list(session):
    with pytest.raises(NotFoundError):
        word_service.create_word(session, "missing", "rain")


def test_update_word(session, word_list):
    word = word_service.create_word(session, word_list.id, "rain", 3)
    updated = word_service.update_word(session, word.id, "storm", 900)
    assert (updated.text, updated.weight) == ("storm", 900)


def test_update_conflict_keeps_previous_values(session, word_list):
    word_service.create_word(session, word_list.id, "rain")
    snow = word_service.create_word(session, word_list.id, "snow", 4)
    with pytest.raises(ConflictError):
        word_service.update_word(session, snow.id, "rain", 5)
    reloaded = word_service.get_word(session, snow.id)
    assert (reloaded.text, reloaded.weight) == ("snow", 4)


def test_update_and_delete_unknown_word(session):
    with pytest.raises(NotFoundError):
        word_service.update_word(session, "missing", "x", 1)
    with pytest.raises(NotFoundError):
        word_service.delete_word(session, "missing")


def test_delete_word(session, word_list):
    word = word_service.create_word(session, word_list.id, "fog")
    word_service.delete_word(session, word.id)
    assert _count(session) == 0


def test_list_by_list_id_orders_by_weight_then_age(session, word_list):
    late = word_service.create_word(session, word_list.id, "late", 5)
    early = word_service.create_word(session, word_list.id, "early", 5)
    word_service.create_word(session, word_list.id, "heavy", 9)
    early.created_at = datetime(2024, 1, 1)
    late.created_at = datetime(2024, 1, 2)
    session.commit()

    texts = [w.text for w in word_service.list_by_list_id(session, word_list.id)]
    assert texts == ["heavy", "early", "late"]


def test_word_entries(session, word_list):
    word = word_service.create_word(session, word_list.id, "hail", 12)
    assert word_service.word_entries(session, word_list.id) == [
        WordEntry(id=word.id, text="hail", weight=12)
    ]
