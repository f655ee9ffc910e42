"""
Optimistic editing session over the word list services

The editor keeps a local copy of the list index and of the active list's
words. Each mutation is applied locally first, then sent to the services
once. On failure the local copy is restored from a snapshot; on success the
tentative entry is replaced with what the database assigned (id, slug,
timestamps).

Outcome statuses:
- "ok"        the change is stored
- "invalid"   input rejected before anything changed
- "conflict"  duplicate slug or duplicate word in the list
- "error"     anything else; the local copy was rolled back
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from pydantic import ValidationError
from sqlalchemy.orm import Session

from ..schemas import WordCreate, WordListCreate, WordListOut, WordListRename, WordOut, WordUpdate
from . import word_list_service, word_service
from .errors import ConflictError

logger = logging.getLogger(__name__)

INDEX_LIMIT = 50

OK = "ok"
INVALID = "invalid"
CONFLICT = "conflict"
ERROR = "error"


@dataclass
class Outcome:
    status: str
    message: str
    value: Any = None

    @property
    def ok(self) -> bool:
        return self.status == OK


@dataclass
class LocalList:
    id: str
    name: str
    slug: str
    theme: Optional[str] = None
    order: int = 0
    pending: bool = False


@dataclass
class LocalWord:
    id: str
    text: str
    weight: int
    pending: bool = False


def _temp_id() -> str:
    return f"tmp-{uuid.uuid4().hex}"


class Editor:
    """Optimistic local state for the list index and the active list's words."""

    def __init__(self, session: Session, notify: Optional[Callable[[Outcome], None]] = None):
        self.session = session
        self.notify = notify
        self.lists: List[LocalList] = []
        self.words: List[LocalWord] = []
        self.active_list_id: Optional[str] = None
        self.refresh()

    # -------- Sync --------
    def refresh(self) -> None:
        """Reload the list index and the active list's words from the database."""
        items, _ = word_list_service.list_lists(self.session, limit=INDEX_LIMIT)
        self.lists = [
            LocalList(id=wl.id, name=wl.name, slug=wl.slug, theme=wl.theme, order=wl.order)
            for wl in items
        ]
        ids = [wl.id for wl in self.lists]
        if self.active_list_id not in ids:
            self.active_list_id = ids[0] if ids else None
        self._load_words()

    def select_list(self, list_id: str) -> None:
        self.active_list_id = list_id
        self._load_words()

    def _load_words(self) -> None:
        if self.active_list_id is None:
            self.words = []
            return
        self.words = [
            LocalWord(id=w.id, text=w.text, weight=w.weight)
            for w in word_service.list_by_list_id(self.session, self.active_list_id)
        ]

    # -------- Lists --------
    def create_list(self, name: str, theme: Optional[str] = None, order: Optional[int] = None) -> Outcome:
        try:
            payload = WordListCreate(name=name, theme=theme, order=order)
        except ValidationError:
            return self._report(Outcome(INVALID, "Enter a list name"))

        snapshot = list(self.lists)
        tentative = LocalList(id=_temp_id(), name=payload.name, slug="", theme=payload.theme,
                              order=payload.order or 0, pending=True)
        self.lists = [tentative] + self.lists

        def remote():
            created = word_list_service.create_list(
                self.session, payload.name, theme=payload.theme, order=payload.order
            )
            self.lists = [
                LocalList(id=created.id, name=created.name, slug=created.slug,
                          theme=created.theme, order=created.order)
                if item is tentative else item
                for item in self.lists
            ]
            return WordListOut.model_validate(created)

        return self._attempt(remote, lambda: self._restore_lists(snapshot),
                             "Created the list", "Could not create the list")

    def rename_list(self, list_id: str, name: str) -> Outcome:
        try:
            payload = WordListRename(name=name)
        except ValidationError:
            return self._report(Outcome(INVALID, "Enter a new list name"))

        snapshot = list(self.lists)
        self.lists = [
            LocalList(id=item.id, name=payload.name, slug=item.slug, theme=item.theme,
                      order=item.order, pending=True)
            if item.id == list_id else item
            for item in self.lists
        ]

        def remote():
            renamed = word_list_service.rename_list(self.session, list_id, payload.name)
            self._settle_list(list_id)
            return WordListOut.model_validate(renamed)

        return self._attempt(remote, lambda: self._restore_lists(snapshot),
                             "Renamed the list", "Could not rename the list")

    def delete_list(self, list_id: str) -> Outcome:
        snapshot = list(self.lists)
        self.lists = [item for item in self.lists if item.id != list_id]

        def remote():
            word_list_service.delete_list(self.session, list_id)
            if self.active_list_id == list_id:
                self.active_list_id = self.lists[0].id if self.lists else None
                self._load_words()

        return self._attempt(remote, lambda: self._restore_lists(snapshot),
                             "Deleted the list", "Could not delete the list")

    # -------- Words --------
    def add_word(self, text: str, weight: Any = 1) -> Outcome:
        if self.active_list_id is None:
            return self._report(Outcome(INVALID, "There is no active list"))
        try:
            payload = WordCreate(list_id=self.active_list_id, text=text, weight=weight)
        except ValidationError:
            return self._report(Outcome(INVALID, "Enter a word and a weight between 1 and 999"))

        snapshot = list(self.words)
        tentative = LocalWord(id=_temp_id(), text=payload.text, weight=payload.weight, pending=True)
        self.words = self.words + [tentative]

        def remote():
            created = word_service.create_word(self.session, payload.list_id, payload.text, payload.weight)
            self.words = [
                LocalWord(id=created.id, text=created.text, weight=created.weight)
                if item is tentative else item
                for item in self.words
            ]
            return WordOut.model_validate(created)

        return self._attempt(remote, lambda: self._restore_words(snapshot),
                             "Added the word", "Could not add the word")

    def update_word(self, word_id: str, text: str, weight: Any) -> Outcome:
        try:
            payload = WordUpdate(text=text, weight=weight)
        except ValidationError:
            return self._report(Outcome(INVALID, "Enter a word and a weight between 1 and 999"))

        snapshot = list(self.words)
        self.words = [
            LocalWord(id=item.id, text=payload.text, weight=payload.weight, pending=True)
            if item.id == word_id else item
            for item in self.words
        ]

        def remote():
            updated = word_service.update_word(self.session, word_id, payload.text, payload.weight)
            self.words = [
                LocalWord(id=updated.id, text=updated.text, weight=updated.weight)
                if item.id == word_id else item
                for item in self.words
            ]
            return WordOut.model_validate(updated)

        return self._attempt(remote, lambda: self._restore_words(snapshot),
                             "Updated the word", "Could not update the word")

    def delete_word(self, word_id: str) -> Outcome:
        snapshot = list(self.words)
        self.words = [item for item in self.words if item.id != word_id]

        def remote():
            word_service.delete_word(self.session, word_id)

        return self._attempt(remote, lambda: self._restore_words(snapshot),
                             "Deleted the word", "Could not delete the word")

    # -------- Helpers --------
    def _attempt(self, remote: Callable[[], Any], rollback: Callable[[], None],
                 success: str, failure: str) -> Outcome:
        try:
            value = remote()
        except ConflictError as exc:
            rollback()
            return self._report(Outcome(CONFLICT, str(exc)))
        except Exception:
            logger.exception(failure)
            self.session.rollback()
            rollback()
            return self._report(Outcome(ERROR, failure))
        return self._report(Outcome(OK, success, value))

    def _report(self, outcome: Outcome) -> Outcome:
        if self.notify is not None:
            self.notify(outcome)
        return outcome

    def _settle_list(self, list_id: str) -> None:
        for item in self.lists:
            if item.id == list_id:
                item.pending = False

    def _restore_lists(self, snapshot: List[LocalList]) -> None:
        self.lists = snapshot

    def _restore_words(self, snapshot: List[LocalWord]) -> None:
        self.words = snapshot
