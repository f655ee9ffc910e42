"""
API router for word lists, words and the dive board

Provides endpoints for:
- GET/POST /api/lists, GET /api/lists/latest, GET /api/lists/by-slug/{slug}[/full]
- PATCH/DELETE /api/lists/{list_id}, GET /api/lists/{list_id}/words
- POST /api/words, PUT/DELETE /api/words/{word_id}
- GET /api/board?list_id=...&height=...

Service errors map to 404 (missing) and 409 (duplicate slug or word).
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from .. import config
from ..board.weights import MAX_DENSITY
from ..db import get_session
from ..schemas import (
    BoardOut,
    DisplayItemOut,
    Ok,
    WordCreate,
    WordItems,
    WordListCreate,
    WordListOut,
    WordListPage,
    WordListRename,
    WordListWithWords,
    WordOut,
    WordUpdate,
)
from ..services import board_service, word_list_service, word_service
from ..services.errors import ConflictError, NotFoundError

api_router = APIRouter()


# -------- Word lists --------
@api_router.get("/lists", response_model=WordListPage)
def get_lists(
    limit: Optional[int] = Query(None, ge=1, le=100),
    cursor: Optional[str] = Query(None, description="Id of the first list of the page"),
    search: Optional[str] = Query(None, description="Optional substring filter on name or slug"),
    session: Session = Depends(get_session),
):
    try:
        items, next_cursor = word_list_service.list_lists(
            session, limit=limit or config.page_limit(), cursor=cursor, search=search
        )
    except NotFoundError as exc:
        raise HTTPException(status_code=400, detail=f"Unknown cursor: {cursor}") from exc
    return WordListPage(
        items=[WordListOut.model_validate(item) for item in items], next_cursor=next_cursor
    )


@api_router.post("/lists", response_model=WordListOut, status_code=201)
def create_list(payload: WordListCreate, session: Session = Depends(get_session)):
    try:
        return word_list_service.create_list(
            session, payload.name, slug=payload.slug, theme=payload.theme, order=payload.order
        )
    except ConflictError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc


@api_router.get("/lists/latest", response_model=WordListOut)
def get_latest_list(session: Session = Depends(get_session)):
    try:
        return word_list_service.get_latest(session)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@api_router.get("/lists/by-slug/{slug}", response_model=WordListOut)
def get_list_by_slug(slug: str, session: Session = Depends(get_session)):
    word_list = word_list_service.get_by_slug(session, slug)
    if word_list is None:
        raise HTTPException(status_code=404, detail=f"Unknown list: {slug}")
    return word_list


@api_router.get("/lists/by-slug/{slug}/full", response_model=WordListWithWords)
def get_list_with_words(slug: str, session: Session = Depends(get_session)):
    found = word_list_service.get_list_with_words_by_slug(session, slug)
    if found is None:
        raise HTTPException(status_code=404, detail=f"Unknown list: {slug}")
    word_list, words = found
    return WordListWithWords(
        **WordListOut.model_validate(word_list).model_dump(),
        words=[WordOut.model_validate(w) for w in words],
    )


@api_router.patch("/lists/{list_id}", response_model=WordListOut)
def rename_list(list_id: str, payload: WordListRename, session: Session = Depends(get_session)):
    try:
        return word_list_service.rename_list(session, list_id, payload.name)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@api_router.delete("/lists/{list_id}", response_model=Ok)
def delete_list(list_id: str, session: Session = Depends(get_session)):
    try:
        word_list_service.delete_list(session, list_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Ok()


@api_router.get("/lists/{list_id}/words", response_model=WordItems)
def get_words(list_id: str, session: Session = Depends(get_session)):
    try:
        word_list_service.get_list(session, list_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return WordItems(
        items=[WordOut.model_validate(w) for w in word_service.list_by_list_id(session, list_id)]
    )


# -------- Words --------
@api_router.post("/words", response_model=WordOut, status_code=201)
def create_word(payload: WordCreate, session: Session = Depends(get_session)):
    try:
        return word_service.create_word(session, payload.list_id, payload.text, payload.weight)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ConflictError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc


@api_router.put("/words/{word_id}", response_model=WordOut)
def update_word(word_id: str, payload: WordUpdate, session: Session = Depends(get_session)):
    try:
        return word_service.update_word(session, word_id, payload.text, payload.weight)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ConflictError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc


@api_router.delete("/words/{word_id}", response_model=Ok)
def delete_word(word_id: str, session: Session = Depends(get_session)):
    try:
        word_service.delete_word(session, word_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Ok()


# -------- Board --------
@api_router.get("/board", response_model=BoardOut)
def get_board(
    list_id: Optional[str] = Query(None, description="Defaults to the latest list"),
    height: Optional[float] = Query(None, description="Board height in px; drives the lane count"),
    density: Optional[float] = Query(None, ge=0, le=MAX_DENSITY),
    speed_min: Optional[float] = Query(None, gt=0),
    speed_max: Optional[float] = Query(None, gt=0),
    seed: Optional[int] = Query(None, description="Fix the random layout"),
    session: Session = Depends(get_session),
):
    try:
        resolved_id, lanes, items = board_service.build_board(
            session, list_id=list_id, height=height, density=density,
            speed_min=speed_min, speed_max=speed_max, seed=seed,
        )
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return BoardOut(
        list_id=resolved_id,
        lane_count=lanes,
        items=[DisplayItemOut.model_validate(item) for item in items],
    )
