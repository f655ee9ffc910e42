"""
FastAPI application entrypoint for the wordboard app

What this file does:
- Creates the FastAPI app and configures templating (Jinja2)
- Configures logging from LOG_LEVEL and creates missing tables on startup
- Includes the API router (lists, words, board)
- Serves the home page (latest list) and a page per list slug, each with its dive board

Run with:
    uvicorn wordboard.app.main:app --reload
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from . import config
from .db import get_session, init_db
from .models import WordList
from .routers.api import api_router
from .services import board_service, word_list_service, word_service
from .services.errors import NotFoundError

logging.basicConfig(
    level=config.log_level(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Database ready")
    yield


# Create app
app = FastAPI(title="wordboard", version="0.1.0", lifespan=lifespan)

# Templates
TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")
templates = Jinja2Templates(directory=TEMPLATES_DIR)

# Static (board stylesheet and resize script)
STATIC_DIR = os.path.join(os.path.dirname(__file__), "static")
if not os.path.exists(STATIC_DIR):
    os.makedirs(STATIC_DIR, exist_ok=True)
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

# API routers
app.include_router(api_router, prefix="/api")


def _render_list(request: Request, session: Session, word_list: Optional[WordList]):
    words, items, lanes = [], [], 0
    if word_list is not None:
        words = word_service.list_by_list_id(session, word_list.id)
        _, lanes, items = board_service.build_board(session, list_id=word_list.id)
    return templates.TemplateResponse(
        request,
        "index.html",
        {"word_list": word_list, "words": words, "board_items": items, "lane_count": lanes},
    )


@app.get("/", response_class=HTMLResponse)
def home(request: Request, session: Session = Depends(get_session)):
    """
    Render the latest list with its words and dive board (empty state when there are no lists).
    """
    try:
        word_list = word_list_service.get_latest(session)
    except NotFoundError:
        word_list = None
    return _render_list(request, session, word_list)


@app.get("/lists/{slug}", response_class=HTMLResponse)
def list_page(slug: str, request: Request, session: Session = Depends(get_session)):
    word_list = word_list_service.get_by_slug(session, slug)
    if word_list is None:
        raise HTTPException(status_code=404, detail=f"Unknown list: {slug}")
    return _render_list(request, session, word_list)
