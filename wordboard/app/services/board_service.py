"""
Board assembly: load a list's words and lay them out.

Falls back to the configured density and speed range, and to the latest
list when no list id is given. No list at all yields an empty board.
"""

import random
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from .. import config
from ..board.layout import BoardLayout, DisplayItem
from ..board.weights import SpeedRange
from . import word_list_service, word_service
from .errors import NotFoundError


def build_board(
    session: Session,
    list_id: Optional[str] = None,
    height: Optional[float] = None,
    density: Optional[float] = None,
    speed_min: Optional[float] = None,
    speed_max: Optional[float] = None,
    seed: Optional[int] = None,
) -> Tuple[Optional[str], int, List[DisplayItem]]:
    """Return (list_id, lane_count, items) for the requested list."""
    if list_id is None:
        try:
            list_id = word_list_service.get_latest(session).id
        except NotFoundError:
            list_id = None
    else:
        word_list_service.get_list(session, list_id)

    words = word_service.word_entries(session, list_id) if list_id else []
    default_min, default_max = config.speed_range()
    layout = BoardLayout(
        words,
        density=config.board_density() if density is None else density,
        speed_range=SpeedRange(
            default_min if speed_min is None else speed_min,
            default_max if speed_max is None else speed_max,
        ),
        rng=random.Random(seed),
        height=height,
    )
    return list_id, layout.lane_count, layout.items
