"""
Lane layout for the dive board

Turns a flat list of WordEntry into shuffled, positioned DisplayItems:
each word is replicated by its weight, the copies are shuffled, and every
copy gets a lane, a small vertical jitter, a font size, a duration and a
negative delay so it is already mid-flight when the board appears.

BoardLayout owns one board: it recomputes only when its inputs change and
coalesces resize notifications to at most one recompute per animation frame.
"""

import math
import random
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence

from .weights import (
    DEFAULT_SPEED_RANGE,
    SpeedRange,
    coerce_density,
    duration,
    font_size,
    frequency,
)

LANE_HEIGHT_PX = 120
LANE_SPACING_PX = 28
JITTER_PX = 5
MIN_LANES = 3
MAX_LANES = 14
DEFAULT_LANES = 8


@dataclass(frozen=True)
class WordEntry:
    id: str
    text: str
    weight: int


@dataclass(frozen=True)
class DisplayItem:
    key: str
    text: str
    lane: int
    vertical_offset_px: int
    font_size_rem: float
    duration_sec: float
    delay_sec: float


def lane_count(height: Optional[float]) -> int:
    """Number of lanes that fit in `height` pixels, 3..14; 8 when the height is unknown."""
    if height is None:
        return DEFAULT_LANES
    try:
        height = float(height)
    except (TypeError, ValueError):
        return DEFAULT_LANES
    if math.isnan(height) or height <= 0:
        return DEFAULT_LANES
    if math.isinf(height):
        return MAX_LANES
    return max(MIN_LANES, min(MAX_LANES, math.floor(height / LANE_HEIGHT_PX)))


def expand(words: Iterable[WordEntry], density: float = 1.0) -> List[WordEntry]:
    """Replicate every entry frequency(weight, density) times, keeping input order."""
    expanded: List[WordEntry] = []
    for word in words:
        expanded.extend([word] * frequency(word.weight, density))
    return expanded


def build_layout(
    words: Sequence[WordEntry],
    lanes: int = DEFAULT_LANES,
    density: float = 1.0,
    speed_range: SpeedRange = DEFAULT_SPEED_RANGE,
    rng: Optional[random.Random] = None,
) -> List[DisplayItem]:
    """Expand, shuffle and position `words` across `lanes` lanes."""
    rng = rng or random.Random()
    lanes = max(1, int(lanes))
    shuffled = expand(words, density)
    rng.shuffle(shuffled)

    items: List[DisplayItem] = []
    for i, word in enumerate(shuffled):
        dur = duration(word.weight, speed_range)
        lane = rng.randrange(lanes)
        jitter = rng.randint(-JITTER_PX, JITTER_PX)
        items.append(DisplayItem(
            key=f"{word.id}-{i}-{rng.getrandbits(32):08x}",
            text=word.text,
            lane=lane,
            vertical_offset_px=lane * LANE_SPACING_PX + jitter,
            font_size_rem=font_size(word.weight),
            duration_sec=dur,
            delay_sec=-rng.random() * dur,
        ))
    return items


Listener = Callable[[List[DisplayItem]], None]


class BoardLayout:
    """Recompute-on-change owner of one board's DisplayItems."""

    def __init__(
        self,
        words: Sequence[WordEntry] = (),
        density: float = 1.0,
        speed_range: SpeedRange = DEFAULT_SPEED_RANGE,
        rng: Optional[random.Random] = None,
        height: Optional[float] = None,
    ):
        self._words = tuple(words)
        self._density = coerce_density(density)
        self._speed_range = SpeedRange(*speed_range)
        self._rng = rng or random.Random()
        self._lanes = lane_count(height)
        self._pending_height: Optional[float] = None
        self._has_pending = False
        self._listeners: List[Listener] = []
        self.recompute_count = 0
        self.items: List[DisplayItem] = []
        self._recompute()

    @property
    def lane_count(self) -> int:
        return self._lanes

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def update(
        self,
        words: Optional[Sequence[WordEntry]] = None,
        density: Optional[float] = None,
        speed_range: Optional[SpeedRange] = None,
    ) -> bool:
        """Swap in new inputs; recompute only if something actually changed."""
        changed = False
        if words is not None and tuple(words) != self._words:
            self._words = tuple(words)
            changed = True
        if density is not None and coerce_density(density) != self._density:
            self._density = coerce_density(density)
            changed = True
        if speed_range is not None and SpeedRange(*speed_range) != self._speed_range:
            self._speed_range = SpeedRange(*speed_range)
            changed = True
        if changed:
            self._recompute()
        return changed

    def observe_height(self, height: Optional[float]) -> None:
        """Record a resize; applied on the next animation frame."""
        self._pending_height = height
        self._has_pending = True

    def on_animation_frame(self) -> bool:
        """Apply the latest pending height; recompute if the lane count moved."""
        if not self._has_pending:
            return False
        self._has_pending = False
        lanes = lane_count(self._pending_height)
        if lanes == self._lanes:
            return False
        self._lanes = lanes
        self._recompute()
        return True

    def _recompute(self) -> None:
        self.items = build_layout(
            self._words, self._lanes, self._density, self._speed_range, self._rng
        )
        self.recompute_count += 1
        for listener in self._listeners:
            listener(self.items)
