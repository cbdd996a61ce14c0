"""A single-player ten-frame game built from frames and the scorer."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from bowling_score.frame import Frame
from bowling_score.scoring import advance

logger = logging.getLogger(__name__)


FRAME_COUNT = 10
LAST_FRAME_INDEX = FRAME_COUNT - 1


@dataclass
class FrameScore:
    """What the scoreboard shows for one frame."""

    symbols: List[str] = field(default_factory=list)
    total: Optional[int] = None


class Game:
    def __init__(self) -> None:
        self.frames: Tuple[Frame, ...] = tuple(
            Frame(is_last_frame=index == LAST_FRAME_INDEX) for index in range(FRAME_COUNT)
        )
        self._frame_index = 0
        self._cursor = 0
        self._totals: Tuple[int, ...] = ()

    @property
    def is_over(self) -> bool:
        return self._frame_index >= FRAME_COUNT

    @property
    def current_frame_index(self) -> int:
        return min(self._frame_index, LAST_FRAME_INDEX)

    @property
    def current_frame(self) -> Frame:
        return self.frames[self.current_frame_index]

    @property
    def delivery_number(self) -> int:
        """1-based number of the next delivery within the current frame."""

        return len(self.current_frame.deliveries) + 1

    @property
    def max_pins(self) -> Optional[int]:
        if self.is_over:
            return None
        return self.current_frame.max_pins

    @property
    def totals(self) -> Tuple[Optional[int], ...]:
        missing = FRAME_COUNT - len(self._totals)
        return self._totals + (None,) * missing

    @property
    def final_score(self) -> Optional[int]:
        if not self.is_over:
            return None
        return self._totals[-1]

    def record(self, token: str) -> bool:
        """Record one delivery token, scoring any frames it completes."""

        if self.is_over:
            logger.debug("Rejected %r: the game is over", token)
            return False
        frame = self.current_frame
        if not frame.record_delivery(token):
            return False
        if frame.is_complete:
            frame.finalize()
            resolution = advance(self.frames, self._cursor, self._frame_index)
            self._cursor = resolution.cursor
            self._totals = resolution.totals
            self._frame_index += 1
            if self.is_over:
                logger.info("Game finished with %d", self._totals[-1])
        return True

    def scoreboard(self) -> List[FrameScore]:
        return [
            FrameScore(symbols=list(frame.display_symbols), total=total)
            for frame, total in zip(self.frames, self.totals)
        ]


def calculate_frame_totals(rolls: Sequence[Union[int, str]]) -> List[Optional[int]]:
    """Return cumulative frame totals for a flat sequence of deliveries.

    Each roll is a pin count or a delivery token (``"F"``, ``"S7"``...).
    Frames whose total depends on deliveries not yet thrown stay ``None``.
    """

    game = Game()
    for position, roll in enumerate(rolls):
        if not game.record(str(roll)):
            raise ValueError(f"roll {position} ({roll!r}) cannot be played in frame {game.current_frame_index + 1}")
    return list(game.totals)
