"""Deferred score resolution for ten-pin bowling."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from bowling_score.frame import Frame

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    """Where resolution stopped and the cumulative totals known so far.

    ``totals`` holds one running total per resolved frame, so its length
    always equals ``cursor``.
    """

    cursor: int
    totals: Tuple[int, ...]


def _played(frames: Sequence[Frame], index: int) -> Optional[Frame]:
    if index >= len(frames):
        return None
    frame = frames[index]
    return frame if frame.finalized else None


def frame_score(frames: Sequence[Frame], index: int) -> Optional[int]:
    """Return the score of ``frames[index]`` including any mark bonus.

    ``None`` means the frame, or a later frame its bonus depends on, has not
    been played yet.
    """

    frame = _played(frames, index)
    if frame is None:
        return None
    own = frame.pins_total
    if not frame.mark_achieved or frame.is_last_frame:
        return own

    following = _played(frames, index + 1)
    if following is None:
        return None
    rolls = following.deliveries
    if frame.is_spare:
        return own + rolls[0].pins
    if len(rolls) >= 2:
        return own + rolls[0].pins + rolls[1].pins

    # A lone strike in the next frame: the second bonus ball comes from the
    # frame after it.
    after = _played(frames, index + 2)
    if after is None:
        return None
    return own + following.pins_total + after.deliveries[0].pins


def advance(frames: Sequence[Frame], cursor: int, last_played: int) -> Resolution:
    """Resolve cumulative totals from ``cursor`` up to ``last_played``.

    ``cursor`` is the first frame whose total is not yet known. Resolution
    stops early, without error, at the first frame still waiting on later
    deliveries. Calling again with the returned cursor once more frames are
    played picks up where this call stopped.
    """

    if cursor < 0:
        raise ValueError(f"cursor must not be negative, got {cursor}")
    if not 0 <= last_played < len(frames):
        raise ValueError(f"last_played {last_played} is outside the {len(frames)} frames")
    for index in range(last_played + 1):
        if not frames[index].finalized:
            raise ValueError(f"frame {index} has not been finalized")

    totals: List[int] = []
    running = 0
    for index in range(cursor):
        score = frame_score(frames, index)
        if score is None:
            raise ValueError(f"cursor {cursor} is past unresolved frame {index}")
        running += score
        totals.append(running)

    while cursor <= last_played:
        score = frame_score(frames, cursor)
        if score is None:
            logger.debug("Frame %d waits for later deliveries", cursor)
            break
        running += score
        totals.append(running)
        logger.debug("Frame %d resolved at %d", cursor, running)
        cursor += 1

    return Resolution(cursor=cursor, totals=tuple(totals))
