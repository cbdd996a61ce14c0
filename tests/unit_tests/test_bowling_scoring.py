from typing import List, Optional, Sequence, Union

import pytest

from bowling_score.frame import Frame
from bowling_score.game import calculate_frame_totals
from bowling_score.scoring import Resolution, advance, frame_score

MIXED_GAME = ["10", "10", "10", "7", "2", "S8", "2", "F", "9", "10", "7", "3", "9", "0", "10", "10", "8"]


def _played_frames(*frame_tokens: List[str]) -> List[Frame]:
    """Build ten frames, finalizing the ones given tokens."""

    frames = [Frame(is_last_frame=i == 9) for i in range(10)]
    for frame, tokens in zip(frames, frame_tokens):
        for token in tokens:
            assert frame.record_delivery(token)
        frame.finalize()
    return frames


@pytest.mark.parametrize(
    "rolls, expected",
    [
        ([10] * 12, [30, 60, 90, 120, 150, 180, 210, 240, 270, 300]),
        (
            [9, 1] * 9 + [9, 1, 9],
            [19, 38, 57, 76, 95, 114, 133, 152, 171, 190],
        ),
        (
            [0, 0] * 9 + [10, 10, 10],
            [0, 0, 0, 0, 0, 0, 0, 0, 0, 30],
        ),
        (
            [0, 0] * 8 + [7, 3] + [10, 10, 10],
            [0, 0, 0, 0, 0, 0, 0, 0, 20, 50],
        ),
        (
            [7, 3, 5, 4] + [0, 0] * 8,
            [15, 24, 24, 24, 24, 24, 24, 24, 24, 24],
        ),
        (
            [10, 7, 3, 7, 2] + [0, 0] * 7,
            [20, 37, 46, 46, 46, 46, 46, 46, 46, 46],
        ),
        (MIXED_GAME, [30, 57, 76, 85, 95, 104, 124, 143, 152, 180]),
        (["F", "F"] * 10, [0] * 10),
    ],
)
def test_calculate_frame_totals_complete_games(
    rolls: Sequence[Union[int, str]], expected: List[Optional[int]]
) -> None:
    assert calculate_frame_totals(rolls) == expected


def test_calculate_frame_totals_requires_future_rolls() -> None:
    totals = calculate_frame_totals([10, 3])
    assert totals[0] is None
    assert all(total is None for total in totals[1:])


def test_calculate_frame_totals_rejects_unplayable_roll() -> None:
    with pytest.raises(ValueError):
        calculate_frame_totals([7, 4])


def test_advance_perfect_game_in_one_call() -> None:
    frames = _played_frames(*([["10"]] * 9 + [["10", "10", "10"]]))

    resolution = advance(frames, 0, 9)

    assert resolution.cursor == 10
    assert list(resolution.totals) == [30 * (i + 1) for i in range(10)]


def test_advance_open_frame_resolves_immediately() -> None:
    frames = _played_frames(["3", "4"])

    assert advance(frames, 0, 0) == Resolution(cursor=1, totals=(7,))


def test_strike_waits_for_two_following_deliveries() -> None:
    frames = _played_frames(["10"], ["10"])

    first = advance(frames, 0, 1)
    assert first == Resolution(cursor=0, totals=())

    frames[2].record_delivery("4")
    frames[2].record_delivery("5")
    frames[2].finalize()
    second = advance(frames, first.cursor, 2)

    assert second.cursor == 3
    assert list(second.totals) == [24, 43, 52]


def test_spare_waits_for_next_frame() -> None:
    frames = _played_frames(["6", "4"])

    assert advance(frames, 0, 0).cursor == 0

    frames[1].record_delivery("S7")
    frames[1].record_delivery("1")
    frames[1].finalize()

    assert advance(frames, 0, 1) == Resolution(cursor=2, totals=(17, 25))


def test_strike_into_last_frame_uses_its_first_two_deliveries() -> None:
    frames = _played_frames(*([["0", "0"]] * 8 + [["10"], ["10", "3", "7"]]))

    resolution = advance(frames, 0, 9)

    assert list(resolution.totals[-2:]) == [23, 43]


def test_advance_is_idempotent() -> None:
    frames = _played_frames(["10"], ["3", "4"], ["5", "5"])

    once = advance(frames, 0, 2)
    again = advance(frames, once.cursor, 2)

    assert once == again == Resolution(cursor=2, totals=(17, 24))


def test_advance_never_lowers_resolved_totals() -> None:
    frames = [Frame(is_last_frame=i == 9) for i in range(10)]
    tokens = iter(MIXED_GAME)
    cursor = 0
    known: List[int] = []
    for index, frame in enumerate(frames):
        while not frame.is_complete:
            assert frame.record_delivery(next(tokens))
        frame.finalize()
        resolution = advance(frames, cursor, index)
        assert resolution.cursor >= cursor
        assert list(resolution.totals[: len(known)]) == known
        assert list(resolution.totals) == sorted(resolution.totals)
        cursor, known = resolution.cursor, list(resolution.totals)
    assert known == [30, 57, 76, 85, 95, 104, 124, 143, 152, 180]


def test_frame_score_unplayed_is_none() -> None:
    frames = _played_frames(["10"])
    assert frame_score(frames, 0) is None
    assert frame_score(frames, 1) is None


@pytest.mark.parametrize(
    "cursor, last_played",
    [
        (-1, 0),
        (0, 10),
        (0, -1),
        (0, 2),
        (1, 1),
    ],
)
def test_advance_rejects_bad_preconditions(cursor: int, last_played: int) -> None:
    frames = _played_frames(["10"], ["10"])
    with pytest.raises(ValueError):
        advance(frames, cursor, last_played)
