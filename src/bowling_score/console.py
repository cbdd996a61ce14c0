"""Text scoreboard and interactive prompt loop."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence, TextIO

from bowling_score.game import LAST_FRAME_INDEX, FrameScore, Game

HEADER = "|   1   |   2   |   3   |   4   |   5   |   6   |   7   |   8   |   9   |     10    |"
UNDERLINE = "|_______|_______|_______|_______|_______|_______|_______|_______|_______|___________|"

_ORDINALS = ("first", "second", "third")

# Erase the terminal and home the cursor before each redraw.
CLEAR_SCREEN = "\x1b[2J\x1b[H"


def render_scoreboard(scores: Sequence[FrameScore]) -> List[str]:
    """Return the four scoreboard lines for ``scores``."""

    symbols_row = "|"
    totals_row = "|"
    for index, score in enumerate(scores):
        last = index == LAST_FRAME_INDEX
        if score.symbols:
            for symbol in score.symbols:
                symbols_row += f"{symbol} |".rjust(4)
        else:
            symbols_row += "   |" * (3 if last else 2)
        total = "" if score.total is None else str(score.total)
        totals_row += total.ljust(11 if last else 7) + "|"
    return [HEADER, UNDERLINE, symbols_row, totals_row]


def invalid_input_message(max_pins: Optional[int]) -> str:
    top = 10 if max_pins is None else max_pins
    return f"Incorrect input, please enter a valid score (0-{top}, F, S(0-{min(top, 9)}))"


def _print_scoreboard(game: Game, out: TextIO) -> None:
    if out.isatty():
        out.write(CLEAR_SCREEN)
    for line in render_scoreboard(game.scoreboard()):
        out.write(line + "\n")


def play(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None, game: Optional[Game] = None) -> Game:
    """Play a game by reading one delivery per line from ``stdin``.

    Invalid entries are reported and asked for again. Raises ``EOFError`` if
    the input runs out before the tenth frame is finished.
    """

    stdin = stdin if stdin is not None else sys.stdin
    out = stdout if stdout is not None else sys.stdout
    game = game if game is not None else Game()

    while not game.is_over:
        index = game.current_frame_index
        _print_scoreboard(game, out)
        out.write(f"\n*Frame {index + 1}*\n")
        while not game.is_over and game.current_frame_index == index:
            ordinal = _ORDINALS[game.delivery_number - 1]
            out.write(f"Number of pins knocked down in {ordinal} delivery: ")
            out.flush()
            line = stdin.readline()
            if not line:
                raise EOFError(f"input ended during frame {index + 1}")
            max_pins = game.max_pins
            if not game.record(line.strip().upper()):
                out.write(invalid_input_message(max_pins) + "\n")

    _print_scoreboard(game, out)
    return game
