"""Delivery recording, validation and scoreboard symbols for a single frame."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


PINS = 10

FOUL_TOKEN = "F"
SPLIT_PREFIX = "S"

STRIKE_SYMBOL = "X"
SPARE_SYMBOL = "/"
FOUL_SYMBOL = "F"
MISS_SYMBOL = "-"
BLANK_SYMBOL = " "

_PINS_TOKEN = re.compile(r"10|[0-9]")
_SPLIT_TOKEN = re.compile(SPLIT_PREFIX + r"([0-9])")


# --- Deliveries -------------------------------------------------------------


@dataclass(frozen=True)
class Delivery:
    pins: int
    is_foul: bool = False
    is_split: bool = False

    @property
    def is_strike(self) -> bool:
        return self.pins == PINS

    def symbol(self) -> str:
        """Return the scoreboard symbol for this delivery taken on its own."""

        if self.pins == PINS:
            return STRIKE_SYMBOL
        if self.pins == 0:
            return FOUL_SYMBOL if self.is_foul else MISS_SYMBOL
        if self.is_split:
            return f"{SPLIT_PREFIX}{self.pins}"
        return str(self.pins)


def parse_token(token: object) -> Optional[Delivery]:
    """Parse a delivery token, returning ``None`` when it is malformed.

    Accepted forms are ``"F"`` (foul, no pins), ``"0"`` to ``"10"`` and
    ``"S"`` followed by a single digit (a split). Tokens must already be
    trimmed and upper-cased.
    """

    if not isinstance(token, str):
        return None
    if token == FOUL_TOKEN:
        return Delivery(0, is_foul=True)
    if _PINS_TOKEN.fullmatch(token):
        return Delivery(int(token))
    match = _SPLIT_TOKEN.fullmatch(token)
    if match:
        return Delivery(int(match.group(1)), is_split=True)
    return None


# --- Position rules ---------------------------------------------------------

# Each rule receives the deliveries already in the frame and returns the most
# pins the next delivery may knock down.
_Rule = Callable[[Sequence[Delivery]], int]


def _fresh_rack(prior: Sequence[Delivery]) -> int:
    return PINS


def _remaining_after_first(prior: Sequence[Delivery]) -> int:
    return PINS - prior[0].pins


def _last_frame_second(prior: Sequence[Delivery]) -> int:
    if prior[0].is_strike:
        return PINS
    return PINS - prior[0].pins


def _last_frame_bonus(prior: Sequence[Delivery]) -> int:
    first, second = prior[0], prior[1]
    if not first.is_strike or second.is_strike:
        return PINS
    return PINS - second.pins


_RULES: Dict[Tuple[bool, int], _Rule] = {
    (False, 0): _fresh_rack,
    (False, 1): _remaining_after_first,
    (True, 0): _fresh_rack,
    (True, 1): _last_frame_second,
    (True, 2): _last_frame_bonus,
}


# --- Frame ------------------------------------------------------------------


class Frame:
    """One frame of a game: its deliveries, and once finalized, its display.

    The frame accepts deliveries until it is complete. ``finalize`` is then
    called once to compute the frame's own pin total and the symbols shown on
    the scoreboard; after that the frame is read-only.
    """

    def __init__(self, is_last_frame: bool = False) -> None:
        self._is_last_frame = bool(is_last_frame)
        self._deliveries: List[Delivery] = []
        self._pins_total: Optional[int] = None
        self._display_symbols: Tuple[str, ...] = ()

    def __repr__(self) -> str:
        kind = "last" if self._is_last_frame else "normal"
        return f"Frame({kind}, {[d.pins for d in self._deliveries]})"

    @property
    def is_last_frame(self) -> bool:
        return self._is_last_frame

    @property
    def deliveries(self) -> Tuple[Delivery, ...]:
        return tuple(self._deliveries)

    @property
    def is_strike(self) -> bool:
        return bool(self._deliveries) and self._deliveries[0].is_strike

    @property
    def is_spare(self) -> bool:
        if len(self._deliveries) < 2 or self.is_strike:
            return False
        return self._deliveries[0].pins + self._deliveries[1].pins == PINS

    @property
    def mark_achieved(self) -> bool:
        return self.is_strike or self.is_spare

    @property
    def is_complete(self) -> bool:
        count = len(self._deliveries)
        if not self._is_last_frame:
            return count == 2 or self.is_strike
        if count == 2:
            return not self.mark_achieved
        return count == 3

    @property
    def finalized(self) -> bool:
        return self._pins_total is not None

    @property
    def pins_total(self) -> Optional[int]:
        return self._pins_total

    @property
    def display_symbols(self) -> Tuple[str, ...]:
        return self._display_symbols

    @property
    def max_pins(self) -> Optional[int]:
        """Most pins the next delivery may take, or ``None`` once complete."""

        if self.is_complete or self.finalized:
            return None
        rule = _RULES[(self._is_last_frame, len(self._deliveries))]
        return rule(self._deliveries)

    def record_delivery(self, token: object) -> bool:
        """Validate ``token`` and append it as the next delivery.

        Returns ``False`` without touching the frame when the token is
        malformed, knocks down more pins than are standing, or the frame
        has no delivery left to take.
        """

        cap = self.max_pins
        if cap is None:
            logger.debug("Rejected %r: %r takes no more deliveries", token, self)
            return False
        delivery = parse_token(token)
        if delivery is None:
            logger.debug("Rejected %r: not a delivery token", token)
            return False
        if delivery.pins > cap:
            logger.debug("Rejected %r: only %d pins standing in %r", token, cap, self)
            return False
        self._deliveries.append(delivery)
        return True

    def finalize(self) -> None:
        if self.finalized:
            raise RuntimeError(f"{self!r} has already been finalized")
        if not self.is_complete:
            raise RuntimeError(f"{self!r} is not complete and cannot be finalized")
        self._pins_total = sum(d.pins for d in self._deliveries)
        self._display_symbols = tuple(self._symbols())

    def _symbols(self) -> List[str]:
        rolls = self._deliveries
        if not self._is_last_frame:
            if self.is_strike:
                return [BLANK_SYMBOL, STRIKE_SYMBOL]
            if self.is_spare:
                return [rolls[0].symbol(), SPARE_SYMBOL]
            return [rolls[0].symbol(), rolls[1].symbol()]

        if self.is_strike:
            second, third = rolls[1], rolls[2]
            if not second.is_strike and second.pins + third.pins == PINS:
                return [STRIKE_SYMBOL, second.symbol(), SPARE_SYMBOL]
            return [STRIKE_SYMBOL, second.symbol(), third.symbol()]
        if self.is_spare:
            return [rolls[0].symbol(), SPARE_SYMBOL, rolls[2].symbol()]
        return [rolls[0].symbol(), rolls[1].symbol(), BLANK_SYMBOL]
