"""Leaderboard projection: ranking, podium split and house colours."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List

from .timing import parse_time

logger = logging.getLogger(__name__)

PODIUM_SIZE = 3
MEDALS = ('gold', 'silver', 'bronze')


@dataclass(frozen=True)
class HouseColor:
    bg: str
    text: str
    border: str


HOUSE_COLORS = {
    'Sheaffe': HouseColor('#A7A6A4', '#ffffff', '#888784'),
    'Garran': HouseColor('#5C396F', '#ffffff', '#482c57'),
    'Burgmann': HouseColor('#FCCC00', '#333333', '#d9af00'),
    'Garnsey': HouseColor('#3C9BD1', '#ffffff', '#2a80b0'),
    'Hay': HouseColor('#0D0802', '#ffffff', '#291e14'),
    'Blaxland': HouseColor('#E63C2D', '#ffffff', '#c3321f'),
    'Edwards': HouseColor('#882426', '#ffffff', '#6a1c1e'),
    'Middelton': HouseColor('#1DB678', '#ffffff', '#189a64'),
    'Eddison': HouseColor('#213B5E', '#ffffff', '#162945'),
    'Jones': HouseColor('#1A5630', '#ffffff', '#13401f'),
}
DEFAULT_HOUSE_COLOR = HouseColor('#6b7280', '#ffffff', '#4b5563')


def house_color(house: str) -> HouseColor:
    return HOUSE_COLORS.get(house, DEFAULT_HOUSE_COLOR)


def lighten(hex_color: str, weight: float = 0.2) -> str:
    """Mix a #rrggbb colour with white, keeping `weight` of the original."""
    raw = hex_color.lstrip('#')
    channels = [int(raw[i:i + 2], 16) for i in (0, 2, 4)]
    mixed = [round(c * weight + 255 * (1 - weight)) for c in channels]
    return '#' + ''.join(f"{c:02x}" for c in mixed)


def medal_for(rank: int):
    if 1 <= rank <= len(MEDALS):
        return MEDALS[rank - 1]
    return None


@dataclass(frozen=True)
class RankedResult:
    rank: int
    result: object

    @property
    def podium(self) -> bool:
        return self.rank <= PODIUM_SIZE

    @property
    def medal(self):
        return medal_for(self.rank)


@dataclass(frozen=True)
class Projection:
    ranked: List[RankedResult]

    @property
    def podium(self) -> List[RankedResult]:
        return self.ranked[:PODIUM_SIZE]

    @property
    def remaining(self) -> List[RankedResult]:
        return self.ranked[PODIUM_SIZE:]

    def __len__(self):
        return len(self.ranked)


def _sort_key(result):
    try:
        return parse_time(result.time).total_hundredths
    except ValueError:
        logger.warning("Unparseable time %r on result %s; ranking it last",
                       result.time, getattr(result, 'pk', None))
        return math.inf


def project(results: Iterable) -> Projection:
    """
    Rank results fastest first.

    Times are compared numerically. sorted() is stable, so equal times keep
    the order they were given in (insertion order for queryset input).
    """
    ordered = sorted(results, key=_sort_key)
    return Projection([RankedResult(i, r) for i, r in enumerate(ordered, start=1)])


def top_n(results: Iterable, n: int) -> List[RankedResult]:
    if n <= 0:
        return []
    return project(results).ranked[:n]
