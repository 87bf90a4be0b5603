"""
Typed records for the three planner datasets.

Raw dataset rows are mappings of field name to string. The ``from_row``
constructors never raise: missing fields read as empty strings and
malformed numbers read as 0.
"""

from dataclasses import dataclass
from typing import Mapping, Optional

from config.planner_config import CENTS_PER_UNIT
from config.logging_config import get_logger

log = get_logger(__name__)


def parse_int(value: Optional[str], field: str = 'value') -> int:
    """Parse an integer field, returning 0 for blank or malformed input.

    Accepts a leading integer prefix the way a lenient parser would, so
    ``"12abc"`` reads as 12 and ``"7.5"`` as 7.
    """
    if value is None:
        return 0
    text = str(value).strip()
    if not text:
        return 0
    try:
        return int(text)
    except ValueError:
        pass

    sign = ''
    if text[0] in '+-':
        sign, text = text[0], text[1:]
    digits = ''
    for ch in text:
        if ch not in '0123456789':
            break
        digits += ch
    if not digits:
        log.debug(f"Unparseable {field} {value!r}, using 0")
        return 0
    return int(sign + digits)


def parse_flag(value: Optional[str]) -> bool:
    """Offer flags are the literal strings "0" and "1"."""
    return str(value).strip() == '1'


@dataclass(frozen=True)
class Game:
    id: int
    team_home: str
    team_away: str

    @classmethod
    def from_row(cls, row: Mapping[str, str]) -> 'Game':
        return cls(
            id=parse_int(row.get('id'), 'game id'),
            team_home=row.get('team_home') or '',
            team_away=row.get('team_away') or '',
        )


@dataclass(frozen=True)
class Package:
    """A streaming package with prices in major currency units."""
    id: int
    name: str
    monthly_price: float         # month-to-month subscription, per month
    yearly_price: float          # yearly subscription, per month

    @classmethod
    def from_row(cls, row: Mapping[str, str]) -> 'Package':
        return cls(
            id=parse_int(row.get('id'), 'package id'),
            name=row.get('name') or '',
            monthly_price=parse_int(row.get('monthly_price_cents'), 'monthly price') / CENTS_PER_UNIT,
            yearly_price=parse_int(
                row.get('monthly_price_yearly_subscription_in_cents'), 'yearly price'
            ) / CENTS_PER_UNIT,
        )


@dataclass(frozen=True)
class Offer:
    game_id: int
    package_id: int
    live: bool
    highlights: bool

    @property
    def covers(self) -> bool:
        """An offer only counts when it is live or on demand."""
        return self.live or self.highlights

    @classmethod
    def from_row(cls, row: Mapping[str, str]) -> 'Offer':
        return cls(
            game_id=parse_int(row.get('game_id'), 'offer game id'),
            package_id=parse_int(row.get('streaming_package_id'), 'offer package id'),
            live=parse_flag(row.get('live')),
            highlights=parse_flag(row.get('highlights')),
        )
