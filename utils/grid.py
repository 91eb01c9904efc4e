"""Weekly day x period grid shared by the conflict builder, serializer and validator."""

from dataclasses import dataclass
from typing import List, Tuple

from flask import current_app

WEEKDAYS = ('Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday')
DEFAULT_PERIODS_PER_DAY = 5

Cell = Tuple[str, int]


@dataclass(frozen=True)
class GridConfig:
    """The universe of selectable cells."""
    days: Tuple[str, ...] = WEEKDAYS
    periods_per_day: int = DEFAULT_PERIODS_PER_DAY

    def __post_init__(self):
        if isinstance(self.periods_per_day, bool) or not isinstance(self.periods_per_day, int):
            raise ValueError('periods_per_day must be an integer')
        if self.periods_per_day < 1:
            raise ValueError('periods_per_day must be at least 1')
        if len(set(self.days)) != len(self.days):
            raise ValueError('days must be unique')

    @classmethod
    def from_config(cls, config) -> 'GridConfig':
        return cls(
            days=tuple(config.get('WEEKDAYS', WEEKDAYS)),
            periods_per_day=int(config.get('PERIODS_PER_DAY', DEFAULT_PERIODS_PER_DAY))
        )

    @property
    def periods(self) -> List[int]:
        return list(range(1, self.periods_per_day + 1))

    def cells(self) -> List[Cell]:
        return [(day, period) for day in self.days for period in self.periods]

    def contains(self, day, period) -> bool:
        return day in self.days and isinstance(period, int) and 1 <= period <= self.periods_per_day

    def day_index(self, day: str) -> int:
        return self.days.index(day)

    def to_dict(self):
        return {
            'days': list(self.days),
            'periods_per_day': self.periods_per_day,
            'periods': self.periods
        }


def slot_key(day: str, period: int) -> str:
    """Render a cell as 'Monday-1'."""
    return f'{day}-{period}'


def get_grid_config() -> GridConfig:
    """Grid settings of the running application."""
    return GridConfig.from_config(current_app.config)
