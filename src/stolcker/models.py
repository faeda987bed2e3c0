from dataclasses import dataclass, field
from typing import List

INTERVAL = '15min'


class AppError(Exception):
    """Base class for errors raised by stolcker."""


class ArgsError(AppError):
    """Invalid command line arguments."""


class ParseError(AppError):
    """The quote response could not be turned into a Stock."""


@dataclass
class Price:
    open: float
    high: float
    low: float
    close: float
    volume: float


@dataclass
class Record:
    time: str
    price: Price


@dataclass
class Stock:
    """Intraday time series for one symbol.

    records keep the order the API returned them in (most recent first).
    highest/lowest span every record and stay 0.0 when there are none.
    """
    records: List[Record] = field(default_factory=list)
    highest: float = 0.0
    lowest: float = 0.0
    time: str = ''
    interval: str = ''
    time_zone: str = ''

    def __len__(self):
        return len(self.records)
