import logging
from dataclasses import dataclass
from typing import Callable

import requests

from .models import AppError, Stock

logger = logging.getLogger(__name__)

FetchFn = Callable[[str, str], Stock]


@dataclass
class AppState:
    """Everything the window shows, mutated in place by the button handlers.

    stock_name is the symbol currently shown (or being typed), stock_name_prev the
    one committed before the current edit began.
    """
    stock_name: str
    stock_name_prev: str
    stock: Stock
    api_key: str
    editing: bool = False
    valid: bool = True

    @classmethod
    def load(cls, symbol: str, api_key: str, fetch: FetchFn) -> 'AppState':
        """Build the startup state. Fetch and parse errors propagate to the caller."""
        stock = fetch(symbol, api_key)
        return cls(stock_name=symbol, stock_name_prev=symbol, stock=stock, api_key=api_key)

    def header_text(self) -> str:
        return f'{self.stock.time} {self.stock.time_zone} ({self.stock.interval})'

    def begin_edit(self):
        if self.stock_name_prev != self.stock_name:
            self.stock_name_prev = self.stock_name
        self.editing = True

    def cancel_edit(self):
        if self.stock_name != self.stock_name_prev:
            self.stock_name = self.stock_name_prev
        self.editing = False

    def commit_edit(self, fetch: FetchFn):
        """Apply the typed symbol, fetching it when it changed.

        An empty symbol restores the previous one. Failures are logged and only
        flip valid; the window then shows the error label.
        """
        self.stock_name = self.stock_name.strip()
        if not self.stock_name:
            self.stock_name = self.stock_name_prev
        elif self.stock_name != self.stock_name_prev:
            try:
                self.stock = fetch(self.stock_name, self.api_key)
                self.valid = True
            except (requests.RequestException, AppError) as exc:
                logger.error('Failed to load %s: %s', self.stock_name, exc)
                self.valid = False
        self.editing = False
