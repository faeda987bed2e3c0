from dataclasses import dataclass
from typing import List, Optional, Tuple

import pandas as pd

from .models import Stock

try:
    import mplfinance as mpf
except Exception:  # pragma: no cover - optional dependency
    mpf = None


UP_COLOR = '#11ee11'
DOWN_COLOR = '#ee1111'
WICK_COLOR = '#000000'

PADDING_Y = 10.0
BODY_HALF_WIDTH = 3.0
WICK_HALF_WIDTH = 1.0
MIN_BODY_HEIGHT = 1.0

Rect = Tuple[float, float, float, float]


@dataclass
class Candle:
    """Canvas coordinates for one record: slot centre, body and wick rectangles (x0, y0, x1, y1)."""
    x: float
    body: Rect
    wick: Rect
    color: str


def slot_center(index: int, count: int, width: float) -> float:
    """x centre of record index; index 0 (most recent) sits at the right edge."""
    gap = width / count
    return (count - (index + 1)) * gap + gap / 2.0


def price_to_y(price: float, lowest: float, highest: float, height: float, padding: float = PADDING_Y) -> float:
    """Map price linearly onto the canvas, highest at the top.

    A zero price range maps everything to the vertical centre.
    """
    inner = height - padding * 2.0
    span = highest - lowest
    if span == 0:
        return padding + inner / 2.0
    return padding + (1.0 - (price - lowest) / span) * inner


def candle_geometry(stock: Stock, width: float, height: float, padding: float = PADDING_Y) -> List[Candle]:
    """Compute the candlestick glyphs for every record of stock on a width x height canvas."""
    count = len(stock.records)
    candles = []
    for i, record in enumerate(stock.records):
        p = record.price
        x = slot_center(i, count, width)

        def y(value):
            return price_to_y(value, stock.lowest, stock.highest, height, padding)

        top, bottom = sorted((y(p.open), y(p.close)))
        if bottom - top < MIN_BODY_HEIGHT:
            mid = (top + bottom) / 2.0
            top, bottom = mid - MIN_BODY_HEIGHT / 2.0, mid + MIN_BODY_HEIGHT / 2.0
        color = UP_COLOR if p.close >= p.open else DOWN_COLOR

        candles.append(Candle(
            x=x,
            body=(x - BODY_HALF_WIDTH, top, x + BODY_HALF_WIDTH, bottom),
            wick=(x - WICK_HALF_WIDTH, y(p.high), x + WICK_HALF_WIDTH, y(p.low)),
            color=color,
        ))
    return candles


def stock_to_dataframe(stock: Stock) -> pd.DataFrame:
    """Convert a Stock into an OHLCV DataFrame indexed by timestamp, oldest first."""
    rows = [{
        'Date': r.time,
        'Open': r.price.open,
        'High': r.price.high,
        'Low': r.price.low,
        'Close': r.price.close,
        'Volume': r.price.volume,
    } for r in stock.records]
    df = pd.DataFrame(rows, columns=['Date', 'Open', 'High', 'Low', 'Close', 'Volume'])
    df['Date'] = pd.to_datetime(df['Date'])
    return df.set_index('Date').sort_index()


def plot_stock(stock: Stock, title: Optional[str] = None, savefile: Optional[str] = None):
    """Render stock as a candlestick chart with mplfinance, optionally saving it to savefile."""
    if mpf is None:
        raise RuntimeError('mplfinance is required for chart export. Install with pip install mplfinance')

    df = stock_to_dataframe(stock)
    if df.empty:
        raise ValueError('No records available for plotting')

    kwargs = {}
    if title:
        kwargs['title'] = title
    if savefile:
        kwargs['savefig'] = savefile
    mpf.plot(df, type='candle', style='yahoo', volume=True, **kwargs)
