import pytest

from stolcker.models import Price, Record, Stock
from stolcker.plotter import (
    DOWN_COLOR, MIN_BODY_HEIGHT, PADDING_Y, UP_COLOR,
    candle_geometry, price_to_y, slot_center, stock_to_dataframe,
)


def make_stock(prices):
    """prices: list of (open, high, low, close), most recent first."""
    records = []
    for i, (o, h, l, c) in enumerate(prices):
        records.append(Record(time=f'2023-03-24 {20 - i:02d}:00:00', price=Price(o, h, l, c, 1000.0)))
    return Stock(
        records=records,
        highest=max(p[1] for p in prices) if prices else 0.0,
        lowest=min(p[2] for p in prices) if prices else 0.0,
        time='2023-03-24 20:00:00', interval='15min', time_zone='US/Eastern',
    )


def test_slot_center_positions():
    # four slots of 100px, index 0 is the rightmost
    assert [slot_center(i, 4, 400) for i in range(4)] == [350.0, 250.0, 150.0, 50.0]


def test_slot_center_independent_of_prices():
    a = candle_geometry(make_stock([(10, 12, 9, 11), (11, 13, 10, 10)]), 200, 100)
    b = candle_geometry(make_stock([(500, 600, 400, 450), (1, 2, 0.5, 1.5)]), 200, 100)
    assert [c.x for c in a] == [c.x for c in b] == [150.0, 50.0]


def test_price_to_y_flips_vertically():
    assert price_to_y(110.0, 90.0, 110.0, 220.0) == PADDING_Y
    assert price_to_y(90.0, 90.0, 110.0, 220.0) == 220.0 - PADDING_Y
    assert price_to_y(100.0, 90.0, 110.0, 220.0) == 110.0


def test_price_to_y_zero_range():
    assert price_to_y(5.0, 5.0, 5.0, 120.0) == 60.0


def test_body_and_wick_spans():
    stock = make_stock([(100.0, 110.0, 90.0, 105.0)])
    (candle,) = candle_geometry(stock, 100, 220)
    assert candle.x == 50.0
    assert candle.color == UP_COLOR
    # open 100 -> y 110, close 105 -> y 60
    assert candle.body == (47.0, 60.0, 53.0, 110.0)
    assert candle.wick == (49.0, PADDING_Y, 51.0, 210.0)


def test_down_candle_is_red():
    stock = make_stock([(105.0, 110.0, 90.0, 100.0)])
    (candle,) = candle_geometry(stock, 100, 220)
    assert candle.color == DOWN_COLOR
    assert candle.body[1] < candle.body[3]


def test_small_up_candle_stays_green():
    stock = make_stock([(100.0, 110.0, 90.0, 100.01)])
    (candle,) = candle_geometry(stock, 100, 220)
    assert candle.color == UP_COLOR


def test_flat_candle_gets_minimum_body():
    stock = make_stock([(100.0, 110.0, 90.0, 100.0)])
    (candle,) = candle_geometry(stock, 100, 220)
    x0, y0, x1, y1 = candle.body
    assert y1 - y0 == pytest.approx(MIN_BODY_HEIGHT)
    assert (y0 + y1) / 2 == pytest.approx(110.0)
    assert candle.color == UP_COLOR


def test_empty_stock_has_no_candles():
    assert candle_geometry(Stock(), 300, 200) == []


def test_zero_range_does_not_divide_by_zero():
    stock = make_stock([(50.0, 50.0, 50.0, 50.0), (50.0, 50.0, 50.0, 50.0)])
    candles = candle_geometry(stock, 100, 100)
    assert len(candles) == 2
    for c in candles:
        assert c.wick[1] == c.wick[3] == 50.0


def test_stock_to_dataframe_sorted_ascending():
    stock = make_stock([(10, 12, 9, 11), (11, 13, 10, 10), (9, 11, 8, 10)])
    df = stock_to_dataframe(stock)
    assert list(df.columns) == ['Open', 'High', 'Low', 'Close', 'Volume']
    assert len(df) == 3
    assert df.index.is_monotonic_increasing
    # oldest record (last in the stock) comes first
    assert df['Open'].iloc[0] == 9


def test_plot_stock_saves_png(tmp_path):
    matplotlib = pytest.importorskip('matplotlib')
    matplotlib.use('Agg')
    pytest.importorskip('mplfinance')
    from stolcker.plotter import plot_stock

    out = tmp_path / 'chart.png'
    plot_stock(make_stock([(10, 12, 9, 11), (11, 13, 10, 10), (9, 11, 8, 10)]), title='TEST', savefile=str(out))
    assert out.exists()
    assert out.stat().st_size > 0


def test_plot_stock_empty_raises(tmp_path):
    pytest.importorskip('mplfinance')
    from stolcker.plotter import plot_stock

    with pytest.raises(ValueError):
        plot_stock(Stock(), savefile=str(tmp_path / 'x.png'))
