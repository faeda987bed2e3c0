"""Conversion of the Alpha Vantage intraday JSON document into a Stock."""
import json
import re

from .models import INTERVAL, ParseError, Price, Record, Stock

META_KEY = 'Meta Data'
SERIES_KEY = f'Time Series ({INTERVAL})'

PRICE_FIELDS = (
    ('open', '1. open'),
    ('high', '2. high'),
    ('low', '3. low'),
    ('close', '4. close'),
    ('volume', '5. volume'),
)

# plain ASCII decimal with optional sign and exponent, or inf/infinity/nan
NUMBER_RE = re.compile(r'[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)', re.IGNORECASE)


def _get_str(obj, key: str) -> str:
    if not isinstance(obj, dict):
        raise ParseError(f'expected an object holding {key!r}')
    try:
        value = obj[key]
    except KeyError:
        raise ParseError(f'missing key {key!r}') from None
    if not isinstance(value, str):
        raise ParseError(f'{key!r} is not a string')
    return value


def _parse_price(values) -> Price:
    fields = {}
    for name, key in PRICE_FIELDS:
        text = _get_str(values, key)
        if not NUMBER_RE.fullmatch(text):
            raise ParseError(f'{key!r} is not a number: {text!r}')
        fields[name] = float(text)
    return Price(**fields)


def parse_response(response: str) -> Stock:
    """Parse an intraday response into a Stock.

    Records keep document order. Any missing key, wrong shape or malformed number
    raises ParseError; no partial Stock is ever returned.
    """
    try:
        val = json.loads(response)
    except (TypeError, ValueError, RecursionError) as exc:
        raise ParseError(f'invalid JSON: {exc}') from exc

    if not isinstance(val, dict):
        raise ParseError('response is not a JSON object')
    meta = val.get(META_KEY)
    result = Stock(
        time=_get_str(meta, '3. Last Refreshed'),
        interval=_get_str(meta, '4. Interval'),
        time_zone=_get_str(meta, '6. Time Zone'),
    )

    series = val.get(SERIES_KEY)
    if not isinstance(series, dict):
        raise ParseError(f'missing object {SERIES_KEY!r}')

    init = True
    for time, values in series.items():
        price = _parse_price(values)
        if init:
            result.highest = price.high
            result.lowest = price.low
            init = False
        if price.high > result.highest:
            result.highest = price.high
        if price.low < result.lowest:
            result.lowest = price.low
        result.records.append(Record(time=time, price=price))

    return result
