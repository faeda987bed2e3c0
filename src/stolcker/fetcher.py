import logging
import os
from typing import Dict

import requests

from .models import INTERVAL, Stock
from .parser import parse_response

logger = logging.getLogger(__name__)

# Query endpoint, overridable for local mirrors: STOLCKER_API_URL="http://localhost:8001/query"
API_URL = os.environ.get('STOLCKER_API_URL', 'https://www.alphavantage.co/query')

FUNCTION = 'TIME_SERIES_INTRADAY'

# free tier allowance; not enforced
MAX_REQUEST_PER_DAY = 500


def build_params(symbol: str, api_key: str) -> Dict[str, str]:
    """Return the query parameters for an intraday request."""
    return {
        'function': FUNCTION,
        'symbol': symbol,
        'interval': INTERVAL,
        'apikey': api_key,
    }


def get_data(symbol: str, api_key: str) -> str:
    """Download the raw intraday JSON for symbol.

    Blocks until the server answers. Connection problems and HTTP error statuses
    raise requests.RequestException.
    """
    logger.info('Fetching %s (%s)', symbol, INTERVAL)
    response = requests.get(API_URL, params=build_params(symbol, api_key))
    response.raise_for_status()
    return response.text


def fetch_stock(symbol: str, api_key: str) -> Stock:
    return parse_response(get_data(symbol, api_key))
