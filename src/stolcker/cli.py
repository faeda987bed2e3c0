"""Command line entry point: `stolcker ALPHA_VANTAGE_API_KEY`."""
import logging
import os
import sys

from .fetcher import fetch_stock
from .state import AppState

DEFAULT_SYMBOL = os.environ.get('STOLCKER_DEFAULT_SYMBOL', 'GOOGL')
LOG_LEVEL = os.environ.get('STOLCKER_LOG_LEVEL', 'WARNING')


def setup_logging(level: str = LOG_LEVEL):
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING),
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')


def main(argv=None) -> int:
    argv = sys.argv if argv is None else argv
    if len(argv) == 1:
        print(f'Usage: {argv[0]} ALPHA_VANTAGE_API_KEY')
        return 0
    api_key = argv[1]

    setup_logging()

    # startup fetch errors are not handled: no chart, no window
    state = AppState.load(DEFAULT_SYMBOL, api_key, fetch_stock)

    from . import gui
    gui.run_app(state)
    return 0


if __name__ == '__main__':
    sys.exit(main())
