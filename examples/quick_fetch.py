"""Example script: fetch intraday quotes for a ticker and export a candlestick PNG.

This script is for local use and needs a valid Alpha Vantage key:

    python examples/quick_fetch.py YOUR_KEY [SYMBOL]
"""
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from stolcker.fetcher import fetch_stock
from stolcker.plotter import plot_stock


def main():
    if len(sys.argv) < 2:
        print(f'Usage: {sys.argv[0]} ALPHA_VANTAGE_API_KEY [SYMBOL]')
        return
    symbol = sys.argv[2] if len(sys.argv) > 2 else 'AAPL'
    print('Fetching', symbol)
    stock = fetch_stock(symbol, sys.argv[1])
    print(f'{len(stock)} records, low {stock.lowest} high {stock.highest}, refreshed {stock.time} {stock.time_zone}')
    plot_stock(stock, title=symbol, savefile='example_plot.png')
    print('Saved example_plot.png')


if __name__ == '__main__':
    main()
