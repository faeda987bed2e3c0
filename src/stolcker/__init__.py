"""stolcker package: intraday stock quotes rendered as a candlestick chart in a small Tkinter window.

This package provides:
- fetcher: download intraday quotes from the Alpha Vantage query endpoint
- parser: turn the JSON response into a Stock time series
- plotter: candlestick geometry for the canvas and PNG export via mplfinance
- state: the symbol editor state mutated by the UI buttons
- gui: the Tkinter application window
- cli: command line entry point
"""

__version__ = "0.1.0"
