# src/curconv/__init__.py
"""
curconv - Interactive Currency Converter

A command-line client for the exchangerate-api.com v6 service. It lists
exchange rates, looks up currency pairs, converts amounts, and keeps the
API key in a small JSON file under the platform config directory.
"""

__version__ = "0.1.0"
