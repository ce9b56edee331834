# src/devises/__init__.py
"""
Devises - Currency Conversion Data Layer

Exposes the reference currency list and live exchange rates to a
presentation layer, backed by a local SQLite store (seeded once from a
bundled dataset) and a remote exchange-rate API.
"""

__version__ = "1.0.0"
