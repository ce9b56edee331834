# src/devises/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (exchange-rate API)
- Persistence (local currency store)
- Formatting (output)
"""

__all__ = []
