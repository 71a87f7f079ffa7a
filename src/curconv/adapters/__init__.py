# src/curconv/adapters/__init__.py
"""
Adapters Layer - External System Integrations

This package contains adapters for:
- The exchangerate-api.com HTTP service (providers)
- API key persistence (persistence)
- Terminal output (formatting)
- Terminal input (cli)
"""
