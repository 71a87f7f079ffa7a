# src/curconv/__main__.py
"""Module entry point: python -m curconv"""

from curconv.app import main

main()
