"""
Entry point for the eqcheck CLI.

Usage:
    python -m eqcheck check "1 + 1 = 2"
"""

from .cli import main

if __name__ == "__main__":
    main()
