"""
Entry point for running textops as a module.

Usage: python -m textops split "a,b,c" -d ,
"""

import sys

from textops.cli import main

if __name__ == "__main__":
    sys.exit(main())
