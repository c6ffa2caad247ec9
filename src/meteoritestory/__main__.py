"""Run with: python -m meteoritestory"""
import sys

from meteoritestory.main import main

if __name__ == "__main__":
    sys.exit(main())
