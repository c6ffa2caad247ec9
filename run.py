"""
Development Runner
==================
Starts the viewer straight from a source checkout.

Puts 'src' on sys.path so `meteoritestory` imports resolve without an
editable install, then hands the command line to `meteoritestory.main`.

Usage:
    $ python run.py [--data PATH] [--world PATH] [--log-level DEBUG] [--log-file PATH]
"""
import os
import sys

current_dir: str = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, os.path.join(current_dir, 'src'))

from meteoritestory.main import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
