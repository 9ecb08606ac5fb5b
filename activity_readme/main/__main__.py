"""
Main module entry point.

Run the generator with: python -m activity_readme.main
"""

import sys

from .runner import main

if __name__ == "__main__":
    sys.exit(main())
