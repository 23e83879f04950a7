"""
Main entry point for diffview when run as a module.
"""

import sys

from diffview.cli import main

if __name__ == '__main__':
    sys.exit(main())
