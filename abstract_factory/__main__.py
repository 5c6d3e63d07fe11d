"""
Main entry point for running the package directly:

    python -m abstract_factory
"""

import sys

from .demo import main

if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nDemo cancelled by user.", file=sys.stderr)
        sys.exit(130)
