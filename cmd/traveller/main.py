"""
Traveller client - entry point.
Run with: PYTHONPATH=. python cmd/traveller/main.py [--wiring explicit|annotated]
"""

import sys

from internal.clients.traveller_client import main

if __name__ == "__main__":
    sys.exit(main())
