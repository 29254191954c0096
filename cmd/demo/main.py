"""
Stereotype demo client - entry point.
Run with: PYTHONPATH=. python cmd/demo/main.py [--wiring explicit|annotated]
"""

import sys

from internal.clients.demo_client import main

if __name__ == "__main__":
    sys.exit(main())
