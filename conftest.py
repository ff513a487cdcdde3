"""Pytest configuration.

Puts the backend directory on the Python path so tests can import the
``app`` package without installing it.
"""

import sys
from pathlib import Path

backend_path = Path(__file__).parent / "backend"
sys.path.insert(0, str(backend_path))
