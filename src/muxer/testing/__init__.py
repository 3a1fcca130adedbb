"""Test utilities for muxer applications.

    from muxer.testing import TestClient
"""

from muxer.testing.client import TestClient

__all__ = ["TestClient"]
