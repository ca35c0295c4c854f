"""
HoohashV110 — Python Implementation

Two implementations available:
- hoohashv110.py     — Pure Python (BLAKE3 is the only dependency)
- hoohashv110_c.py   — C-binding wrapper (requires built library)

Usage:
    # Pure Python
    from hoohash.hoohashv110 import hoohashv110, hoohashv110_hex

    # C-binding (faster)
    from hoohash.hoohashv110_c import hoohashv110, hoohashv110_hex

    digest = hoohashv110(header)       # 32 bytes, header is 80 bytes
    hex_str = hoohashv110_hex(header)  # hex string
"""

from .hoohashv110 import HASH_SIZE, HEADER_SIZE, hoohashv110, hoohashv110_hex

__all__ = ['hoohashv110', 'hoohashv110_hex', 'HASH_SIZE', 'HEADER_SIZE']
__version__ = '1.1.0'
