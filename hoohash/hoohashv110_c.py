"""
HoohashV110 — C-Binding Wrapper

This module provides Python bindings to a native build of HoohashV110
for mining loops. Falls back to pure Python if the C library is unavailable.

Usage:
    from hoohash.hoohashv110_c import hoohashv110, hoohashv110_hex

    digest = hoohashv110(header)        # 32 bytes
    hex_str = hoohashv110_hex(header)   # hex string

Requirements:
    Build libhoohash.so exporting
        void hoohashv110(const void *data, size_t len, uint8_t output[32])
    into build/, or point HOOHASH_LIBRARY at it.
"""

import os
import ctypes
from pathlib import Path

from .hoohashv110 import HASH_SIZE, HEADER_SIZE

_lib = None
_use_pure_python = False


def _search_paths():
    paths = []
    override = os.environ.get('HOOHASH_LIBRARY')
    if override:
        paths.append(Path(override))
    paths.extend([
        Path(__file__).parent.parent / 'build' / 'libhoohash.so',
        Path(__file__).parent.parent / 'build' / 'libhoohashv110.so',
        Path('/usr/local/lib/libhoohash.so'),
        Path('/usr/lib/libhoohash.so'),
    ])
    return paths


def _load_library():
    """Load the C shared library."""
    global _lib, _use_pure_python

    if _lib is not None:
        return _lib
    if _use_pure_python:
        return None

    for lib_path in _search_paths():
        if lib_path.exists():
            try:
                _lib = ctypes.CDLL(str(lib_path))
                _lib.hoohashv110.argtypes = [ctypes.c_char_p, ctypes.c_size_t, ctypes.c_char_p]
                _lib.hoohashv110.restype = None
                _use_pure_python = False
                return _lib
            except (OSError, AttributeError):
                _lib = None
                continue

    _use_pure_python = True
    return None


def hoohashv110(data, length=None) -> bytes:
    """
    Compute HoohashV110 of an 80-byte block header.

    Uses the C implementation when available.
    Falls back to pure Python if C library is unavailable.

    Args:
        data: Block header bytes (nVersion..nNonce)
        length: Number of bytes of data to hash, defaults to len(data)

    Returns:
        32 bytes (256-bit hash), all zero unless length is 80
    """
    lib = _load_library()

    if _use_pure_python:
        from .hoohashv110 import hoohashv110 as py_hoohashv110
        return py_hoohashv110(data, length)

    if length is None:
        length = len(data)
    if length != HEADER_SIZE or len(data) < length:
        return bytes(HASH_SIZE)

    output = ctypes.create_string_buffer(HASH_SIZE)
    lib.hoohashv110(bytes(data[:HEADER_SIZE]), HEADER_SIZE, output)
    return output.raw


def hoohashv110_hex(data, length=None) -> str:
    """
    Compute HoohashV110 and return as hexadecimal string.

    Args:
        data: Block header bytes

    Returns:
        64-character hexadecimal string
    """
    return hoohashv110(data, length).hex()


def is_using_c_library() -> bool:
    """Check if the C library is being used."""
    _load_library()
    return not _use_pure_python


if __name__ == '__main__':
    import sys

    print(f"Using C library: {is_using_c_library()}")

    if len(sys.argv) > 1:
        data = bytes.fromhex(sys.argv[1])
    else:
        data = bytes(HEADER_SIZE)

    print(f"Input: {data.hex()}")
    print(f"Hash:  {hoohashv110_hex(data)}")
