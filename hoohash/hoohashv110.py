"""
HoohashV110 — Pure Python Reference Implementation

Proof-of-work hash over an 80-byte Bitcoin-style block header
(nVersion..nNonce). The only external dependency is BLAKE3, used as a
black-box 256-bit hash for both passes.
For native speed, use the C-binding version (hoohashv110_c.py).

Pipeline:
  P1: BLAKE3 over the header -> first pass digest
  P2: xoshiro-style PRNG seeded with the first pass -> 64x64 matrix
  P3: Nonlinear matrix/vector mixing with a history-dependent switch
  P4: Folding of the 64 accumulators into 32 bytes, XOR with first pass
  P5: BLAKE3 over the folded bytes -> final digest

Every float operation below is IEEE-754 double precision. Reordering any
expression changes the output.
"""

import math
import struct

import blake3

HASH_SIZE = 32
HEADER_SIZE = 80
NONCE_OFFSET = 76

MASK64 = 0xFFFFFFFFFFFFFFFF
UINT32_MAX = 0xFFFFFFFF

PI = 3.14159265358979323846
EPS = 1e-9
COMPLEX_TRANSFORM_MULTIPLIER = 0.000001
SAFE_TRANSFORM_FLOOR = 0.0000000000001

MATRIX_SIZE = 64
NORMALIZE = 1000000.0
GRANULARITY = 1024.0
SWITCH_THRESHOLD = 0.02
DIVIDER = 0.0001
MULTIPLIER = 1234.0

_U64_LE = struct.Struct('<Q')
_U32_LE = struct.Struct('<I')
_U32_BE = struct.Struct('>I')


def _read_u64_le(data, offset=0):
    return _U64_LE.unpack_from(data, offset)[0]


def _read_u32_le(data, offset=0):
    return _U32_LE.unpack_from(data, offset)[0]


def _read_u32_be(data, offset=0):
    return _U32_BE.unpack_from(data, offset)[0]


def _blake3(data) -> bytes:
    hasher = blake3.blake3()
    hasher.update(data)
    return hasher.digest(length=HASH_SIZE)


# ---------------------------------------------------------------------------
# PRNG
# ---------------------------------------------------------------------------

def _rotl64(x, r):
    return ((x << r) | (x >> (64 - r))) & MASK64


def _xoshiro_init(seed):
    """Four little-endian words from a 32-byte seed."""
    return [_read_u64_le(seed, i * 8) for i in range(4)]


def _xoshiro_gen(state):
    s0, s1, s2, s3 = state
    result = (_rotl64((s0 + s3) & MASK64, 23) + s0) & MASK64
    t = (s1 << 17) & MASK64

    s2 ^= s0
    s3 ^= s1
    s1 ^= s2
    s0 ^= s3

    s2 ^= t
    s3 = _rotl64(s3, 45)

    state[0] = s0
    state[1] = s1
    state[2] = s2
    state[3] = s3
    return result


# ---------------------------------------------------------------------------
# Nonlinear transform bank
# ---------------------------------------------------------------------------

def _frac(v):
    return v - math.floor(v)


def _medium_complex_nonlinear(x):
    if math.isinf(x):
        # libm: sin(+-inf) is NaN
        return math.nan
    return math.exp(math.sin(x) + math.cos(x))


def _intermediate_complex_nonlinear(x):
    if abs(x - PI / 2) < EPS or abs(x - 3 * PI / 2) < EPS:
        return 0.0
    if math.isinf(x):
        return math.nan
    s = math.sin(x)
    return s * s


def _high_complex_nonlinear(x):
    return 1.0 / math.sqrt(abs(x) + 1)


def _complex_nonlinear(x):
    """Pick a transform family by f1 and an input perturbation by f2."""
    factor_one = _frac((x * COMPLEX_TRANSFORM_MULTIPLIER) / 8.0)
    factor_two = _frac((x * COMPLEX_TRANSFORM_MULTIPLIER) / 4.0)

    if factor_one < 0.33:
        transform = _medium_complex_nonlinear
    elif factor_one < 0.66:
        transform = _intermediate_complex_nonlinear
    else:
        transform = _high_complex_nonlinear

    if factor_two < 0.25:
        return transform(x + (1 + factor_two))
    elif factor_two < 0.5:
        return transform(x - (1 + factor_two))
    elif factor_two < 0.75:
        return transform(x * (1 + factor_two))
    else:
        return transform(x / (1 + factor_two))


def _safe_complex_transform(x):
    """
    Retry _complex_nonlinear on a shrinking input until it is finite.

    Gives up with 0.0 once |x| reaches SAFE_TRANSFORM_FLOOR. The finite
    result is multiplied by the number of attempts.
    """
    if not math.isfinite(x):
        return 0.0
    value = _complex_nonlinear(x)
    rounds = 1
    while math.isnan(value) or math.isinf(value):
        x = x * 0.1
        if abs(x) <= SAFE_TRANSFORM_FLOOR:
            return 0.0
        rounds += 1
        value = _complex_nonlinear(x)
    return value * rounds


# ---------------------------------------------------------------------------
# Matrix and mixing
# ---------------------------------------------------------------------------

def _generate_matrix(seed):
    """64x64 matrix of PRNG draws scaled to [0, 1e6], filled row-major."""
    state = _xoshiro_init(seed)
    gen = _xoshiro_gen
    scale = float(UINT32_MAX)
    mat = []
    for _ in range(MATRIX_SIZE):
        row = []
        for _ in range(MATRIX_SIZE):
            lower = gen(state) & UINT32_MAX
            row.append(lower / scale * NORMALIZE)
        mat.append(row)
    return mat


def _nibble_vector(hash_bytes):
    vector = []
    for b in hash_bytes[:HASH_SIZE]:
        vector.append(b >> 4)
        vector.append(b & 0x0F)
    return vector


def _hash_xor(hash_bytes):
    h = 0
    for i in range(HASH_SIZE // 4):
        h ^= _read_u32_be(hash_bytes, i * 4)
    return float(h)


def _transform_factor(x):
    return x / GRANULARITY - math.floor(x / GRANULARITY)


def _truncate_u64(x):
    # C cast semantics: drop the fraction, wrap into 64 bits
    return int(x) & MASK64


def _fold_products(product):
    scaled = bytearray(HASH_SIZE)
    for i in range(0, MATRIX_SIZE, 2):
        pval = (_truncate_u64(product[i]) + _truncate_u64(product[i + 1])) & MASK64
        scaled[i // 2] = pval & 0xFF
    return bytes(scaled)


def _matrix_multiplication(mat, hash_bytes, nonce):
    """Mix the matrix with the first pass digest and nonce; returns the final digest."""
    vector = _nibble_vector(hash_bytes)
    hash_xor = _hash_xor(hash_bytes)
    nonce_mod = float(nonce & 0xFF)
    safe = _safe_complex_transform

    product = [0.0] * MATRIX_SIZE
    sw = 0.0

    # sw carries over between rows and is refreshed after every column
    for i in range(MATRIX_SIZE):
        row = mat[i]
        acc = product[i]
        for j in range(MATRIX_SIZE):
            if sw <= SWITCH_THRESHOLD:
                value = safe(row[j] * hash_xor * vector[j] + nonce_mod) * vector[j] * MULTIPLIER
            else:
                value = row[j] * DIVIDER * vector[j]
            acc += value
            sw = _transform_factor(acc)
        product[i] = acc

    scaled = _fold_products(product)
    result = bytes(a ^ b for a, b in zip(hash_bytes, scaled))
    return _blake3(result)


# ---------------------------------------------------------------------------
# Driver
# ---------------------------------------------------------------------------

def hoohashv110(data, length=None) -> bytes:
    """
    Compute HoohashV110 of an 80-byte block header. Returns 32 bytes.

    Any other length yields 32 zero bytes instead of raising, so the result
    never satisfies a difficulty target.
    """
    if length is None:
        length = len(data)
    if length != HEADER_SIZE or len(data) < length:
        return bytes(HASH_SIZE)

    header = bytes(data[:HEADER_SIZE])
    first_pass = _blake3(header)
    mat = _generate_matrix(first_pass)
    nonce = _read_u32_le(header, NONCE_OFFSET)
    return _matrix_multiplication(mat, first_pass, nonce)


def hoohashv110_hex(data, length=None) -> str:
    """Return hex string representation of HoohashV110."""
    return hoohashv110(data, length).hex()


if __name__ == '__main__':
    import sys
    if len(sys.argv) > 1:
        data = bytes.fromhex(sys.argv[1])
    else:
        data = bytes(HEADER_SIZE)
    print(hoohashv110_hex(data))
