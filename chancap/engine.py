"""Core recursion, seeding and block generation of the dSFMT generator.

The state is a list of ``n + 1`` 128-bit words, each held as a pair of
unsigned 64-bit integers ``(low, high)``. The last word is the "lung",
which feeds back into every step of the recursion.
"""

from __future__ import annotations

import struct
from collections.abc import Sequence

from .params import HIGH_CONST, LOW_MASK, SR, DsfmtParams

Word128 = tuple[int, int]

_M32 = 0xFFFFFFFF
_M64 = 0xFFFFFFFFFFFFFFFF


def do_recursion(
    a: Word128, b: Word128, lung: Word128, params: DsfmtParams
) -> tuple[Word128, Word128]:
    """Apply the recursion formula once.

    Returns the new output word and the updated lung.
    """
    t0, t1 = a
    l0, l1 = lung
    b0, b1 = b
    new_l0 = ((t0 << params.sl1) & _M64) ^ (l1 >> 32) ^ ((l1 << 32) & _M64) ^ b0
    new_l1 = ((t1 << params.sl1) & _M64) ^ (l0 >> 32) ^ ((l0 << 32) & _M64) ^ b1
    r0 = (new_l0 >> SR) ^ (new_l0 & params.msk1) ^ t0
    r1 = (new_l1 >> SR) ^ (new_l1 & params.msk2) ^ t1
    return (r0, r1), (new_l0, new_l1)


def _check_status(status: Sequence[Word128], params: DsfmtParams) -> None:
    if len(status) != params.n + 1:
        raise ValueError(
            f"state must hold {params.n + 1} 128-bit words, got {len(status)}"
        )


def gen_rand_array(
    status: list[Word128], size: int, params: DsfmtParams
) -> list[int]:
    """Generate ``size`` 128-bit words following the state.

    The state is advanced in place so that it continues after the
    generated block. The result is the flat list of ``2 * size`` raw
    64-bit words, each a double in [1, 2) in IEEE 754 form.
    """
    _check_status(status, params)
    n = params.n
    if size < n:
        raise ValueError(f"block size must be at least {n} 128-bit words")

    lung = status[n]
    out: list[Word128] = []
    for i in range(size):
        a = status[i] if i < n else out[i - n]
        bi = i + params.pos1
        b = status[bi] if bi < n else out[bi - n]
        word, lung = do_recursion(a, b, lung, params)
        out.append(word)

    status[:n] = out[size - n:]
    status[n] = lung
    return [half for word in out for half in word]


def gen_rand_all(status: list[Word128], params: DsfmtParams) -> None:
    """Refill the state in place with the next ``n`` 128-bit words."""
    gen_rand_array(status, params.n, params)


def _ini_func1(x: int) -> int:
    return ((x ^ (x >> 27)) * 1664525) & _M32


def _ini_func2(x: int) -> int:
    return ((x ^ (x >> 27)) * 1566083941) & _M32


def _from_u32(words: Sequence[int]) -> list[Word128]:
    u64 = [lo | (hi << 32) for lo, hi in zip(words[0::2], words[1::2])]
    return list(zip(u64[0::2], u64[1::2]))


def _initial_mask(status: list[Word128], params: DsfmtParams) -> None:
    for k in range(params.n):
        lo, hi = status[k]
        status[k] = (
            (lo & LOW_MASK) | HIGH_CONST,
            (hi & LOW_MASK) | HIGH_CONST,
        )


def period_certification(status: list[Word128], params: DsfmtParams) -> None:
    """Adjust the lung in place so the period is 2^mexp - 1 or a multiple."""
    _check_status(status, params)
    n = params.n
    pcv = (params.pcv1, params.pcv2)
    lung = list(status[n])

    inner = ((lung[0] ^ params.fix1) & pcv[0]) ^ ((lung[1] ^ params.fix2) & pcv[1])
    shift = 32
    while shift > 0:
        inner ^= inner >> shift
        shift >>= 1
    if inner & 1:
        return

    if params.pcv2 & 1:
        lung[1] ^= 1
    else:
        for half in (1, 0):
            low_bit = pcv[half] & -pcv[half]
            if low_bit:
                lung[half] ^= low_bit
                break
    status[n] = (lung[0], lung[1])


def init_gen_rand(seed: int, params: DsfmtParams) -> list[Word128]:
    """Return a fresh state seeded with a 32-bit integer."""
    size = (params.n + 1) * 4
    words = [seed & _M32]
    for i in range(1, size):
        prev = words[-1]
        words.append((1812433253 * (prev ^ (prev >> 30)) + i) & _M32)
    status = _from_u32(words)
    _initial_mask(status, params)
    period_certification(status, params)
    return status


def init_by_array(init_key: Sequence[int], params: DsfmtParams) -> list[Word128]:
    """Return a fresh state seeded with a sequence of 32-bit integers."""
    size = (params.n + 1) * 4
    if size >= 623:
        lag = 11
    elif size >= 68:
        lag = 7
    elif size >= 39:
        lag = 5
    else:
        lag = 3
    mid = (size - lag) // 2

    key = [k & _M32 for k in init_key]
    key_length = len(key)
    p = [0x8B8B8B8B] * size
    count = max(key_length + 1, size)

    r = _ini_func1(p[0] ^ p[mid % size] ^ p[(size - 1) % size])
    p[mid % size] = (p[mid % size] + r) & _M32
    r = (r + key_length) & _M32
    p[(mid + lag) % size] = (p[(mid + lag) % size] + r) & _M32
    p[0] = r
    count -= 1

    i = 1
    for j in range(count):
        r = _ini_func1(p[i] ^ p[(i + mid) % size] ^ p[(i + size - 1) % size])
        p[(i + mid) % size] = (p[(i + mid) % size] + r) & _M32
        r = (r + (key[j] if j < key_length else 0) + i) & _M32
        p[(i + mid + lag) % size] = (p[(i + mid + lag) % size] + r) & _M32
        p[i] = r
        i = (i + 1) % size

    for _ in range(size):
        r = _ini_func2((p[i] + p[(i + mid) % size] + p[(i + size - 1) % size]) & _M32)
        p[(i + mid) % size] ^= r
        r = (r - i) & _M32
        p[(i + mid + lag) % size] ^= r
        p[i] = r
        i = (i + 1) % size

    status = _from_u32(p)
    _initial_mask(status, params)
    period_certification(status, params)
    return status


def to_close1_open2(word: int) -> float:
    """Interpret a raw 64-bit word as a double in [1, 2)."""
    return struct.unpack("<d", struct.pack("<Q", word & _M64))[0]


def to_close_open(word: int) -> float:
    """Map a raw 64-bit word to a double in [0, 1)."""
    return to_close1_open2(word) - 1.0


def to_open_close(word: int) -> float:
    """Map a raw 64-bit word to a double in (0, 1]."""
    return 2.0 - to_close1_open2(word)


def to_open_open(word: int) -> float:
    """Map a raw 64-bit word to a double in (0, 1)."""
    return to_close1_open2(word | 1) - 1.0