"""A seeded double-precision SIMD-oriented Fast Mersenne Twister generator."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Union

from . import engine
from .params import DEFAULT_MEXP, get_params

_M32 = 0xFFFFFFFF

Seed = Union[int, Iterable[int]]


class Dsfmt:
    """Pseudorandom generator producing IEEE 754 doubles and 32-bit integers.

    ``seed`` is either a 32-bit integer or a sequence of 32-bit integers;
    ``mexp`` selects the Mersenne exponent and so the period.
    """

    def __init__(self, seed: Seed = 0, mexp: int = DEFAULT_MEXP) -> None:
        self._params = get_params(mexp)
        self._status: list[engine.Word128] = []
        self._idx = self._params.n64
        if isinstance(seed, int):
            self.init_gen_rand(seed)
        else:
            self.init_by_array(seed)

    @property
    def mexp(self) -> int:
        """The Mersenne exponent of this generator."""
        return self._params.mexp

    def idstring(self) -> str:
        """Return the string naming the exponent and all parameters."""
        return self._params.idstr

    def min_array_size(self) -> int:
        """Return the smallest size accepted by the fill_array methods."""
        return self._params.n64

    def init_gen_rand(self, seed: int) -> None:
        """Reseed with a 32-bit integer."""
        self._status = engine.init_gen_rand(seed, self._params)
        self._idx = self._params.n64

    def init_by_array(self, init_key: Iterable[int]) -> None:
        """Reseed with a sequence of 32-bit integers."""
        self._status = engine.init_by_array(list(init_key), self._params)
        self._idx = self._params.n64

    def _next_word(self) -> int:
        if self._idx >= self._params.n64:
            engine.gen_rand_all(self._status, self._params)
            self._idx = 0
        lo_hi = self._status[self._idx // 2]
        word = lo_hi[self._idx % 2]
        self._idx += 1
        return word

    def genrand_uint32(self) -> int:
        """Return an unsigned 32-bit integer."""
        return self._next_word() & _M32

    def genrand_close1_open2(self) -> float:
        """Return a double uniformly distributed in [1, 2)."""
        return engine.to_close1_open2(self._next_word())

    def genrand_close_open(self) -> float:
        """Return a double uniformly distributed in [0, 1)."""
        return engine.to_close_open(self._next_word())

    def genrand_open_close(self) -> float:
        """Return a double uniformly distributed in (0, 1]."""
        return engine.to_open_close(self._next_word())

    def genrand_open_open(self) -> float:
        """Return a double uniformly distributed in (0, 1)."""
        return engine.to_open_open(self._next_word())

    def _fill(self, size: int, convert: Callable[[int], float]) -> list[float]:
        if size % 2 != 0:
            raise ValueError(f"array size must be even, got {size}")
        if size < self._params.n64:
            raise ValueError(
                f"array size must be at least {self._params.n64}, got {size}"
            )
        words = engine.gen_rand_array(self._status, size // 2, self._params)
        return [convert(word) for word in words]

    def fill_array_close1_open2(self, size: int) -> list[float]:
        """Return ``size`` doubles in [1, 2) generated as one block."""
        return self._fill(size, engine.to_close1_open2)

    def fill_array_close_open(self, size: int) -> list[float]:
        """Return ``size`` doubles in [0, 1) generated as one block."""
        return self._fill(size, engine.to_close_open)

    def fill_array_open_close(self, size: int) -> list[float]:
        """Return ``size`` doubles in (0, 1] generated as one block."""
        return self._fill(size, engine.to_open_close)

    def fill_array_open_open(self, size: int) -> list[float]:
        """Return ``size`` doubles in (0, 1) generated as one block."""
        return self._fill(size, engine.to_open_open)