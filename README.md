# chancap

A pure-Python double-precision SIMD-oriented Fast Mersenne Twister (dSFMT)
pseudorandom number generator. It produces IEEE 754 doubles in several
ranges and unsigned 32-bit integers, one at a time or in blocks, for any of
the generator family's supported Mersenne exponents.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## The generator

`chancap.dsfmt.Dsfmt(seed=0, mexp=19937)` creates a seeded generator.
`seed` is either a 32-bit integer or an iterable of 32-bit integers;
`mexp` selects the Mersenne exponent, and so the period.

```python
from chancap.dsfmt import Dsfmt

rng = Dsfmt(1234, 521)
print(rng.idstring())               # "dSFMT2-521:3-25:fbfefff77efff-ffeebfbdfbfdf"
print(rng.genrand_close_open())     # in [0, 1)
print(rng.genrand_open_close())     # in (0, 1]
print(rng.genrand_open_open())      # in (0, 1)
print(rng.genrand_close1_open2())   # in [1, 2)
print(rng.genrand_uint32())         # unsigned 32-bit integer

block = rng.fill_array_open_open(rng.min_array_size())  # list of doubles in (0, 1)

rng.init_gen_rand(42)               # reseed with an integer
rng.init_by_array([1, 2, 3, 4])     # reseed with a sequence
```

The `fill_array_*` methods generate a whole block in one step and return
a list of `size` doubles. `size` must be even and at least
`min_array_size()`; otherwise `ValueError` is raised. As with the
generator's reference behaviour, a block fill is not meant to be mixed
with the single-value `genrand_*` calls without reseeding in between.

## Parameters

`chancap.params.get_params(mexp)` returns the `DsfmtParams` for an
exponent, with its `n` (128-bit state words) and `n64` (64-bit state
words) properties. `chancap.params.SUPPORTED_MEXPS` lists the exponents:
521, 1279, 2203, 4253, 11213, 19937, 44497, 86243, 132049 and 216091.
Any other exponent raises `ValueError`.

## Low-level functions

`chancap.engine` holds the pieces the generator is built from, working on
a state given as a list of `(low, high)` pairs of 64-bit integers:
`init_gen_rand`, `init_by_array`, `period_certification`, `do_recursion`,
`gen_rand_all`, `gen_rand_array`, and the conversions of a raw 64-bit
word to a double: `to_close1_open2`, `to_close_open`, `to_open_close`
and `to_open_open`.

## What this package does not do

The package does not compute channel capacities: it has no channel matrix
type and no Blahut-Arimoto solvers. It also provides no command-line
tools, such as one for filtering sample files; it is a library only.