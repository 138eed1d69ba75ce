"""Parameter sets for the double-precision SIMD-oriented Fast Mersenne Twister.

Each supported Mersenne exponent fixes the recursion's pick-up position,
shift amount, bit masks, state fix-up values and period certification
vector.
"""

from __future__ import annotations

from dataclasses import dataclass

SR = 12
"""Right shift applied to the lung word in the recursion."""

LOW_MASK = 0x000FFFFFFFFFFFFF
"""Mask keeping the 52 mantissa bits of an IEEE 754 double."""

HIGH_CONST = 0x3FF0000000000000
"""Exponent bits that place a mantissa in the range [1, 2)."""

DEFAULT_MEXP = 19937
"""Exponent used when none is given."""


@dataclass(frozen=True)
class DsfmtParams:
    """The constants that define one generator of the family."""

    mexp: int
    pos1: int
    sl1: int
    msk1: int
    msk2: int
    fix1: int
    fix2: int
    pcv1: int
    pcv2: int
    idstr: str

    @property
    def n(self) -> int:
        """Number of 128-bit words in the state, excluding the lung."""
        return (self.mexp - 128) // 104 + 1

    @property
    def n64(self) -> int:
        """Number of 64-bit words in the state, excluding the lung."""
        return self.n * 2


_PARAMS: dict[int, DsfmtParams] = {
    p.mexp: p
    for p in (
        DsfmtParams(
            mexp=521,
            pos1=3,
            sl1=25,
            msk1=0x000FBFEFFF77EFFF,
            msk2=0x000FFEEBFBDFBFDF,
            fix1=0xCFB393D661638469,
            fix2=0xC166867883AE2ADB,
            pcv1=0xCCAA588000000000,
            pcv2=0x0000000000000001,
            idstr="dSFMT2-521:3-25:fbfefff77efff-ffeebfbdfbfdf",
        ),
        DsfmtParams(
            mexp=1279,
            pos1=9,
            sl1=19,
            msk1=0x000EFFF7FFDDFFEE,
            msk2=0x000FBFFFFFF77FFF,
            fix1=0xB66627623D1A31BE,
            fix2=0x04B6C51147B6109B,
            pcv1=0x7049F2DA382A6AEB,
            pcv2=0xDE4CA84A40000001,
            idstr="dSFMT2-1279:9-19:efff7ffddffee-fbffffff77fff",
        ),
        DsfmtParams(
            mexp=2203,
            pos1=7,
            sl1=19,
            msk1=0x000FDFFFF5EDBFFF,
            msk2=0x000F77FFFFFFFBFE,
            fix1=0xB14E907A39338485,
            fix2=0xF98F0735C637EF90,
            pcv1=0x8000000000000000,
            pcv2=0x0000000000000001,
            idstr="dSFMT2-2203:7-19:fdffff5edbfff-f77fffffffbfe",
        ),
        DsfmtParams(
            mexp=4253,
            pos1=19,
            sl1=19,
            msk1=0x0007B7FFFEF5FEFF,
            msk2=0x000FFDFFEFFEFBFC,
            fix1=0x80901B5FD7A11C65,
            fix2=0x5A63FF0E7CB0BA74,
            pcv1=0x1AD277BE12000000,
            pcv2=0x0000000000000001,
            idstr="dSFMT2-4253:19-19:7b7fffef5feff-ffdffeffefbfc",
        ),
        DsfmtParams(
            mexp=11213,
            pos1=37,
            sl1=19,
            msk1=0x000FFFFFFDF7FFFD,
            msk2=0x000DFFFFFFF6BFFF,
            fix1=0xD0EF7B7C75B06793,
            fix2=0x9C50FF4CAAE0A641,
            pcv1=0x8234C51207C80000,
            pcv2=0x0000000000000001,
            idstr="dSFMT2-11213:37-19:ffffffdf7fffd-dfffffff6bfff",
        ),
        DsfmtParams(
            mexp=19937,
            pos1=117,
            sl1=19,
            msk1=0x000FFAFFFFFFFB3F,
            msk2=0x000FFDFFFC90FFFD,
            fix1=0x90014964B32F4329,
            fix2=0x3B8D12AC548A7C7A,
            pcv1=0x3D84E1AC0DC82880,
            pcv2=0x0000000000000001,
            idstr="dSFMT2-19937:117-19:ffafffffffb3f-ffdfffc90fffd",
        ),
        DsfmtParams(
            mexp=44497,
            pos1=304,
            sl1=19,
            msk1=0x000FF6DFFFFFFFEF,
            msk2=0x0007FFDDDEEFFF6F,
            fix1=0x75D910F235F6E10E,
            fix2=0x7B32158AEDC8E969,
            pcv1=0x4C3356B2A0000000,
            pcv2=0x0000000000000001,
            idstr="dSFMT2-44497:304-19:ff6dfffffffef-7ffdddeefff6f",
        ),
        DsfmtParams(
            mexp=86243,
            pos1=231,
            sl1=13,
            msk1=0x000FFEDFF6FFFFDF,
            msk2=0x000FFFF7FDFFFF7E,
            fix1=0x1D553E776B975E68,
            fix2=0x648FAADF1416BF91,
            pcv1=0x5F2CD03E2758A373,
            pcv2=0xC0B7EB8410000001,
            idstr="dSFMT2-86243:231-13:ffedff6ffffdf-ffff7fdffff7e",
        ),
        DsfmtParams(
            mexp=132049,
            pos1=371,
            sl1=23,
            msk1=0x000FB9F4EFF4BF77,
            msk2=0x000FFFFFBFEFFF37,
            fix1=0x4CE24C0E4E234F3B,
            fix2=0x62612409B5665C2D,
            pcv1=0x181232889145D000,
            pcv2=0x0000000000000001,
            idstr="dSFMT2-132049:371-23:fb9f4eff4bf77-fffffbfefff37",
        ),
        DsfmtParams(
            mexp=216091,
            pos1=1890,
            sl1=23,
            msk1=0x000BF7DF7FEFCFFF,
            msk2=0x000E7FFFFEF737FF,
            fix1=0xD7F95A04764C27D7,
            fix2=0x6A483861810BEBC2,
            pcv1=0x3AF0A8F3D5600000,
            pcv2=0x0000000000000001,
            idstr="dSFMT2-216091:1890-23:bf7df7fefcfff-e7ffffef737ff",
        ),
    )
}

SUPPORTED_MEXPS: tuple[int, ...] = tuple(sorted(_PARAMS))
"""Mersenne exponents for which a parameter set exists."""


def get_params(mexp: int = DEFAULT_MEXP) -> DsfmtParams:
    """Return the parameter set for the Mersenne exponent ``mexp``.

    Raises ValueError if the exponent is not one of SUPPORTED_MEXPS.
    """
    try:
        return _PARAMS[mexp]
    except (KeyError, TypeError):
        raise ValueError(
            f"DSFMT_MEXP is not valid: {mexp!r} "
            f"(supported: {', '.join(map(str, SUPPORTED_MEXPS))})"
        ) from None