# sim/rng.py
from zlib import crc32

import numpy as np


def _u32(x: int) -> int:
    return int(x & 0xFFFFFFFF)


def _tag(s: str) -> int:
    return _u32(crc32(s.encode("utf-8")))


class RNGRegistry:
    """
    Named numpy Generators derived from [seed, scenario, stream, *parts].
    The same name always yields the same draws, whatever order streams are
    requested in.
    """

    def __init__(self, seed: int, *, scenario: str | int = 0):
        self.seed = _u32(seed)
        self.scenario_tag = _tag(str(scenario))

    def _entropy(self, name: str, parts) -> list[int]:
        out = [self.seed, self.scenario_tag, _tag(name)]
        for p in parts:
            out.append(_u32(int(p)) if isinstance(p, (int, np.integer)) else _tag(repr(p)))
        return out

    def stream(self, name: str) -> np.random.Generator:
        return self.substream(name)

    def substream(self, name: str, *parts: object) -> np.random.Generator:
        ss = np.random.SeedSequence(entropy=self._entropy(name, parts))
        return np.random.Generator(np.random.PCG64(ss))
