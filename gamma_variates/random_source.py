"""Uniform and standard-normal variates for the gamma sampler"""

# Copyright Contributors to the gamma_variates project
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import threading
import numpy as np
from typing import List, Optional, Sequence, Union
from .errors import InvalidParameterError


Seed = Union[None, int, Sequence[int], np.random.SeedSequence]


class RandomSource:
    """A seedable stream of uniform and standard-normal variates.

    Wraps a numpy Generator over the PCG64 bit generator.  A RandomSource is
    not thread-safe: give each thread its own source (see spawn()), or wrap a
    shared one in a SynchronizedRandomSource.
    """

    __slots__ = ("_seed_seq", "_generator")

    def __init__(self, seed: Seed = None):
        """
        Parameters
        ----------
        seed
            Entropy for the stream.  None draws fresh entropy from the OS; the
            same int (or SeedSequence) always reproduces the same stream.
        """
        if isinstance(seed, np.random.SeedSequence):
            self._seed_seq = seed
        else:
            self._seed_seq = np.random.SeedSequence(seed)
        self._generator = np.random.Generator(np.random.PCG64(self._seed_seq))

    @property
    def seed_sequence(self) -> np.random.SeedSequence:
        """The SeedSequence the stream was initialized from."""
        return self._seed_seq

    def uniform(self) -> float:
        """Return a variate from the open interval (0, 1)."""
        # Generator.random() samples [0, 1); log(0) is undefined downstream.
        u = self._generator.random()
        while u == 0.0:
            u = self._generator.random()
        return u

    def standard_normal(self) -> float:
        """Return a variate from N(0, 1)."""
        return self._generator.standard_normal()

    def spawn(self, n: int) -> List["RandomSource"]:
        """Return n independent child sources.

        Children are derived from this source's SeedSequence, so spawning
        from identically seeded sources yields identical children.  This is
        the intended way to give each thread a reproducible stream.
        """
        if n < 0:
            raise InvalidParameterError(f"cannot spawn {n} sources")
        return [RandomSource(s) for s in self._seed_seq.spawn(n)]


class SynchronizedRandomSource:
    """Serializes access to a random source shared between threads.

    Each variate is drawn under the lock, so concurrent callers never corrupt
    the wrapped generator.  The interleaving of draws between threads is still
    arbitrary: hold the lock across a whole sample for reproducible streams.
    """

    __slots__ = ("_source", "lock")

    def __init__(self, source: Optional[RandomSource] = None):
        self._source = RandomSource() if source is None else source
        self.lock = threading.RLock()

    def uniform(self) -> float:
        with self.lock:
            return self._source.uniform()

    def standard_normal(self) -> float:
        with self.lock:
            return self._source.standard_normal()
