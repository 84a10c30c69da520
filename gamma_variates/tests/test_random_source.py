"""Tests for the random_source module"""

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
import unittest
from ..errors import InvalidParameterError
from ..gamma_sampler import GammaSampler
from ..random_source import RandomSource, SynchronizedRandomSource


class _FixedGenerator:
    """Stands in for numpy.random.Generator.random()."""

    def __init__(self, values):
        self._values = iter(values)

    def random(self):
        return next(self._values)


class TestRandomSource(unittest.TestCase):
    """Tests for the RandomSource class"""

    def test_reproducible(self):
        """Test RandomSource streams with the same seed"""
        a = RandomSource(5)
        b = RandomSource(5)
        for _ in range(10):
            self.assertEqual(a.uniform(), b.uniform())
            self.assertEqual(a.standard_normal(), b.standard_normal())

    def test_matches_default_rng(self):
        """Test RandomSource draws from a PCG64 generator"""
        source = RandomSource(5)
        rng = np.random.default_rng(5)
        self.assertEqual(source.standard_normal(), rng.standard_normal())
        self.assertEqual(source.uniform(), rng.random())

    def test_seed_sequence(self):
        """Test RandomSource() with a SeedSequence"""
        seed_seq = np.random.SeedSequence(5)
        source = RandomSource(seed_seq)
        self.assertIs(source.seed_sequence, seed_seq)
        self.assertEqual(source.uniform(), RandomSource(5).uniform())

    def test_uniform_open_interval(self):
        """Test RandomSource.uniform() stays in (0, 1)"""
        source = RandomSource(9)
        for _ in range(10000):
            u = source.uniform()
            self.assertGreater(u, 0.0)
            self.assertLess(u, 1.0)

    def test_uniform_redraws_zero(self):
        """Test RandomSource.uniform() never returns 0"""
        source = RandomSource(9)
        source._generator = _FixedGenerator([0.0, 0.0, 0.25])
        self.assertEqual(source.uniform(), 0.25)

    def test_standard_normal_moments(self):
        """Test RandomSource.standard_normal() mean and variance"""
        source = RandomSource(9)
        x = np.array([source.standard_normal() for _ in range(100000)])
        self.assertLess(abs(x.mean()), 5.0 / np.sqrt(x.size))
        self.assertLess(abs(x.var() - 1.0), 5.0 * np.sqrt(2.0 / x.size))

    def test_spawn(self):
        """Test RandomSource.spawn() gives distinct, reproducible streams"""
        children = RandomSource(5).spawn(3)
        again = RandomSource(5).spawn(3)
        self.assertEqual(len(children), 3)
        firsts = [child.uniform() for child in children]
        self.assertEqual(len(set(firsts)), 3)
        self.assertEqual(firsts, [child.uniform() for child in again])

    def test_spawn_empty(self):
        """Test RandomSource.spawn(0)"""
        self.assertEqual(RandomSource(5).spawn(0), [])

    def test_spawn_negative(self):
        """Test RandomSource.spawn() with a negative count"""
        with self.assertRaises(InvalidParameterError):
            RandomSource(5).spawn(-1)

    def test_spawn_per_thread(self):
        """Test per-thread samplers from spawned sources are reproducible"""

        def run(seed):
            sources = RandomSource(seed).spawn(4)
            results = [None] * len(sources)

            def work(i):
                results[i] = GammaSampler(sources[i]).sample_many(1000, 2.0, 1.0)

            threads = [
                threading.Thread(target=work, args=(i,)) for i in range(len(sources))
            ]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()
            return [r.tolist() for r in results]

        self.assertEqual(run(13), run(13))


class TestSynchronizedRandomSource(unittest.TestCase):
    """Tests for the SynchronizedRandomSource class"""

    def test_delegates(self):
        """Test SynchronizedRandomSource draws from the wrapped source"""
        source = SynchronizedRandomSource(RandomSource(5))
        reference = RandomSource(5)
        self.assertEqual(source.standard_normal(), reference.standard_normal())
        self.assertEqual(source.uniform(), reference.uniform())

    def test_default_source(self):
        """Test SynchronizedRandomSource() without a source"""
        source = SynchronizedRandomSource()
        self.assertGreater(source.uniform(), 0.0)

    def test_shared_between_threads(self):
        """Test threads sharing one SynchronizedRandomSource"""
        source = SynchronizedRandomSource(RandomSource(5))
        sampler = GammaSampler(source)
        results = [None] * 4

        def work(i):
            results[i] = sampler.sample_many(2000, 3.0, 1.0)

        threads = [threading.Thread(target=work, args=(i,)) for i in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        draws = np.concatenate(results)
        self.assertEqual(draws.size, 8000)
        self.assertTrue(np.all(draws > 0.0))

    def test_lock_held_across_draws(self):
        """Test holding the lock makes a shared stream reproducible"""
        source = SynchronizedRandomSource(RandomSource(5))
        sampler = GammaSampler(source)
        with source.lock:
            draws = sampler.sample_many(10, 2.0, 1.0)
        expected = GammaSampler(RandomSource(5)).sample_many(10, 2.0, 1.0)
        self.assertEqual(draws.tolist(), expected.tolist())
