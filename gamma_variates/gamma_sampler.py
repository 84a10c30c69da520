"""Gamma distribution sampler"""

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

import math
import numbers
import sys
import numpy as np
from numpy.typing import NDArray
from typing import Any, Optional
from .errors import ComputationError, InvalidParameterError
from .marsaglia_tsang import standard_gamma
from .random_source import RandomSource


_Array = NDArray[np.float64]


def _check_positive(name: str, value: float) -> None:
    """Raise InvalidParameterError unless value is finite and positive.

    Non-numeric values are left to raise TypeError from the comparison.
    """
    # "not value > 0" also rejects NaN.
    if not value > 0.0 or math.isinf(value):
        raise InvalidParameterError(f"{name} must be positive and finite, got {value}")


def _check_count(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidParameterError(f"n must be an integer, got {n!r}")
    if n < 0:
        raise InvalidParameterError(f"n must be non-negative, got {n}")


class GammaSampler:
    """Draws variates from Gamma(shape, scale) distributions.

    Uses the Marsaglia-Tsang rejection method; shapes below 1 are boosted to
    shape + 1 and corrected by a power of a uniform variate.

    The sampler keeps no state between calls apart from its random source,
    which it advances.  It is as thread-safe as that source.

    Class Attributes
    ----------
    max_iterations : int
        Default limit on rejected proposals per variate.  The expected number
        of proposals is below 1.1 for every shape, so hitting the limit
        indicates a broken random source.
    """

    max_iterations = 1 << 20

    __slots__ = ("_source", "_max_iterations")

    def __init__(self, source: Any = None, max_iterations: Optional[int] = None):
        """
        Parameters
        ----------
        source
            Provides uniform() on the open interval (0, 1) and
            standard_normal().  Defaults to a RandomSource seeded from OS
            entropy.
        max_iterations
            Overrides GammaSampler.max_iterations for this sampler.
            Must be a positive integer no larger than sys.maxsize.
        """
        if max_iterations is None:
            max_iterations = GammaSampler.max_iterations
        elif (
            isinstance(max_iterations, bool)
            or not isinstance(max_iterations, numbers.Integral)
            or not 1 <= max_iterations <= sys.maxsize
        ):
            raise InvalidParameterError(
                f"max_iterations must be a positive integer, got {max_iterations!r}"
            )

        self._source = RandomSource() if source is None else source
        self._max_iterations: int = max_iterations

    @property
    def source(self) -> Any:
        """The random source this sampler consumes."""
        return self._source

    def sample_one(self, shape: float, scale: float) -> float:
        """Return one variate from Gamma(shape, scale).

        Parameters
        ----------
        shape
            Shape parameter k; must be positive and finite.
        scale
            Scale parameter theta; must be positive and finite.

        Returns
        -------
        float
            A positive variate with mean k theta and variance k theta^2.

        Raises
        ------
        InvalidParameterError
            If shape or scale is out of range.
        TypeError
            If shape or scale is not a real number.
        ComputationError
            If no proposal was accepted within the iteration limit, or the
            scaled variate overflows to infinity.
        """
        _check_positive("shape", shape)
        _check_positive("scale", scale)
        return self._sample(shape, scale)

    def sample_many(self, n: int, shape: float, scale: float) -> _Array:
        """Return n independent variates from Gamma(shape, scale).

        Element i is the result of the i-th of n successive sample_one()
        calls, so a seeded source reproduces the whole array.

        Parameters
        ----------
        n
            Number of variates; 0 gives an empty array.
        shape
            Shape parameter k; must be positive and finite.
        scale
            Scale parameter theta; must be positive and finite.

        Returns
        -------
        ndarray
            An array of length n.

        Raises
        ------
        InvalidParameterError
            If n is not a non-negative integer, or shape or scale is out of
            range.
        TypeError
            If shape or scale is not a real number.
        ComputationError
            As for sample_one(); no partial array is returned.
        """
        _check_count(n)
        _check_positive("shape", shape)
        _check_positive("scale", scale)

        draws = np.empty(n)
        for i in range(n):
            draws[i] = self._sample(shape, scale)
        return draws

    def _sample(self, shape: float, scale: float) -> float:
        draw = scale * standard_gamma(shape, self._source, self._max_iterations)
        if math.isinf(draw):
            raise ComputationError(
                f"gamma variate overflowed (shape={shape}, scale={scale})"
            )
        return draw


def sample_gamma(shape: float, scale: float, source: Any = None) -> float:
    """Return one variate from Gamma(shape, scale).

    See GammaSampler.sample_one().  Without a source, fresh OS entropy is used
    for the call.
    """
    return GammaSampler(source).sample_one(shape, scale)


def sample_gamma_n(n: int, shape: float, scale: float, source: Any = None) -> _Array:
    """Return n independent variates from Gamma(shape, scale).

    See GammaSampler.sample_many().  Without a source, fresh OS entropy is used
    for the call.
    """
    return GammaSampler(source).sample_many(n, shape, scale)
