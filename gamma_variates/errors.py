"""Exceptions raised by gamma_variates"""

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


class InvalidParameterError(ValueError):
    """A distribution parameter or draw count is outside its domain.

    Raised before any random numbers are consumed, so a failed call never
    advances the random source.
    """


class ComputationError(ArithmeticError):
    """The rejection sampler exceeded its iteration limit.

    With valid parameters this only happens if the random source is
    defective (e.g. it keeps returning the same normal variate).
    """
