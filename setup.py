"""Package setup for gamma_variates"""

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

from setuptools import setup, Extension
from Cython.Build import cythonize


marsaglia_tsang = Extension(
    "gamma_variates.marsaglia_tsang",
    ["gamma_variates/marsaglia_tsang.pyx"],
    # Keep IEEE semantics without fused multiply-adds, so seeded streams
    # match the pure-Python reference bit for bit.
    extra_compile_args=["-O3", "-fno-math-errno", "-ffp-contract=off"],
)

long_description = """
gamma_variates draws random variates from the gamma distribution, one at a time
or as arrays, using the Marsaglia-Tsang rejection method over a seedable numpy
random stream."""

if __name__ == "__main__":
    setup(
        name="gamma_variates",
        description="Random variates from the gamma distribution",
        long_description=long_description,
        version="1.0.0",
        classifiers=[
            "Development Status :: 5 - Production/Stable",
            "Intended Audience :: Developers",
            "Intended Audience :: Science/Research",
            "License :: OSI Approved :: Apache Software License",
            "Operating System :: POSIX",
            "Programming Language :: Cython",
            "Programming Language :: Python :: 3",
            "Topic :: Scientific/Engineering :: Mathematics",
            "Topic :: Software Development :: Libraries :: Python Modules",
        ],
        license="Apache License 2.0",
        packages=["gamma_variates", "gamma_variates.tests"],
        include_package_data=False,
        package_data={"gamma_variates": ["*.pyi", "*.pyx"]},
        platforms=["POSIX"],
        python_requires=">=3.8",
        install_requires=["numpy>=1.21"],
        extras_require={"test": ["pytest"]},
        ext_modules=cythonize(
            [marsaglia_tsang],
            compiler_directives={
                "language_level": 3,
                "boundscheck": False,
                "cdivision": True,
                "embedsignature": True,
                "initializedcheck": False,
                "nonecheck": False,
                "wraparound": False,
            },
        ),
    )
