#!/usr/bin/env python3
"""Draws variates from a gamma distribution and writes them as CSV.

Should be called as:

    python3 -m gamma_variates SHAPE SCALE

SHAPE and SCALE are the (positive) shape k and scale theta parameters.  The
draws are written to stdout, or to the file named by --output.

Output
------
The first line is a header; each following line holds one draw, in the order
the draws were generated.

draw
    A variate from Gamma(SHAPE, SCALE).

With --summary, the sample mean and variance are printed to stderr alongside
the distribution's mean (k theta) and variance (k theta^2):

    mean,var,expected_mean,expected_var
"""

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

import argparse
import contextlib
import csv
import sys
from gamma_variates.gamma_sampler import GammaSampler
from gamma_variates.random_source import RandomSource


def write_draws(fp, draws):
    writer = csv.writer(fp, lineterminator="\n", delimiter=",")
    writer.writerow(["draw"])
    for draw in draws:
        writer.writerow([repr(float(draw))])


def print_summary(draws, shape, scale):
    """Print sample moments and the expected moments to stderr."""
    print("mean,var,expected_mean,expected_var", file=sys.stderr)
    print(
        f"{draws.mean()},{draws.var()},{shape * scale},{shape * scale * scale}",
        file=sys.stderr,
    )


def parse_args(argv):
    parser = argparse.ArgumentParser(
        description="""
        Draws variates from a gamma distribution and writes them as CSV.
        """
    )
    parser.add_argument("shape", metavar="SHAPE", type=float, help="shape parameter k")
    parser.add_argument("scale", metavar="SCALE", type=float, help="scale parameter theta")
    parser.add_argument(
        "-n",
        "--count",
        metavar="N",
        type=int,
        default=1,
        help="number of draws (default 1)",
    )
    parser.add_argument(
        "--seed",
        metavar="S",
        type=int,
        default=None,
        help="seed for a reproducible stream (default: OS entropy)",
    )
    parser.add_argument(
        "--output", "-o", metavar="FILE", help="output CSV file; defaults to stdout"
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="print sample and expected moments to stderr",
    )
    parser.add_argument(
        "--max-iterations",
        metavar="M",
        type=int,
        default=None,
        help="maximum proposals per draw (default %d)" % GammaSampler.max_iterations,
    )
    return parser.parse_args(argv)


def main(argv):
    """Sample and write the draws."""
    args = parse_args(argv[1:])

    sampler = GammaSampler(RandomSource(args.seed), args.max_iterations)
    draws = sampler.sample_many(args.count, args.shape, args.scale)

    if draws.size == 0:
        print("warning: no draws requested", file=sys.stderr)

    with contextlib.ExitStack() as stack:
        if args.output is None:
            fp = sys.stdout
        else:
            fp = stack.enter_context(open(args.output, "w", newline=""))
        write_draws(fp, draws)

    if args.summary and draws.size > 0:
        print_summary(draws, args.shape, args.scale)


if __name__ == "__main__":
    main(sys.argv)
