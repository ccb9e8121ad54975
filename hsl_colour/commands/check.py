"""Verify the lossless RGB -> HSL -> RGB round trip.

Samples RGB triples with a seeded numpy generator (default 5000, or
HSL_TOOL_SAMPLES), always including the eight corners of the RGB cube.
--exhaustive walks all 16,777,216 triples instead (slow: minutes).

Every triple must come back exactly. Up to 20 mismatches are listed;
exit status is 1 if any triple fails.

Example:
    uv run hsl-tool check
    uv run hsl-tool check --samples 100000 --seed 7
    uv run hsl-tool check --exhaustive --json
"""

import itertools
from collections.abc import Iterable, Iterator
from dataclasses import asdict

import numpy as np

from hsl_colour.core.env import Settings
from hsl_colour.core.hsl import from_rgb
from hsl_colour.core.types import Command, Report

command = Command(
    name='check',
    help='Verify RGB -> HSL -> RGB is lossless (sampled or exhaustive).',
)

MAX_REPORTED = 20

CORNERS = list(itertools.product((0, 255), repeat=3))


def sample_triples(n_samples: int, seed: int = 42) -> Iterator[tuple[int, int, int]]:
    """Yield the cube corners, then n_samples seeded random RGB triples."""
    yield from CORNERS
    rng = np.random.default_rng(seed)
    for row in rng.integers(0, 256, size=(n_samples, 3)):
        yield int(row[0]), int(row[1]), int(row[2])


def all_triples() -> Iterator[tuple[int, int, int]]:
    return itertools.product(range(256), repeat=3)


def check_round_trip(triples: Iterable[tuple[int, int, int]], report: Report) -> int:
    """Convert each triple to HSL and back, record mismatches. Returns the number checked."""
    checked = 0
    failed = 0
    for r, g, b in triples:
        checked += 1
        hsl = from_rgb(r, g, b)
        back = hsl.to_rgb()
        if back == (r, g, b):
            continue
        failed += 1
        if failed <= MAX_REPORTED:
            report.add('mismatch', {'input': [r, g, b], 'hsl': asdict(hsl), 'output': list(back)})

    report.record_pass(checked - failed)
    report.record_fail(failed)
    return checked


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('-n', '--samples', type=int, default=None, help='Random triples to check')
    parser.add_argument('-s', '--seed', type=int, default=42, help='Random seed (default: 42)')
    parser.add_argument('-x', '--exhaustive', action='store_true', help='Check every RGB triple')


@command.run
def run(report: Report, args) -> None:
    settings = getattr(args, 'settings', None) or Settings()

    if args.exhaustive:
        checked = check_round_trip(all_triples(), report)
        report.summary = {'checked': checked, 'mode': 'exhaustive'}
        return

    n_samples = max(0, args.samples) if args.samples is not None else settings.samples
    checked = check_round_trip(sample_triples(n_samples, args.seed), report)
    report.summary = {'checked': checked, 'mode': 'sample', 'seed': args.seed}
