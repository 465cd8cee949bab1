# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Pytest configuration for varint tests."""

import random

import pytest

DEFAULT_SAMPLES = 2000
DEFAULT_SEED = 0x5EED


def pytest_addoption(parser):
    """Add custom command-line options."""
    parser.addoption(
        "--varint-samples",
        action="store",
        type=int,
        default=DEFAULT_SAMPLES,
        help="Number of random u64 values per property test",
    )
    parser.addoption(
        "--varint-seed",
        action="store",
        type=int,
        default=DEFAULT_SEED,
        help="Seed for the random u64 sample",
    )


@pytest.fixture(scope="session")
def sample_values(request):
    """
    Seeded random sample of the u64 domain.

    Values are drawn per bit width so that every encoded length is
    represented, not just the 10-byte forms a uniform draw would give.
    """
    count = request.config.getoption("--varint-samples")
    rng = random.Random(request.config.getoption("--varint-seed"))
    values = []
    for _ in range(count):
        bits = rng.randint(1, 64)
        values.append(rng.getrandbits(bits))
    return values
