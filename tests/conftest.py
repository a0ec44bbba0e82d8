import os
import pathlib
import sys

import pytest

# Ensure matplotlib uses a non-interactive backend for headless test runs.
os.environ.setdefault("MPLBACKEND", "Agg")

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(scope="session")
def keys_1024():
    from blockrsa.keys import generate_keys
    from blockrsa.random_source import SeededRandomSource

    return generate_keys(1024, SeededRandomSource(1024))


@pytest.fixture(scope="session")
def keys_512():
    from blockrsa.keys import generate_keys

    return generate_keys(512)
