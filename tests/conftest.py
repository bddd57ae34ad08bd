import sys
from pathlib import Path

import pytest

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).parent.parent))

from twap_from_file.core import PriceSet, TwapAccumulator, TwapEngine


SAMPLE_EVENTS = """\
1000 I 100 10.0
2000 I 101 13.0
2200 I 102 13.0
2400 E 101
2500 E 102
3000 E 100
"""


@pytest.fixture
def book():
    return PriceSet()


@pytest.fixture
def twap():
    return TwapAccumulator()


@pytest.fixture
def engine():
    return TwapEngine()


@pytest.fixture
def sample_file(tmp_path):
    """Small well-formed event file"""
    path = tmp_path / "orders.txt"
    path.write_text(SAMPLE_EVENTS)
    return path
