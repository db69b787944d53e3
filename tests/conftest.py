from pathlib import Path

import pytest

from demondeduce.core.model import Counts
from demondeduce.core.observations import Card, validate_request

DATA = Path(__file__).parent / "data"


def make_request(deck, counts, cards=None):
    if cards is None:
        cards = [Card()] * Counts(*counts).total
    request, _ = validate_request(deck, Counts(*counts), cards)
    return request


@pytest.fixture
def data_dir():
    return DATA
