import pytest

from wdata import WordSets
from wstrategy import parse_strategy

ANSWERS = ['CRANE', 'SLATE', 'COUNT']
GUESSES = ['ALLOY', 'LOLLY', 'CLERK', 'STEEP', 'SLEEK']

# CRANE, then SLATE or COUNT.
TABLE = (
    'CRANE BBGBG1 SLATE GGGGG2\n'
    '      GBBGB1 COUNT GGGGG2\n'
    '      GGGGG1'
    )


@pytest.fixture
def wsets():
    return WordSets.from_lists(ANSWERS, GUESSES)


@pytest.fixture
def table():
    return TABLE


@pytest.fixture
def tree(wsets):
    return parse_strategy(TABLE, wsets.dictionary)
