import sys

import numpy as np
import pytest

from wdata import WordSets
from wplay import (
    WordResult, evaluate, get_validator, play, play_history, valid_hard,
    valid_normal,
    )
from wresult import ALL_GREEN, result_from_str
from wstrategy import (
    IllegalGuessError, IncompleteStrategyError, PlayError, StrategyNode,
    parse_strategy,
    )


def wr(word, res):
    return WordResult(word, result_from_str(res))


def test_valid_normal(wsets):
    d = wsets.dictionary
    assert valid_normal('SLATE', [wr('CRANE', 'GBBBB')], d)
    assert not valid_normal('XXXXX', [], d)


def test_valid_hard_green(wsets):
    d = wsets.dictionary
    history = [wr('CRANE', 'GBBBB')]
    assert valid_hard('COUNT', history, d)
    assert valid_hard('CLERK', history, d)
    assert not valid_hard('SLATE', history, d)
    assert not valid_hard('XXXXX', [], d)
    assert valid_hard('SLATE', [], d)


def test_valid_hard_yellow(wsets):
    d = wsets.dictionary
    history = [wr('CRANE', 'BBBYB')]
    assert valid_hard('COUNT', history, d)
    assert not valid_hard('SLATE', history, d)
    # Both constraints from one result must hold.
    history = [wr('CRANE', 'GBBYB')]
    assert valid_hard('COUNT', history, d)
    assert not valid_hard('CLERK', history, d)


def test_valid_hard_letter_used_once(wsets):
    d = wsets.dictionary
    # Green L at index 1 and yellow L at index 2: two L's needed.
    history = [wr('ALLOY', 'BGYBB')]
    assert valid_hard('ALLOY', history, d)
    assert not valid_hard('CLERK', history, d)


def test_valid_hard_multiple_results(wsets):
    d = wsets.dictionary
    history = [wr('CRANE', 'BBBBY'), wr('SLEEK', 'BBGBB')]
    assert valid_hard('STEEP', history, d)
    assert not valid_hard('ALLOY', history, d)


def test_get_validator(wsets):
    v = get_validator('hard', wsets.dictionary)
    assert v('COUNT', [wr('CRANE', 'GBBBB')])
    assert not v('SLATE', [wr('CRANE', 'GBBBB')])
    assert get_validator('normal', wsets.dictionary)('SLATE', [wr('CRANE', 'GBBBB')])
    with pytest.raises(ValueError):
        get_validator('easy', wsets.dictionary)


@pytest.mark.parametrize('mode', ['normal', 'hard'])
def test_play(tree, wsets, mode):
    v = get_validator(mode, wsets.dictionary)
    assert play(tree, 'CRANE', v) == 1
    assert play(tree, 'SLATE', v) == 2
    assert play(tree, 'COUNT', v) == 2
    assert play_history(tree, 'SLATE', v) == [
        wr('CRANE', 'BBGBG'), WordResult('SLATE', ALL_GREEN),
        ]


def test_play_minimal(wsets):
    root = parse_strategy('CRANE GGGGG', wsets.dictionary)
    v = get_validator('normal', wsets.dictionary)
    assert play(root, 'CRANE', v) == 1
    with pytest.raises(IncompleteStrategyError):
        play(root, 'SLATE', v)


def test_play_deterministic(tree, wsets):
    v = get_validator('hard', wsets.dictionary)
    h1 = play_history(tree, 'COUNT', v)
    h2 = play_history(tree, 'COUNT', v)
    assert h1 == h2
    assert len(h1) == play(tree, 'COUNT', v)


def test_play_errors(wsets):
    # COUNT after CRANE/BBGBG ignores the green A and E.
    root = parse_strategy('CRANE BBGBG1 COUNT GGGGG2', wsets.dictionary)
    with pytest.raises(IllegalGuessError, match='COUNT'):
        play(root, 'SLATE', get_validator('hard', wsets.dictionary))
    # Allowed in normal mode, but then COUNT gets BBBBY.
    with pytest.raises(IncompleteStrategyError, match='BBBBY'):
        play(root, 'SLATE', get_validator('normal', wsets.dictionary))
    root = StrategyNode('ZZZZZ', {ALL_GREEN: None})
    with pytest.raises(IllegalGuessError, match='ZZZZZ'):
        play(root, 'ZZZZZ', get_validator('normal', wsets.dictionary))


def test_evaluate(tree, wsets):
    ev = evaluate(tree, wsets, 'hard', parallel=False)
    assert ev.answers == ('CRANE', 'SLATE', 'COUNT')
    assert list(ev.counts) == [1, 2, 2]
    assert ev.total == 5
    assert ev.mean == pytest.approx(5/3)
    assert list(ev.histogram()) == [0, 1, 2]
    assert ev.worst(2) == [('SLATE', 2), ('COUNT', 2)]


def test_evaluate_fails_fast(tree, wsets):
    wsets2 = WordSets.from_lists(['CRANE', 'ALLOY', 'SLATE'], wsets.dictionary)
    with pytest.raises(IncompleteStrategyError, match='ALLOY'):
        evaluate(tree, wsets2, 'normal', parallel=False)


@pytest.mark.skipif(sys.platform != 'linux', reason='process pool only on Linux')
def test_evaluate_parallel(tree, wsets):
    wsets2 = WordSets.from_lists(list(wsets.answers) * 40, wsets.dictionary)
    ev_par = evaluate(tree, wsets2, 'normal', parallel=True)
    ev_ser = evaluate(tree, wsets2, 'normal', parallel=False)
    assert np.array_equal(ev_par.counts, ev_ser.counts)
    assert ev_par.total == 200

    wsets3 = WordSets.from_lists(list(wsets.answers) * 40 + ['ALLOY'], wsets.dictionary)
    with pytest.raises(PlayError, match='ALLOY'):
        evaluate(tree, wsets3, 'normal', parallel=True)
