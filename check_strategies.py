#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Check Wordle strategy tables against all answers.

Usage:

    python3 check_strategies.py [-d DATA_DIR] [-v] [-a] [strategy ...]

Strategies are predefined names, e.g. 'normal', 'hard'; leave out to check
all of them. Strategy tables and word lists are read from DATA_DIR
(default: the data directory next to this script).

Options:

  -d DATA_DIR  directory with word lists and strategy tables.
  -v           also show guess-count histogram and worst answers.
  -a           show answers that are hard to tell apart; no strategy checks.
"""
import sys
from pathlib import Path

from wanalysis import result_sets, similar_answers, worst_answer
from wdata import DATA_DIR, load_wordsets
from wplay import evaluate
from wstrategy import PlayError, load_strategy

# Strategy name -> (table file, validator mode, description)
STRATEGIES = {
    'normal': ('strategy_normal.txt', 'normal', 'normal'),
    'hard': ('strategy_hard.txt', 'hard', 'hard'),
    'hard5': ('strategy_hard5.txt', 'hard', 'hard(max5)'),
}


def get_strategies():
    """Return list of supported strategy names."""
    return list(STRATEGIES)


def check_strategies(names, wsets, data_dir=None, verbose=False):
    """Load and evaluate strategies; print one summary line per strategy.

    Parameters:

    - names: strategy names (keys of STRATEGIES).
    - wsets: WordSets.
    - data_dir: directory with the strategy tables; default DATA_DIR.
    - verbose: True to print histogram and worst answers.

    Return:

    - dict name -> Evaluation.

    Stops at the first FormatError or PlayError.
    """
    dpath = DATA_DIR if data_dir is None else Path(data_dir)
    evals = {}
    for name in names:
        fname, mode, desc = STRATEGIES[name]
        tree = load_strategy(dpath / fname, wsets.dictionary)
        ev = evaluate(tree, wsets, mode)
        print(f'{desc + ":":<11s} sum={ev.total} mean={ev.mean:.4f}')
        if verbose:
            hist = ', '.join(
                f'{n}:{h}' for n, h in enumerate(ev.histogram()) if h > 0
                )
            worst = ', '.join(f'{w} ({n})' for w, n in ev.worst())
            print(f'  guesses {hist}\n  worst: {worst}')
        evals[name] = ev
    return evals


def show_analysis(wsets):
    """Print answer with fewest results and most similar answer pairs."""
    got = result_sets(wsets)
    w, n = worst_answer(wsets, got=got)
    print(f'worst: {w} {n}')
    for w1, w2, ni, nu in similar_answers(wsets, got=got):
        print(f'{w1} {w2} {ni}/{nu}')


def parse_args(argv):
    """Return (names, data_dir, verbose, analysis); exit on bad arguments."""
    names = []
    data_dir = None
    verbose = analysis = False
    args = list(argv)
    while args:
        a = args.pop(0)
        if a == '-d' and args:
            data_dir = args.pop(0)
        elif a == '-v':
            verbose = True
        elif a == '-a':
            analysis = True
        elif a in STRATEGIES:
            names.append(a)
        else:
            if not a.startswith('-'):
                print(f'Unsupported strategy: {a}')
            print(__doc__)
            sys.exit(1)
    return names or get_strategies(), data_dir, verbose, analysis


def main(argv=None):
    names, data_dir, verbose, analysis = parse_args(
        sys.argv[1:] if argv is None else argv)
    try:
        wsets = load_wordsets(data_dir)
        if analysis:
            show_analysis(wsets)
        else:
            check_strategies(names, wsets, data_dir, verbose=verbose)
    except (OSError, ValueError, PlayError) as e:
        print(f'Error: {e}')
        sys.exit(1)


if __name__ == '__main__':
    main()
