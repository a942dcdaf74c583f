#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Play Wordle games by following a strategy tree.

Validators decide whether a guess is allowed, given the previous
guesses and their results. They have the signature
validator(guess, history) -> bool, where history is a list of
WordResult; get_validator() binds one to a dictionary.

- play(): number of guesses for one target word.
- play_history(): the full game for one target word.
- evaluate(): play all answers, return an Evaluation.
"""
from dataclasses import dataclass
from functools import partial
from multiprocessing import get_context
import sys
from time import time

import numpy as np
from threadpoolctl import threadpool_limits

from wresult import ALL_GREEN, GREEN, YELLOW, WSIZE, decode_result, result_to_str, score
from wstrategy import IllegalGuessError, PlayError


@dataclass(frozen=True)
class WordResult:
    """Guess and the result it got."""
    word: str
    result: int

    def __str__(self):
        return f'{self.word}:{result_to_str(self.result)}'


def valid_normal(guess, history, dictionary):
    """Normal mode: any approved word."""
    return guess in dictionary


def valid_hard(guess, history, dictionary):
    """Hard mode: approved word that is compatible with previous results.

    Green letters must be in the same place in the guess; yellow letters
    must appear somewhere in the guess. A guess letter can satisfy only one
    green or yellow letter of a previous result.
    """
    if guess not in dictionary:
        return False
    for wr in history:
        letters = decode_result(wr.result)
        used = [False] * WSIZE
        for i, lc in enumerate(letters):
            if lc == GREEN:
                if guess[i] != wr.word[i]:
                    return False
                used[i] = True
        for i, lc in enumerate(letters):
            if lc != YELLOW:
                continue
            for j in range(WSIZE):
                if not used[j] and guess[j] == wr.word[i]:
                    used[j] = True
                    break
            else:
                return False
    return True


_VALIDATORS = {
    'normal': valid_normal,
    'hard': valid_hard,
    }


def get_validator(mode, dictionary):
    """Return validator(guess, history) for mode 'normal' or 'hard'."""
    if mode not in _VALIDATORS:
        raise ValueError(f'mode={mode!r}')
    return partial(_VALIDATORS[mode], dictionary=dictionary)


def play_history(tree, target, validator):
    """Play one game; return list of WordResult, the last one ALL_GREEN.

    Raise IllegalGuessError or IncompleteStrategyError if the strategy
    fails for this target.
    """
    history = []
    node = tree
    while True:
        guess = node.guess()
        if not validator(guess, history):
            prev = ', '.join(str(wr) for wr in history)
            raise IllegalGuessError(
                f'bad guess {guess!r} when previous guesses are [{prev}]')
        r = score(target, guess)
        history.append(WordResult(guess, r))
        if r == ALL_GREEN:
            return history
        node = node.next_node(r)


def play(tree, target, validator):
    """Return number of guesses (1-based) for target."""
    return len(play_history(tree, target, validator))


@dataclass(frozen=True, eq=False)
class Evaluation:
    """Outcome of playing a strategy against all answers.

    - answers: tuple of answer words.
    - counts: int array, number of guesses per answer.
    """
    answers: tuple
    counts: np.ndarray

    @property
    def total(self):
        return int(self.counts.sum())

    @property
    def mean(self):
        return float(self.counts.mean())

    def histogram(self):
        """Return int array h; h[n] is the number of answers needing n guesses."""
        return np.bincount(self.counts)

    def worst(self, num=5):
        """Return list of (word, count) for the num answers with most guesses."""
        ii = np.argsort(-self.counts, kind='stable')[:num]
        return [(self.answers[i], int(self.counts[i])) for i in ii]


# Data for workers is stored here.
_WORKER_PERSISTENT = {}


def _play_1word(target):
    """Return number of guesses for target. For multiprocessing worker.

    Uses _WORKER_PERSISTENT keys 'tree' and 'validator'.
    """
    return play(_WORKER_PERSISTENT['tree'], target, _WORKER_PERSISTENT['validator'])


def _checked(target, get_count):
    try:
        return get_count()
    except PlayError as e:
        raise type(e)(f'bad play when guessing {target!r}: {e}') from e


def evaluate(tree, wsets, mode='normal', parallel=True, pri_time=2):
    """Play tree against all answers.

    Parameters:

    - tree: root StrategyNode.
    - wsets: WordSets.
    - mode: 'normal' or 'hard'.
    - parallel: True to use a process pool (Linux only, for many answers).
    - pri_time: show progress indicator if run time exceeds this.

    Return: Evaluation.

    The first failing answer stops the run (PlayError).
    """
    validator = get_validator(mode, wsets.dictionary)
    answers = wsets.answers
    na = len(answers)
    counts = []
    tm_start = tm_prev = tm = time()
    _WORKER_PERSISTENT['tree'] = tree
    _WORKER_PERSISTENT['validator'] = validator
    try:
        if parallel and sys.platform == 'linux' and na >= 100:
            # Workers inherit _WORKER_PERSISTENT by forking.
            with threadpool_limits(limits=1), get_context('fork').Pool() as pool:
                asyncs = [
                    pool.apply_async(_play_1word, (w,))
                    for w in answers
                    ]
                for i, (w, a) in enumerate(zip(answers, asyncs)):
                    counts.append(_checked(w, a.get))
                    tm = time()
                    if tm - tm_start > pri_time and (tm - tm_prev > 1 or i == na-1):
                        print(f'\rplay {i+1}/{na}...', end='')
                        tm_prev = tm
        else:
            for i, w in enumerate(answers):
                counts.append(_checked(w, partial(_play_1word, w)))
                tm = time()
                if tm - tm_prev > 1 and tm - tm_start > pri_time:
                    print(f'\rplay {i+1}/{na}...', end='')
                    tm_prev = tm
    finally:
        for k in ['tree', 'validator']:
            del _WORKER_PERSISTENT[k]

    if tm - tm_start > pri_time:
        print(f'Done ({tm - tm_start:.0f} s).')
    return Evaluation(tuple(answers), np.array(counts, dtype=int))
