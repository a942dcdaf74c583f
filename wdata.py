#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Word lists: answers and approved guesses.

Word list files have one word per line; anything that isn't five
letters is skipped. Words are upper case, like in strategy tables.

Default files (under data/):

- wordle-en-a.txt: possible answers.
- wordle-en-b.txt: other approved guesses.
"""
import re
from dataclasses import dataclass
from pathlib import Path

WSIZE = 5

DATA_DIR = Path(__file__).resolve().parent / 'data'
ANSWERS_FILE = 'wordle-en-a.txt'
GUESSES_FILE = 'wordle-en-b.txt'


@dataclass(frozen=True)
class WordSets:
    """Immutable word lists for a run.

    - dictionary: frozenset of all approved guesses (including answers).
    - answers: tuple of answer words, in file order.
    """
    dictionary: frozenset
    answers: tuple

    @classmethod
    def from_lists(cls, answers, guesses=()):
        """Create from answer words and extra approved guesses (str sequences)."""
        answers = tuple(w.upper() for w in answers)
        dictionary = frozenset(answers).union(w.upper() for w in guesses)
        return cls(dictionary, answers)

    def __repr__(self):
        cn = self.__class__.__name__
        na, nd = len(self.answers), len(self.dictionary)
        return f'<{cn}: num_answers={na}, num_dictionary={nd}>'


def _load_wlist(fname, wlen=WSIZE):
    """Load word list (list of str, upper case) from file."""
    exp = re.compile(f'[a-zA-Z]{{{wlen}}}$')
    with open(fname) as f:
        wlist = [
            w.strip().upper()
            for w in f
            if exp.match(w.strip())
            ]
    return wlist


def load_wordsets(data_dir=None):
    """Load WordSets from the answers and guesses files in data_dir.

    The guesses file is optional; without it only answers are approved.
    """
    dpath = DATA_DIR if data_dir is None else Path(data_dir)
    answers = _load_wlist(dpath / ANSWERS_FILE)
    if not answers:
        raise ValueError(f'{dpath / ANSWERS_FILE}: no words')
    gpath = dpath / GUESSES_FILE
    guesses = _load_wlist(gpath) if gpath.is_file() else []
    return WordSets.from_lists(answers, guesses)
