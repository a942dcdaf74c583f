#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Wordle results: scoring a guess against a target, and result codes.

A result is an int 0..242: five base-3 digits, first letter most
significant. Digits: 0=black, 1=green, 2=yellow. String form uses
'B', 'G', 'Y', e.g. 'GBBYB'.
"""
import numpy as np

WSIZE = 5

BLACK = 0
GREEN = 1
YELLOW = 2

ALL_GREEN = 121
MAX_RESULT = 242

_LETTERS = 'BGY'  # indexed by digit

# Weights of the 5 digits, for int-array operations.
_WEIGHTS = 3**np.arange(WSIZE - 1, -1, -1)


class FormatError(ValueError):
    """Malformed result string or strategy table.

    Attributes lineno and line are set for errors from a table.
    """
    def __init__(self, msg, lineno=None, line=None):
        if lineno is not None:
            msg = f'line {lineno}: {msg}'
        super().__init__(msg)
        self.lineno = lineno
        self.line = line


def encode_result(letters):
    """Return result int for a sequence of 5 digits (BLACK/GREEN/YELLOW)."""
    r = 0
    for let in letters:
        r = r*3 + let
    return r


def decode_result(r):
    """Return list of 5 digits for result int r."""
    if not 0 <= r <= MAX_RESULT:
        raise ValueError(f'result {r} out of range 0..{MAX_RESULT}')
    letters = [BLACK] * WSIZE
    for i in range(WSIZE-1, -1, -1):
        r, letters[i] = divmod(r, 3)
    return letters


def result_from_str(s):
    """Parse result string like 'BGYBB' or 'BGYBB3' (trailing count ignored)."""
    if len(s) == WSIZE + 1 and '1' <= s[-1] <= '9':
        # Guess-count annotation, as in tables written by format_strategy.
        s = s[:-1]
    if len(s) != WSIZE:
        raise FormatError(f'result string {s!r} must be of the form [GBY]^5')
    r = 0
    for i, c in enumerate(s):
        digit = _LETTERS.find(c)
        if digit < 0:
            raise FormatError(
                f'error in result string {s!r} at index {i}: illegal char {c!r}'
                )
        r = r*3 + digit
    return r


def result_to_str(r):
    """Return string like 'BGYBB' for result int."""
    return ''.join(_LETTERS[d] for d in decode_result(r))


def score(target, guess):
    """Return result int for guess against target (both 5-letter str).

    Greens are matched first; then each remaining guess letter takes the
    leftmost unused occurrence in the target as yellow.
    """
    res = [BLACK] * WSIZE
    used = [False] * WSIZE
    for i in range(WSIZE):
        if target[i] == guess[i]:
            res[i] = GREEN
            used[i] = True
    for i in range(WSIZE):
        if res[i] != BLACK:
            continue
        for j in range(WSIZE):
            if not used[j] and target[j] == guess[i]:
                res[i] = YELLOW
                used[j] = True
                break
    return encode_result(res)


def str2iarr(words):
    """Convert word (str) list to int16 array of shape (n, 5).

    Single str becomes 1D array.
    """
    if isinstance(words, str):
        return_1d = True
        words = np.array([words])
    else:
        return_1d = False
        words = np.array(list(words))

    assert words.dtype.kind == 'U'
    wsize = words.dtype.itemsize // 4
    a = words.view(np.uint32).astype(np.int16)
    a = a.reshape(-1, wsize)
    if return_1d:
        a = a[0, :]
    return a


def iarr2str(warr):
    """Convert int array to string or string array.

    If shape is (n, m): return array (n,) of str.
    If shape is (m,): return str.
    """
    wsize = warr.shape[-1]
    sarr = np.ascontiguousarray(warr, dtype=np.int32)
    sarr = sarr.view(f'<U{wsize}')
    if warr.ndim == 1:
        return str(sarr[0])
    return sarr.reshape(-1)


def score_all(target, warr):
    """Score many guesses against one target.

    Parameters:

    - target: target word (str or int array (5,)).
    - warr: guess words, int array (n, 5) or list of str.

    Return:

    - uint8 array (n,) of result codes; same as score() per word.
    """
    if isinstance(target, str):
        target = str2iarr(target)
    if not isinstance(warr, np.ndarray):
        warr = str2iarr(warr)
    green = warr == target  # (n, 5)
    digits = np.where(green, GREEN, BLACK)
    # Per guess word, which target positions are still available.
    avail = ~green
    for i in range(WSIZE):
        pending = ~green[:, i]
        for j in range(WSIZE):
            hit = pending & avail[:, j] & (warr[:, i] == target[j])
            digits[hit, i] = YELLOW
            avail[hit, j] = False
            pending &= ~hit
    return (digits @ _WEIGHTS).astype(np.uint8)


def score_matrix(targets, guesses):
    """Return uint8 array (n_targets, n_guesses) of result codes."""
    if not isinstance(guesses, np.ndarray):
        guesses = str2iarr(guesses)
    if not isinstance(targets, np.ndarray):
        targets = str2iarr(targets)
    out = np.zeros((len(targets), len(guesses)), dtype=np.uint8)
    for k, tw in enumerate(targets):
        out[k, :] = score_all(tw, guesses)
    return out
