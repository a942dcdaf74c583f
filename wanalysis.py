#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Analysis of answers by the results they can produce.

For each answer, the 'result set' is the set of results that any approved
guess can get against it. Answers with similar result sets are hard
to tell apart.
"""
import numpy as np

from wresult import MAX_RESULT, result_from_str, score_matrix


def result_sets(wsets):
    """Return bool array (n_answers, 243); True where the answer can give that result."""
    guesses = sorted(wsets.dictionary)
    mat = score_matrix(wsets.answers, guesses)
    got = np.zeros((len(wsets.answers), MAX_RESULT + 1), dtype=bool)
    got[np.arange(len(mat)).reshape(-1, 1), mat] = True
    return got


def worst_answer(wsets, got=None):
    """Return (word, num_results) for the answer with the fewest distinct results."""
    if got is None:
        got = result_sets(wsets)
    counts = got.sum(axis=1)
    i = int(np.argmin(counts))
    return wsets.answers[i], int(counts[i])


def similar_answers(wsets, num=10, got=None):
    """Return most similar answer pairs.

    Similarity is the Jaccard index of the result sets.

    Return:

    - list of (word1, word2, n_intersection, n_union), most similar first.
    """
    if got is None:
        got = result_sets(wsets)
    g = got.astype(np.int32)
    inter = g @ g.T
    counts = g.sum(axis=1)
    union = counts.reshape(-1, 1) + counts.reshape(1, -1) - inter
    ii, jj = np.triu_indices(len(g), k=1)
    sim = inter[ii, jj] / union[ii, jj]
    order = np.argsort(-sim, kind='stable')[:num]
    return [
        (wsets.answers[ii[k]], wsets.answers[jj[k]],
         int(inter[ii[k], jj[k]]), int(union[ii[k], jj[k]]))
        for k in order
        ]


def find_answers(wants, wsets, got=None):
    """Return answers that can produce all results in wants.

    Parameters:

    - wants: sequence of results, as int or str (e.g. 'GGBBY').
    - wsets: WordSets.
    - got: optional precomputed result_sets().
    """
    wants = [result_from_str(w) if isinstance(w, str) else w for w in wants]
    if got is None:
        got = result_sets(wsets)
    mask = got[:, wants].all(axis=1)
    return [w for w, m in zip(wsets.answers, mask) if m]
