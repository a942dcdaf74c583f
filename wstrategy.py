#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Wordle strategy trees, as read from Selby-style strategy tables.

A strategy table has one decision path per line, in fixed-width columns
that alternate guess word (width 5) and result (width 6: the result
string plus an optional guess-count digit). Column i starts at offset
13*(i//2) + 6*(i%2). Example::

    SALET BBBBB1 COURD BBBBB2 NYMPH GGGGG3
                       BBBBG2 ...
          GGGGG1

Rows may leave the leading columns empty; the node on an empty column is
then the one from the closest row above it. Each row ends with GGGGG.

Functions:

- parse_strategy(): build a StrategyNode tree from table lines.
- load_strategy(): same, from a file.
- format_strategy(): tree back to table text.
"""
from wresult import ALL_GREEN, MAX_RESULT, FormatError, result_from_str, result_to_str


class PlayError(Exception):
    """Strategy failed while playing a game."""


class IllegalGuessError(PlayError):
    """Strategy proposed a guess that is not allowed."""


class IncompleteStrategyError(PlayError):
    """Strategy has no next guess for a result."""


class StrategyNode:
    """Node in a strategy tree.

    Attributes:

    - word: guess word for this node.
    - children: dict result (int) -> StrategyNode; value None for the
      ALL_GREEN terminal.
    """
    __slots__ = ('word', 'children')

    def __init__(self, word, children=None):
        self.word = word
        self.children = {} if children is None else children

    def __repr__(self):
        cn = self.__class__.__name__
        return f'<{cn}: {self.word!r}, num_children={len(self.children)}>'

    def __eq__(self, other):
        if not isinstance(other, StrategyNode):
            return NotImplemented
        return self.word == other.word and self.children == other.children

    __hash__ = None

    def guess(self):
        return self.word

    def next_node(self, r):
        """Return child node for result r; raise IncompleteStrategyError if none."""
        try:
            return self.children[r]
        except KeyError:
            raise IncompleteStrategyError(
                f'result {result_to_str(r)} invalid after {self.word!r}'
                ) from None

    def iter_results(self):
        """Yield (result, child) in result order."""
        for r in range(MAX_RESULT + 1):
            if r in self.children:
                yield r, self.children[r]

    def num_leaves(self):
        """Return number of ALL_GREEN terminals in this subtree."""
        return sum(
            1 if c is None else c.num_leaves()
            for c in self.children.values()
            )

    def depth(self):
        """Return maximum number of guesses along a path from this node."""
        return 1 + max(
            (c.depth() for c in self.children.values() if c is not None),
            default=0
            )


def _colpos(i):
    return 13*(i//2) + 6*(i%2)


def _collen(i):
    return 5 + (i%2)


def _split_columns(line):
    """Return list of stripped column strings."""
    cols = []
    i = 0
    while _colpos(i) < len(line):
        cols.append(line[_colpos(i):_colpos(i) + _collen(i)].strip())
        i += 1
    return cols


def _add_child(parent, r, child, lineno, line):
    if r in parent.children:
        if r == ALL_GREEN and child is None:
            msg = f'found duplicate GGGGG for {parent.word!r}'
        else:
            msg = f'found duplicate results {result_to_str(r)} for {parent.word!r}'
        raise FormatError(msg, lineno, line)
    parent.children[r] = child


def parse_strategy(lines, dictionary):
    """Parse strategy table; return root StrategyNode.

    Parameters:

    - lines: iterable of str (e.g. open file) or a single str with newlines.
    - dictionary: set of approved guess words.

    Raise FormatError on the first problem.
    """
    if isinstance(lines, str):
        lines = lines.splitlines()
    stack = []  # stack[d]: most recent node at depth d
    for lno, line in enumerate(lines, start=1):
        line = line.rstrip()
        if line == '':
            continue
        cols = _split_columns(line)
        try:
            r_last = result_from_str(cols[-1])
        except FormatError:
            r_last = None
        if len(cols) % 2 != 0 or r_last != ALL_GREEN:
            raise FormatError(f'line {line!r} does not end with GGGGG', lno, line)

        for i in range(0, len(cols), 2):
            word = cols[i]
            if word == '':
                if i > 0 and cols[i-1] != '':
                    raise FormatError(
                        f'found result but no word at col {i} in {line!r}', lno, line)
                continue
            if word not in dictionary:
                raise FormatError(
                    f'strategy guesses {word!r} which is not an approved word',
                    lno, line)
            if i == 0:
                if stack:
                    raise FormatError(
                        f'found two initial guesses (second on line {line!r})',
                        lno, line)
                stack.append(StrategyNode(word))
                continue
            try:
                r = result_from_str(cols[i-1])
            except FormatError:
                raise FormatError(
                    f'no valid result found for word {word!r} on line {line!r}',
                    lno, line) from None
            depth = i//2
            if depth > len(stack):
                raise FormatError(
                    f'found no parent for word {word!r} on line {line!r}', lno, line)
            del stack[depth:]
            node = StrategyNode(word)
            _add_child(stack[-1], r, node, lno, line)
            stack.append(node)

        depth = len(cols)//2 - 1
        if not stack:
            raise FormatError(f'no initial guess on line {line!r}', lno, line)
        if depth >= len(stack):
            raise FormatError(f'found no parent for GGGGG on line {line!r}', lno, line)
        _add_child(stack[depth], ALL_GREEN, None, lno, line)

    if not stack:
        raise FormatError('file empty?')
    return stack[0]


def load_strategy(fname, dictionary):
    """Load strategy table file; return root StrategyNode."""
    with open(fname) as f:
        return parse_strategy(f, dictionary)


def _format(node, out, indent):
    """Append table text for node to list out; node word starts at indent."""
    out.append(node.word)
    out.append(' ')
    first = True
    for r, child in node.iter_results():
        if not first:
            out.append('\n')
            out.append(' ' * (indent + 6))
        first = False
        out.append(result_to_str(r))
        out.append('123456789'[indent//13])
        if child is not None:
            out.append(' ')
            _format(child, out, indent + 13)


def format_strategy(node):
    """Return strategy table text for tree (without trailing newline)."""
    out = []
    _format(node, out, 0)
    return ''.join(out)
