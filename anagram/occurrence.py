# Copyright (C) 2025  Technische Universitaet Berlin
#
# This library is free software; you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public
# License as published by the Free Software Foundation; either
# version 3 of the License, or (at your option) any later version.
#
# This library is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this library; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301
# USA

"""Counting anagrams of a pattern inside a word."""
import numpy as np
from anagram import const
from anagram import dtypes
from anagram.text import check_word, code_units


def _shift(table, unit, delta):
    """Add delta to a bucket and return the change in the number of non-zero buckets."""
    before = table[unit]
    after = before + delta
    table[unit] = after
    return int(before == 0) - int(after == 0)


def occurrence_positions(word, pattern, encoding=None, config=None):
    """
    Find the start of every window of a word that is an anagram of the pattern.

    A window of len(pattern) code units slides over the word. A table with one signed bucket
    per 8-bit code unit holds the count of each unit in the window minus its count in the
    pattern; the window is an anagram of the pattern iff all buckets are zero. Multi-byte
    characters of str words are treated as independent code units.

    :param word: (str, bytes) the word to search in
    :param pattern: (str, bytes) the pattern whose anagrams are counted
    :param encoding: (str) encoding for str arguments; None takes config.encoding or utf-8
    :param config: (AnagramConfig) optional source of the encoding
    :return: (ndarray, intp, ndim=1) start offsets (in code units) of the matching windows
    """
    check_word(word)
    check_word(pattern, 'pattern')
    if encoding is None:
        encoding = config.encoding if config is not None else const.DEFAULT_ENCODING
    word_units = code_units(word, encoding)
    pattern_units = code_units(pattern, encoding)
    window = len(pattern_units)
    if window > len(word_units):
        return np.array([], dtype=dtypes.position)

    table = np.zeros(const.CODE_UNITS, dtype=dtypes.bucket)
    np.add.at(table, word_units[:window], 1)
    np.subtract.at(table, pattern_units, 1)
    # number of buckets that are not zero
    mismatched = np.count_nonzero(table)

    positions = []
    if mismatched == 0:
        positions.append(0)
    for i in range(window, len(word_units)):
        mismatched += _shift(table, word_units[i], 1)
        mismatched += _shift(table, word_units[i - window], -1)
        if mismatched == 0:
            positions.append(i - window + 1)
    return np.array(positions, dtype=dtypes.position)


def occurrences(word, pattern, encoding=None, config=None):
    """
    Count the windows of a word that are an anagram of the pattern.

    An empty pattern matches at every position including the one before the first character,
    so the result is the number of code units plus one. A pattern longer than the word never
    matches.

    :param word: (str, bytes) the word to search in
    :param pattern: (str, bytes) the pattern whose anagrams are counted
    :param encoding: (str) encoding for str arguments; None takes config.encoding or utf-8
    :param config: (AnagramConfig) optional source of the encoding
    :return: (int) number of matching windows
    """
    return len(occurrence_positions(word, pattern, encoding, config))
