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

"""Brute force reference implementations used to check the anagram routines in tests."""
from collections import Counter
from itertools import permutations
from anagram.text import characters, code_units, from_characters


def distinct_permutations(word):
    """Return all distinct permutations of a word in ascending order."""
    values = characters(word)
    return [from_characters(p, word) for p in sorted(set(permutations(values)))]


def brute_force_occurrences(word, pattern, encoding='utf-8'):
    """Count windows of the word with the same code unit multiset as the pattern."""
    word_units = code_units(word, encoding).tolist()
    pattern_units = Counter(code_units(pattern, encoding).tolist())
    window = sum(pattern_units.values())
    return sum(1 for p in range(len(word_units) - window + 1)
               if Counter(word_units[p:p + window]) == pattern_units)
