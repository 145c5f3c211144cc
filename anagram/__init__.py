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

"""
anagram: A collection of anagram utility functions.

- count: number of distinct permutations of a word
- occurrences: number of anagrams of a pattern inside a word
- is_anagram: whether two words are anagrams of each other
- get_next: next lexicographically greater permutation of a word

Example, enumerating all anagrams of a word::

    word = "abc"
    for _ in range(count(word)):
        word = get_next(word)
        print(word)
"""

__version__ = "0.3.0"

from anagram.config import NextPolicy, AnagramConfig, setup_logging
from anagram.permutation import factorial, count, count_many, get_next, iter_anagrams
from anagram.occurrence import occurrences, occurrence_positions
from anagram.equality import is_anagram, is_anagram_strict

__all__ = [
    "NextPolicy",
    "AnagramConfig",
    "setup_logging",
    "factorial",
    "count",
    "count_many",
    "get_next",
    "iter_anagrams",
    "occurrences",
    "occurrence_positions",
    "is_anagram",
    "is_anagram_strict",
]
