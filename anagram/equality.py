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

"""Testing whether two words are anagrams of each other."""
from collections import Counter
from anagram.text import characters, check_same_kind


def is_anagram(left, right):
    """
    Check if a word is an anagram of another word.

    Words of different length are never anagrams. For words of the same length the sums of the
    character values are compared. This is a fast checksum, not an exact test: different
    characters with the same total value collide, e.g. "ac" and "bb" are reported as anagrams.
    Use is_anagram_strict when that matters. Mixing str and bytes raises a TypeError.

    :param left: (str, bytes) first word
    :param right: (str, bytes) second word
    :return: (bool) True if both words have the same length and character value sum
    """
    check_same_kind(left, right)
    if len(left) != len(right):
        return False
    return sum(characters(left)) - sum(characters(right)) == 0


def is_anagram_strict(left, right):
    """Check if two words consist of exactly the same multiset of characters."""
    check_same_kind(left, right)
    return Counter(characters(left)) == Counter(characters(right))
