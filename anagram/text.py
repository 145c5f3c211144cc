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
Conversion of words into the units the anagram routines operate on.

A word is either a ``str`` or a bytes-like object. Two views exist:

- code units: the 8-bit units of the encoded word, used by the occurrence counter
- characters: code points of a ``str`` or the byte values of a bytes word
"""
import numpy as np
from anagram import const
from anagram import dtypes


def check_word(word, name='word'):
    """
    Make sure the given value can be treated as a word.

    :param word: (mixed) value to check
    :param name: (str) name of the argument used in the error message
    """
    if not isinstance(word, (str, bytes, bytearray)):
        raise TypeError("%s must be str or bytes, not %s" % (name, type(word).__name__))


def code_units(word, encoding=None):
    """
    Return the 8-bit code units of a word.

    :param word: (str, bytes) the word
    :param encoding: (str) encoding used for str words; defaults to const.DEFAULT_ENCODING
    :return: (ndarray, uint8, ndim=1) code units
    """
    check_word(word)
    if isinstance(word, str):
        word = word.encode(encoding or const.DEFAULT_ENCODING)
    return np.frombuffer(bytes(word), dtype=dtypes.code_unit)


def characters(word):
    """
    Return the character values of a word as a list of ints.

    For str these are code points, for bytes the byte values.
    """
    check_word(word)
    if isinstance(word, str):
        return [ord(c) for c in word]
    return list(word)


def from_characters(values, like):
    """
    Build a word of the same type as ``like`` from character values.

    :param values: (iterable of int) character values
    :param like: (str, bytes) word that defines the result type
    """
    if isinstance(like, str):
        return "".join(chr(v) for v in values)
    return type(like)(values)


def check_same_kind(left, right):
    """
    Make sure two words are both str or both bytes-like.

    Character values of str (code points) and bytes (byte values) are not comparable.
    """
    check_word(left, 'left')
    check_word(right, 'right')
    if isinstance(left, str) != isinstance(right, str):
        raise TypeError("can not compare str with bytes: %s and %s" % (
            type(left).__name__, type(right).__name__))
