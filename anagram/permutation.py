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
Counting and generating permutations of the characters of a word.

Characters are ordered by their value: code points for str words and byte values for bytes
words. Neither locale aware collation nor unicode normalisation is applied.
"""
from collections import Counter
import numpy as np
from anagram import dtypes
from anagram import const
from anagram.an_logging import ProgressBar, log
from anagram.config import NextPolicy
from anagram.text import characters, check_word, from_characters

__all__ = ['NextPolicy', 'factorial', 'count', 'count_many', 'get_next', 'iter_anagrams']


def _resolve_bits(bits, config):
    if bits is None:
        bits = config.count_bits if config is not None else 0
    return bits


def factorial(n, bits=None):
    """
    Calculate n!.

    :param n: (int) non-negative number
    :param bits: (int) if given the product is reduced modulo 2**bits after each step, which
        is what a fixed width unsigned accumulator of that size does on overflow
    :return: (int) n!
    """
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers (%d)" % n)
    result = 1
    mask = (1 << bits) - 1 if bits else None
    for i in range(2, n + 1):
        result *= i
        if mask is not None:
            result &= mask
    return result


def _multinomial(length, multiplicities, bits):
    """n! / (k1! * k2! * ...) for the given character multiplicities, modulo 2**bits if set."""
    result = factorial(length)
    for m in multiplicities:
        if m > 1:
            result //= factorial(m)
    if bits:
        result &= (1 << bits) - 1
    return result


def count(word, bits=None, config=None):
    """
    Count the distinct permutations of the characters of a word.

    For a word of n characters this is n! divided by the factorial of the multiplicity of each
    distinct character. The empty word has exactly one permutation.

    Python integers do not overflow, so by default the result is exact for any length. To get
    the value a fixed width unsigned accumulator would hold pass ``bits`` (e.g. 128): the
    exact count is then reduced modulo 2**bits, which silently truncates counts of words longer
    than about 34 characters. Callers that need to detect this have to check the word length
    themselves.

    :param word: (str, bytes) the word
    :param bits: (int) result width; None takes config.count_bits, 0 means unbounded
    :param config: (AnagramConfig) optional source of count_bits
    :return: (int) number of distinct permutations
    """
    values = characters(word)
    multiplicities = Counter(values).values()
    return _multinomial(len(values), multiplicities, _resolve_bits(bits, config))


def count_many(words, bits=None, config=None):
    """
    Count the distinct permutations for an array of byte string words.

    :param words: (ndarray, bytes, ndim=1) fixed width byte strings; NUL bytes are treated as
        padding and ignored
    :param bits: (int) result width as for count
    :param config: (AnagramConfig) optional source of count_bits
    :return: (ndarray, object, ndim=1) number of permutations for each word
    """
    words = np.asarray(words)
    if words.dtype.kind != 'S':
        raise TypeError("count_many expects an array of byte strings, not %s" % words.dtype)
    if len(words) == 0:
        return np.array([], dtype=object)
    bits = _resolve_bits(bits, config)

    # Cast byte strings to uint8 array
    chars = words.view(dtypes.code_unit).reshape(len(words), -1)
    # histogram of the code units for each word
    histogram = np.zeros((len(words), const.CODE_UNITS), dtypes.bucket)
    rows = np.repeat(np.arange(len(words)), chars.shape[1])
    np.add.at(histogram, (rows, chars.ravel()), 1)
    # drop the padding
    histogram[:, 0] = 0
    lengths = histogram.sum(axis=1)

    result = np.empty(len(words), dtype=object)
    for i, row in enumerate(histogram):
        multiplicities = [int(m) for m in row[row > 0]]
        result[i] = _multinomial(int(lengths[i]), multiplicities, bits)
    return result


def _resolve_policy(policy, config):
    if policy is None:
        return config.policy if config is not None else NextPolicy.WRAP
    if isinstance(policy, NextPolicy):
        return policy
    return NextPolicy(policy)


def get_next(word, policy=None, config=None):
    """
    Get the next lexicographically greater permutation of a word.

    If the word already is the greatest permutation of its characters the result depends on
    the policy:
        NextPolicy.WRAP - the smallest permutation, e.g. "cba" -> "abc" (default)
        NextPolicy.SATURATE - the word itself, e.g. "cba" -> "cba"

    Examples (either policy):
        "abc" -> "acb"
        "218765" -> "251678"

    :param word: (str, bytes) the word; the result has the same type
    :param policy: (NextPolicy, str) policy for the greatest permutation; None takes the
        policy of config or NextPolicy.WRAP without config
    :param config: (AnagramConfig) optional source of the policy
    :return: (str, bytes) the next permutation
    """
    check_word(word)
    policy = _resolve_policy(policy, config)
    values = characters(word)
    if len(values) == 0:
        return word[:0]

    # find the pivot: the last position whose char is greater than the one before it
    i = len(values) - 1
    while i > 0 and values[i] <= values[i - 1]:
        i -= 1

    if i == 0:
        if policy is NextPolicy.WRAP:
            return from_characters(sorted(values), word)
        return from_characters(values, word)

    # smallest char right of the pivot that is still greater than values[i - 1]
    smallest = i
    for j in range(i + 1, len(values)):
        if values[i - 1] < values[j] < values[smallest]:
            smallest = j

    values[smallest], values[i - 1] = values[i - 1], values[smallest]
    values[i:] = sorted(values[i:])
    return from_characters(values, word)


def iter_anagrams(word, policy=None, progress=False, config=None):
    """
    Enumerate permutations of a word by repeatedly applying get_next.

    Yields count(word) words, the first being the successor of ``word``. Started from the
    ascending arrangement with the wrap policy, every distinct permutation is produced exactly
    once and the last one yielded is the starting word again.

    :param word: (str, bytes) the starting word
    :param policy: (NextPolicy, str) passed on to get_next
    :param progress: (bool) report the progress of the enumeration
    :param config: (AnagramConfig) optional source of the policy
    """
    policy = _resolve_policy(policy, config)
    total = count(word)
    bar = ProgressBar("enumerating %d anagrams of %r" % (total, word), total) if progress \
        else None
    for _ in range(total):
        word = get_next(word, policy)
        if bar is not None:
            bar.next()
        yield word
    if bar is not None:
        bar.finish()
    log("enumerated %d anagrams" % total)
