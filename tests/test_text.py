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

from anagram.text import check_word, code_units, characters, from_characters
from anagram import const
from numpy.testing import assert_array_equal
import numpy as np
import pytest


def test_code_units():
    assert_array_equal(code_units("ab"), [97, 98])
    assert_array_equal(code_units(b"\x00\xff"), [0, 255])
    assert_array_equal(code_units("é"), [0xc3, 0xa9])
    assert_array_equal(code_units("é", 'latin-1'), [0xe9])
    assert code_units("").dtype == np.uint8


def test_characters():
    assert characters("aé") == [97, 233]
    assert characters(b"ab") == [97, 98]
    assert from_characters([97, 233], "x") == "aé"
    assert from_characters([97, 98], b"x") == b"ab"
    assert from_characters([97], bytearray()) == bytearray(b"a")


def test_check_word():
    check_word("")
    check_word(b"")
    check_word(bytearray())
    with pytest.raises(TypeError, match="pattern"):
        check_word(1, 'pattern')


def test_const():
    assert const.CODE_UNITS == 256
    assert const.REFERENCE_COUNT_BITS == 128
    with pytest.raises(const.ConstError):
        const.CODE_UNITS = 512
