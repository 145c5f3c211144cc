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
Constants shared by the anagram routines.

The module object is replaced by an instance of _Constants, so ``const.CODE_UNITS = 512``
raises ConstError instead of silently changing the table size for every caller.
"""
import sys


class ConstError(TypeError):
    """Attempt to rebind a constant."""


class _Constants:
    ConstError = ConstError

    VERSION = "0.3.0"

    # one counting bucket per 8-bit code unit
    CODE_UNITS = 256
    # width of the unsigned accumulator count results are compared against
    REFERENCE_COUNT_BITS = 128
    # encoding of str words when they are looked at as code units
    DEFAULT_ENCODING = "utf-8"

    # the replaced module would lose its __file__
    __file__ = __file__

    def __setattr__(self, name, value):
        raise ConstError("Can't rebind const(%s)" % name)


sys.modules[__name__] = _Constants()
