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
The conftest.py file serves as a means of providing fixtures for an entire directory.
Fixtures defined in a conftest.py can be used by any test in that package without needing to
import them (pytest will automatically discover them).
"""

import pytest
from anagram import an_logging
from anagram.config import AnagramConfig


@pytest.fixture(autouse=True)
def silent_logging():
    # every test ends with logging, progress bars and the log file switched off
    yield
    an_logging.log_enable(False)
    an_logging.progress_enable(False)
    an_logging.log_file(False)


@pytest.fixture()
def saturate_config():
    # config selecting the saturating greatest-permutation policy
    return AnagramConfig(next_policy='saturate')
