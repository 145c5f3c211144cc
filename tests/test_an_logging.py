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

from anagram.an_logging import log_enable, log, log_file, log_timestamp_reset, \
    progress_enable, ProgressBar
import os
import re
import time
import pytest


def test_logging(tmpdir, capsys):
    """
    Test that logging to stdout and file can be enabled and disabled - and that output
    arrives.
    """
    out_file = os.path.join(str(tmpdir), "logs", "anagram_log_test.txt")

    # log_file should only accept a file path or False as parameter
    with pytest.raises(ValueError):
        log_file(123)
    with pytest.raises(ValueError):
        log_file(True)

    log_file(out_file)
    # parent folder and file were created
    assert os.path.exists(out_file)
    # enable logging to stdout
    log_enable(True)
    log("test both")
    captured = capsys.readouterr()
    assert re.search(r"[0-9.]*:\s*test both\n", captured.out) is not None
    # only log to file now
    log_enable(False)
    log("test file only")
    captured = capsys.readouterr()
    assert re.search(r"test file only", captured.out) is None

    log_enable(True)
    log_file(False)
    log("test out only")
    captured = capsys.readouterr()
    assert re.search(r"[0-9.]*:\s*test out only\n", captured.out) is not None

    log_timestamp_reset()
    time.sleep(1)
    log("test timestamp 1 second")
    captured = capsys.readouterr()
    assert re.search(r"1\.[0-9]*:\s*test timestamp 1 second\n", captured.out) is not None

    # and that we can reset the time
    log_timestamp_reset()
    log("test timestamp 0")
    captured = capsys.readouterr()
    assert re.search(r"0\.[0-9]*:\s*test timestamp 0\n", captured.out) is not None

    # switching the file closes the old one
    out_file2 = os.path.join(str(tmpdir), "anagram_log_test2.txt")
    log_file(out_file)
    log("final")
    log_file(out_file2)
    log("new file")
    log_file(False)

    with open(out_file) as f:
        read_data = f.read()
        assert re.search(r"[0-9.]*:\s*test file only\n", read_data) is not None
        assert re.search(r"[0-9.]*:\s*test both\n", read_data) is not None
        assert re.search("final", read_data) is not None
        assert re.search(r"test out only", read_data) is None
        assert re.search(r"timestamp", read_data) is None
        assert re.search(r"new file", read_data) is None

    with open(out_file2) as f:
        read_data = f.read()
        assert re.search(r"[0-9.]*:\s*new file\n", read_data) is not None


def test_silent_by_default(capsys):
    log("nobody hears this")
    bar = ProgressBar("quiet", 10)
    bar.next()
    bar.finish()
    captured = capsys.readouterr()
    assert captured.out == ""


def test_progress_bar_without_progress_logs_message(capsys):
    log_enable(True)
    bar = ProgressBar("counting", 3)
    for _ in range(3):
        bar.next()
    bar.finish()
    captured = capsys.readouterr()
    assert re.search(r"[0-9.]*:\s*counting\n", captured.out) is not None
    assert bar.count == 3


def test_progress_bar(tmpdir):
    out_file = os.path.join(str(tmpdir), "progress.txt")
    log_file(out_file)
    progress_enable(True)
    bar = ProgressBar("working", 4)
    assert bar.bar is not None
    for _ in range(4):
        bar.next()
    bar.finish()
    log_file(False)

    with open(out_file) as f:
        read_data = f.read()
        assert re.search(r"[0-9.]*:\s*working\n", read_data) is not None
        assert re.search(r"[0-9.]*:\s*working finished\n", read_data) is not None
