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

"""Module that handles output (log messages and progress bars)."""
from time import time
from progress.bar import Bar
import os
from pathlib import Path


_log_enabled = False
_progress_enabled = False
_start_time = time()
# open handle of the log file or None if no file is written
_log_out = None


def log_timestamp_reset():
    """Reset the log time to the current time."""
    global _start_time
    _start_time = time()


def log_enable(setting):
    """Enable or disable logging to stdout."""
    global _log_enabled
    _log_enabled = bool(setting)


def progress_enable(setting):
    """Enable or disable displaying progress bars."""
    global _progress_enabled
    _progress_enabled = bool(setting)


def log_file(file):
    """
    Define that the log should be writen out to a file.

    :param file - (str,False) if a string then it defines the output path; if False disables writing
    """
    global _log_out

    if isinstance(file, str):
        _close_log_file()
        parent_folder = os.path.dirname(file)
        if parent_folder:
            Path(parent_folder).mkdir(parents=True, exist_ok=True)
        _log_out = open(file, "a")
    elif isinstance(file, bool) and not file:
        _close_log_file()
    else:
        raise ValueError("log_file only accepts a file path or False as parameter")


def _close_log_file():
    global _log_out
    if _log_out is not None:
        _log_out.close()
        _log_out = None


def _write_file(line):
    _log_out.write(line)
    _log_out.write("\n")
    _log_out.flush()


def _timed(message):
    return "%.3f: %s" % (time() - _start_time, message)


def log(message):
    """Log a message."""
    if not (_log_enabled or _log_out is not None):
        return
    timedmessage = _timed(message)
    if _log_enabled:
        print(timedmessage)
    if _log_out is not None:
        _write_file(timedmessage)


class ProgressBar(object):
    """Bar to visualize the progression of a longer enumeration."""

    def __init__(self, message, total):
        """
        Initialise the ProgressBar with a message and a total number.

        Without progress bars enabled only the message gets logged.
        """
        self.message = message
        self.total = total
        self.count = 0
        self.bar = None
        if _progress_enabled and total > 1:
            self.bar = Bar(_timed(message), max=total, suffix='%(index)d/%(max)d')
            if _log_out is not None:
                _write_file(_timed(message))
        else:
            log(message)

    def next(self, add_to_count=1):
        """Progress the bar."""
        self.count += add_to_count
        if self.bar is not None:
            self.bar.goto(min(self.count, self.total))

    def finish(self):
        """Finish the ProgressBar."""
        if self.bar is not None:
            self.bar.goto(self.total)
            self.bar.finish()
        if _log_out is not None:
            _write_file(_timed("%s finished" % self.message))
