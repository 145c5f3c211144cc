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
Settings for the anagram routines.

An AnagramConfig is never consulted implicitly: the counting and permutation functions only use
one when it is handed to them as ``config=``. The only process wide state it can change are the
logging and progress switches, via setup_logging.
"""
import json
import yaml
from enum import Enum
from memoized_property import memoized_property
from anagram import an_logging


class NextPolicy(Enum):
    """
    What get_next returns for a word that already is its greatest permutation.

    WRAP returns the smallest permutation (all characters ascending), SATURATE returns the
    word unchanged.
    """

    WRAP = 'wrap'
    SATURATE = 'saturate'


class Setting:
    """A typed setting with a default and optionally a set of accepted values."""

    def __init__(self, type, default, valid_values=None):
        self.type = type
        self.valid_values = valid_values
        self.default = self.accept(default)

    def accept(self, value):
        """
        Coerce a value to the setting type and check it.

        :param value: (mixed) value to check
        :return: (mixed) the coerced value
        """
        if self.type is bool:
            # bool("false") would be True
            if not isinstance(value, bool):
                raise TypeError
        elif not isinstance(value, self.type):
            try:
                value = self.type(value)
            except ValueError:
                raise TypeError from None
        if self.valid_values is not None and value not in self.valid_values:
            raise ValueError
        return value


class ConfigMeta(type):
    """Metaclass collecting the Settings of a config class."""

    def __new__(cls, name, bases, attributes):
        settings = {k: a for k, a in attributes.items() if isinstance(a, Setting)}
        others = {k: a for k, a in attributes.items() if k not in settings}
        return type.__new__(cls, name, bases, dict(_settings=settings, **others))


class AnagramConfig(metaclass=ConfigMeta):
    """Bundle of options for the anagram routines and the output they produce."""

    def __init__(self, **kwargs):
        self._values = {}
        for key, value in kwargs.items():
            if key not in self._settings:
                raise KeyError("Unknown setting '%s'" % key)
        for key, setting in self._settings.items():
            setattr(self, key, kwargs.get(key, setting.default))

    def __setattr__(self, key, value):
        """Validate and set the value of a Setting."""
        if key not in self._settings:
            super().__setattr__(key, value)
            return
        setting = self._settings[key]
        try:
            self._values[key] = setting.accept(value)
        except TypeError:
            raise TypeError("Value '%s' for '%s' is not a %s" % (
                repr(value), key, setting.type.__name__)) from None
        except ValueError:
            raise ValueError("Value '%s' is not valid for '%s'" % (repr(value), key)) from None
        if key == 'next_policy':
            # forget the memoized policy
            self.__dict__.pop('_policy', None)

    def __getattr__(self, key):
        # only reached for names that are not set as normal attributes
        if key in self._settings:
            return self._values[key]
        raise AttributeError(key)

    def __eq__(self, other):
        if type(other) is type(self):
            return self._values == other._values
        return False

    @memoized_property
    def policy(self):
        """The configured NextPolicy."""
        return NextPolicy(self.next_policy)

    def to_dict(self, excl_defaults=True):
        """
        Convert the config to a dictionary.

        :param excl_defaults: (bool) leave out settings that have their default value
        """
        return {k: v for k, v in self._values.items()
                if not excl_defaults or v != self._settings[k].default}

    def to_json(self, excl_defaults=True):
        """Convert the config to a JSON string."""
        return json.dumps(self.to_dict(excl_defaults=excl_defaults))

    @classmethod
    def from_json(cls, json_string):
        """Create an AnagramConfig from a JSON string."""
        return cls(**json.loads(json_string))

    @classmethod
    def from_yaml(cls, yaml_string):
        """Create an AnagramConfig from a YAML string."""
        return cls(**(yaml.safe_load(yaml_string) or {}))

    @classmethod
    def from_file(cls, file_name):
        """Read an AnagramConfig from a .json or a YAML file."""
        with open(file_name) as f:
            content = f.read()
        if file_name.lower().endswith('.json'):
            return cls.from_json(content)
        return cls.from_yaml(content)

    """
    Result of get_next for a word that is already the greatest permutation of its characters.
        wrap - return the smallest permutation (characters sorted ascending)
        saturate - return the word unchanged
    """
    next_policy = Setting(str, NextPolicy.WRAP.value,
                          valid_values=tuple(p.value for p in NextPolicy))

    """
    Width of the unsigned integer count results are reduced to. 0 means unbounded (exact).
    Any other value returns the exact count modulo 2**count_bits, e.g. 128 gives the value a
    128-bit accumulator of the reference implementation would hold.
    """
    count_bits = Setting(int, 0, valid_values=range(0, 1025))

    """Encoding used to turn str words into 8-bit code units for counting occurrences."""
    encoding = Setting(str, 'utf-8')

    """Print timestamped log messages."""
    log = Setting(bool, False)

    """Show progress bars while enumerating anagrams."""
    progress = Setting(bool, False)


def setup_logging(config):
    """
    Switch logging and progress bars according to a config.

    :param config: (AnagramConfig) config providing the log and progress settings
    """
    if not isinstance(config, AnagramConfig):
        raise TypeError("Expected an AnagramConfig, got %s" % type(config).__name__)
    an_logging.log_enable(config.log)
    an_logging.progress_enable(config.progress)
    an_logging.log("config: %s" % config.to_json(excl_defaults=False))
