#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# standards
from collections import namedtuple
from types import MappingProxyType

# xmlcleaner
from .exceptions import DomainViolation

#----------------------------------------------------------------------------------------------------------------------------------
# character encodings

# Keys are the names libtidy uses for its `char-encoding` option. Values are codec names understood by Python's codecs module,
# and by libxml2 (through iconv) for all but CP858, which the tidier encodes itself.
KNOWN_ENCODINGS = {
    'ascii': 'US-ASCII',
    'latin0': 'ISO-8859-15',
    'latin1': 'ISO-8859-1',
    'raw': 'UTF-8', # no conversion of non-ASCII characters
    'utf8': 'UTF-8',
    'iso2022': 'ISO-2022-JP',
    'mac': 'MACINTOSH',
    'win1252': 'WINDOWS-1252',
    'ibm858': 'CP858',
    'utf16': 'UTF-16',
    'utf16le': 'UTF-16LE',
    'utf16be': 'UTF-16BE',
    'big5': 'BIG5',
    'shiftjis': 'SHIFT_JIS',
}

def encoding_codec(name):
    """
    Validates the given character encoding name against `KNOWN_ENCODINGS`, and returns the corresponding codec name.
    """
    codec = KNOWN_ENCODINGS.get(name) if isinstance(name, str) else None
    if codec is None:
        raise DomainViolation('Unknown character encoding, was given %r' % (name,))
    return codec

#----------------------------------------------------------------------------------------------------------------------------------

_DEFAULT_TIDY_CONFIG = {
    'add-xml-decl': True,
    'indent': True,
    'indent-spaces': 4,
    'input-xml': True,
    'output-xml': True,
    'wrap': 1000,
}

_DEFAULT_VALUES = {
    'character_encoding': 'utf8',
    'tidy_config': MappingProxyType(_DEFAULT_TIDY_CONFIG),
}

def default_tidy_config():
    return dict(_DEFAULT_TIDY_CONFIG)

#----------------------------------------------------------------------------------------------------------------------------------

CleanerConfig = namedtuple( # it's a class, pylint: disable=invalid-name
    'CleanerConfig',
    sorted(_DEFAULT_VALUES.keys()),
)

DEFAULT_CONFIG = CleanerConfig(**_DEFAULT_VALUES)

def _from_kwargs(cls, kwargs, defaults=DEFAULT_CONFIG, consume_all_kwargs_for=None):
    config = {
        key: kwargs.pop(key, getattr(defaults, key, fallback))
        for key, fallback in _DEFAULT_VALUES.items()
    }
    if consume_all_kwargs_for and kwargs:
        raise TypeError("Unknown kwargs for %r: %s" % (
            consume_all_kwargs_for,
            ', '.join(sorted(kwargs)),
        ))
    encoding_codec(config['character_encoding'])
    config['tidy_config'] = dict(config['tidy_config'])
    return cls(**config)

CleanerConfig.from_kwargs = classmethod(_from_kwargs)

#----------------------------------------------------------------------------------------------------------------------------------
