#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# standards
import logging

# 3rd parties
import lxml.etree as ET

# xmlcleaner
from .config import encoding_codec
from .exceptions import DomainViolation, TidyError
from .xml_parser import strip_xml_declaration

#----------------------------------------------------------------------------------------------------------------------------------
# tidy options

_TRUE_STRINGS = frozenset(('1', 'true', 'yes', 'y', 'on'))
_FALSE_STRINGS = frozenset(('0', 'false', 'no', 'n', 'off'))

def _as_bool(key, value):
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str) and value.strip().lower() in _TRUE_STRINGS | _FALSE_STRINGS:
        return value.strip().lower() in _TRUE_STRINGS
    raise DomainViolation('Tidy option %r expects a boolean, got %r' % (key, value))

def _as_int(key, value):
    if isinstance(value, bool):
        raise DomainViolation('Tidy option %r expects an integer, got %r' % (key, value))
    try:
        return int(value)
    except (TypeError, ValueError) as error:
        raise DomainViolation('Tidy option %r expects an integer, got %r' % (key, value), reason=error) from error

# libtidy spells its options with hyphens, we also accept underscores so that they can be passed as kwargs
_OPTION_TYPES = {
    'add-xml-decl': _as_bool,
    'indent': _as_bool,
    'indent-spaces': _as_int,
    'input-xml': _as_bool,
    'output-xml': _as_bool,
    'wrap': _as_int,
}

_OPTION_DEFAULTS = {
    'add-xml-decl': False,
    'indent': False,
    'indent-spaces': 2,
    'input-xml': False,
    'output-xml': False,
    'wrap': 68,
}

def normalize_tidy_options(options):
    """
    Returns a complete dict of the options the tidier understands, with values of the right type. Missing options take libtidy's
    own defaults. Unknown options are ignored, with a warning, as libtidy does.
    """
    normalized = dict(_OPTION_DEFAULTS)
    for key, value in (options or {}).items():
        key = key.replace('_', '-')
        converter = _OPTION_TYPES.get(key)
        if converter is None:
            logging.warning("Ignoring unsupported tidy option %r", key)
            continue
        normalized[key] = converter(key, value)
    if normalized['indent-spaces'] < 0:
        raise DomainViolation('Tidy option %r must not be negative' % ('indent-spaces',))
    return normalized

#----------------------------------------------------------------------------------------------------------------------------------

class Tidier:
    """
    The reformatting/repair service behind `get_tidy_xml`. Takes XML text, a dict of libtidy-style options and one of the
    `KNOWN_ENCODINGS` names, and returns the repaired text.
    """

    def repair(self, xml_string, options, encoding):
        raise NotImplementedError


class NullTidier(Tidier):
    """
    Returns the document unchanged, apart from validating the arguments.
    """

    def repair(self, xml_string, options, encoding):
        normalize_tidy_options(options)
        encoding_codec(encoding)
        return xml_string


class LxmlTidier(Tidier):
    """
    Repairs documents with lxml's recovering parser, re-indents them, and serializes them in the requested encoding.

    The output is encoded and then decoded back to text, so that characters the encoding can't represent come out as character
    references, and so that the declaration names the encoding. The `wrap` option is accepted, but lxml never wraps lines.
    """

    def repair(self, xml_string, options, encoding):
        options = normalize_tidy_options(options)
        codec = encoding_codec(encoding)
        if not isinstance(xml_string, str):
            raise DomainViolation('Expected XML text, got %r' % (type(xml_string),))
        if options['wrap']:
            logging.debug("lxml doesn't wrap lines, ignoring wrap=%d", options['wrap'])
        tree = self._parse(strip_xml_declaration(xml_string), options)
        if options['indent']:
            ET.indent(tree, space=' ' * options['indent-spaces'])
        try:
            try:
                tidy_bytes = self._serialize(tree, options, codec)
            except LookupError:
                # libxml2's iconv doesn't know every codec Python does (CP858 for one)
                logging.debug("lxml can't encode %s, encoding it in Python", codec)
                tidy_bytes = self._serialize_with_python_codec(tree, options, codec)
            return tidy_bytes.decode(codec)
        except (LookupError, ValueError) as error:
            raise TidyError('Could not serialize as %s: %s' % (encoding, error), reason=error) from error

    @staticmethod
    def _parse(body, options):
        if options['input-xml']:
            parser = ET.XMLParser(
                recover=True,
                remove_blank_text=options['indent'],
                resolve_entities='internal',
                no_network=True,
            )
        else:
            parser = ET.HTMLParser(recover=True, remove_blank_text=options['indent'], no_network=True)
        try:
            root = ET.fromstring(body, parser)
        except ET.XMLSyntaxError as error:
            raise TidyError('Could not repair the document: %s' % error, reason=error) from error
        if root is None:
            raise TidyError('Could not repair the document: no root element found')
        return root.getroottree()

    @staticmethod
    def _serialize(tree, options, codec):
        if options['output-xml']:
            return ET.tostring(tree, encoding=codec, xml_declaration=options['add-xml-decl'])
        return ET.tostring(tree, encoding=codec, method='html')

    @staticmethod
    def _serialize_with_python_codec(tree, options, codec):
        if options['output-xml']:
            text = ET.tostring(tree, encoding='unicode')
            if options['add-xml-decl']:
                text = "<?xml version='1.0' encoding='%s'?>\n%s" % (codec, text)
        else:
            text = ET.tostring(tree, encoding='unicode', method='html')
        return text.encode(codec, errors='xmlcharrefreplace')

#----------------------------------------------------------------------------------------------------------------------------------
