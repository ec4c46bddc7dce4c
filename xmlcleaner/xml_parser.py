#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# standards
import re

#----------------------------------------------------------------------------------------------------------------------------------
# These work on the raw text of the document, not on a parsed tree. The namespace scans are flat and document-wide: they don't
# know about element scopes, and they'll happily pick up a declaration that sits inside a comment.

_RE_XML_DECLARATION = re.compile(
    r' ^ \s* <\? xml \s [^>]* \?> \s* ',
    re.X,
)

_RE_PREFIXED_NAMESPACE_DECLARATION = re.compile(
    r'''
        (?<! [\w.:\-] )
        xmlns : (?P<prefix> [\w.\-]+ )
        \s* = \s*
        (?: " (?P<dq_uri> [^"]+ ) "
          | ' (?P<sq_uri> [^']+ ) ' )
    ''',
    re.X,
)

_RE_DEFAULT_NAMESPACE_DECLARATION = re.compile(
    r'''
        (?<! [\w.:\-] )
        xmlns
        \s* = \s*
        (?: " (?P<dq_uri> [^"]+ ) "
          | ' (?P<sq_uri> [^']+ ) ' )
    ''',
    re.X,
)

_PREFIXED_NAMESPACE_DECLARATION_TEMPLATE = r'''
    \s+
    xmlns : %s
    \s* = \s*
    (?: "[^"]*" | '[^']*' )
'''

#----------------------------------------------------------------------------------------------------------------------------------

def split_xml_declaration(xml_string):
    """
    Returns a (declaration, body) pair. The declaration includes any whitespace around it, so that joining the two gives back the
    input string. If there is no XML declaration, the first element of the pair is an empty string.
    """
    match = _RE_XML_DECLARATION.match(xml_string)
    if match is None:
        return '', xml_string
    return match.group(), xml_string[match.end():]


def strip_xml_declaration(xml_string):
    return split_xml_declaration(xml_string)[1]


def iter_namespace_declarations(xml_string):
    """
    Yields (prefix, uri) for every `xmlns:prefix="uri"` found in the text, in the order in which they appear.
    """
    for match in _RE_PREFIXED_NAMESPACE_DECLARATION.finditer(xml_string):
        yield match.group('prefix'), match.group('dq_uri') or match.group('sq_uri')


def find_default_namespace(xml_string):
    match = _RE_DEFAULT_NAMESPACE_DECLARATION.search(xml_string)
    if match is None:
        return None
    return match.group('dq_uri') or match.group('sq_uri')


def strip_namespace_declarations(xml_string, prefix):
    """
    Removes every `xmlns:prefix="..."` declaration for the given prefix, wherever it appears. Returns the new string and the number
    of declarations removed.
    """
    return re.subn(
        _PREFIXED_NAMESPACE_DECLARATION_TEMPLATE % re.escape(prefix),
        '',
        xml_string,
        flags=re.X,
    )

#----------------------------------------------------------------------------------------------------------------------------------
