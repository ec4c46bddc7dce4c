#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# 3rd parties
import lxml.etree as ET

# xmlcleaner
from .exceptions import DomainViolation, MalformedInput
from .xml_parser import split_xml_declaration

#----------------------------------------------------------------------------------------------------------------------------------
# parse XML

def _xml_parser():
    # internal DTD entities are expanded, external ones are never loaded, from disk or network
    return ET.XMLParser(
        remove_blank_text=False,
        resolve_entities='internal',
        no_network=True,
    )

def parse_xml_etree(xml_string):
    """
    Takes a string (not bytes) of XML and parses it into an ETree document, which it returns. Raises `MalformedInput` if the text
    isn't well-formed.

    lxml refuses to parse text that carries an encoding declaration, since it's already decoded, so the declaration is dropped
    before parsing. Use `split_xml_declaration` to hold on to it.
    """
    if not isinstance(xml_string, str):
        # We don't handle decoding here
        raise DomainViolation('Expected XML text, got %r' % (type(xml_string),))
    _, body = split_xml_declaration(xml_string)
    try:
        root = ET.fromstring(body, _xml_parser())
    except ET.XMLSyntaxError as error:
        raise MalformedInput('XML is not well-formed: %s' % error, reason=error) from error
    return root.getroottree()

#----------------------------------------------------------------------------------------------------------------------------------
# serialize XML

def serialize_xml_etree(tree, declaration=''):
    """
    Serializes the whole document, including top-level comments and processing instructions, with no added indentation. The given
    declaration text is put back in front verbatim.
    """
    return declaration + ET.tostring(tree, encoding='unicode')

#----------------------------------------------------------------------------------------------------------------------------------
# tree queries

_XPATH_QUALIFIED_NAMES_WITH_PREFIX = ET.XPath(
    'boolean(//*[starts-with(name(), $qualifier)] | //@*[starts-with(name(), $qualifier)])'
)

def prefix_in_use(tree, prefix):
    """
    True if any element or attribute in the tree has a qualified name with the given prefix. Namespace declarations aren't
    attributes as far as XPath is concerned, so they don't count as a use.
    """
    return bool(_XPATH_QUALIFIED_NAMES_WITH_PREFIX(tree, qualifier=prefix + ':'))


def root_local_name(tree):
    return ET.QName(tree.getroot()).localname

#----------------------------------------------------------------------------------------------------------------------------------
