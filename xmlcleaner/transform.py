#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# standards
import logging

# 3rd parties
import lxml.etree as ET

# xmlcleaner
from .etree_parser import parse_xml_etree, serialize_xml_etree
from .exceptions import DomainViolation, TransformError
from .xml_parser import split_xml_declaration

#----------------------------------------------------------------------------------------------------------------------------------
# globals

XSLT_NAMESPACE = 'http://www.w3.org/1999/XSL/Transform'

_XSL = '{%s}' % XSLT_NAMESPACE

# Bound in every document without needing a declaration, and lxml won't let us redeclare it
RESERVED_PREFIXES = frozenset(('xml', 'xmlns'))

# Anything above the default priority of `@*|node()` (-0.5) would do
_ELISION_PRIORITY = '1'

#----------------------------------------------------------------------------------------------------------------------------------
# match predicates

class MatchPredicate:
    """
    Describes the nodes that a copy-transform should leave out of its output.
    """

    prefix = None

    def pattern(self):
        """
        Returns an XSLT match pattern selecting the nodes to elide.
        """
        raise NotImplementedError

    def __eq__(self, other):
        return type(self) is type(other) and self.prefix == other.prefix

    def __hash__(self):
        return hash((type(self), self.prefix))

    def __repr__(self):
        if self.prefix is None:
            return '%s()' % self.__class__.__name__
        return '%s(%r)' % (self.__class__.__name__, self.prefix)


class CommentMatch(MatchPredicate):

    def pattern(self):
        return 'comment()'


class PrefixMatch(MatchPredicate):

    def __init__(self, prefix):
        if not isinstance(prefix, str) or not prefix:
            raise DomainViolation('Prefix can NOT be empty')
        self.prefix = prefix


class ElementPrefixMatch(PrefixMatch):
    # removing an element takes its whole subtree with it

    def pattern(self):
        return '%s:*' % self.prefix


class AttributePrefixMatch(PrefixMatch):

    def pattern(self):
        return '@%s:*' % self.prefix

#----------------------------------------------------------------------------------------------------------------------------------
# transforms

class Transform:
    """
    A compiled-on-demand XSLT copy-transform. Calling it with a parsed document returns the transformed document.
    """

    def __init__(self, stylesheet):
        self.stylesheet = stylesheet
        self._xslt = None

    def compile(self):
        if self._xslt is None:
            try:
                self._xslt = ET.XSLT(self.stylesheet)
            except ET.XSLTParseError as error:
                raise TransformError('Could not compile the copy-transform: %s' % error, reason=error) from error
        return self._xslt

    def __call__(self, tree):
        xslt = self.compile()
        try:
            return xslt(tree)
        except ET.XSLTApplyError as error:
            raise TransformError('Could not apply the copy-transform: %s' % error, reason=error) from error

    def __str__(self):
        return ET.tostring(self.stylesheet, encoding='unicode')


def _is_valid_binding(prefix, uri):
    try:
        ET.Element('binding', nsmap={prefix: uri})
    except ValueError:
        return False
    return True


def build_transform(predicate, namespace_index):
    """
    Builds a transform that copies a document as-is, except for the nodes matched by `predicate`, which are dropped. If
    `predicate` is None the transform is a plain identity copy.

    Every valid binding in `namespace_index` is declared on the stylesheet's root, so that prefixes in the match pattern resolve
    to the same URIs as in the document. A prefix the index doesn't know can't qualify any name in the document, so no elision
    rule is emitted for it.
    """
    nsmap = {}
    for prefix, uri in namespace_index.items():
        if prefix in RESERVED_PREFIXES:
            continue
        if not _is_valid_binding(prefix, uri):
            # the text scan also sees xmlns:p="..." written in comments or text, the parser would have rejected it anywhere else
            logging.debug("Skipping invalid namespace binding %r=%r", prefix, uri)
            continue
        nsmap[prefix] = uri
    if 'xsl' not in nsmap:
        nsmap['xsl'] = XSLT_NAMESPACE
    try:
        stylesheet = ET.Element(_XSL + 'transform', nsmap=nsmap, version='1.0')
    except ValueError as error:
        raise TransformError('Invalid namespace binding: %s' % error, reason=error) from error
    ET.SubElement(stylesheet, _XSL + 'output', method='xml', indent='no')
    if predicate is not None:
        if predicate.prefix in (None, 'xml') or (predicate.prefix in nsmap and predicate.prefix in namespace_index):
            ET.SubElement(stylesheet, _XSL + 'template', match=predicate.pattern(), priority=_ELISION_PRIORITY)
        else:
            logging.debug("Prefix %r is not declared, %r can't match anything", predicate.prefix, predicate)
    identity_template = ET.SubElement(stylesheet, _XSL + 'template', match='@*|node()')
    copy = ET.SubElement(identity_template, _XSL + 'copy')
    ET.SubElement(copy, _XSL + 'apply-templates', select='@*|node()')
    return Transform(stylesheet)


def apply_transform(transform, xml_string):
    """
    Parses the given XML text, runs it through the transform, and serializes the result. The document's XML declaration, if it
    has one, is carried over verbatim. No indentation is added.
    """
    declaration, _ = split_xml_declaration(xml_string)
    result = transform(parse_xml_etree(xml_string))
    if result.getroot() is None:
        raise TransformError('The copy-transform removed the root element')
    return serialize_xml_etree(result, declaration)

#----------------------------------------------------------------------------------------------------------------------------------
