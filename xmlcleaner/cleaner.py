#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# standards
import logging

# xmlcleaner
from .config import CleanerConfig, default_tidy_config, encoding_codec
from .etree_parser import parse_xml_etree, root_local_name
from .exceptions import DomainViolation, PreconditionViolation
from .namespaces import extract_default_namespace, extract_namespaces, prune_unused_namespaces
from .tidy import LxmlTidier
from .transform import AttributePrefixMatch, CommentMatch, ElementPrefixMatch, apply_transform, build_transform

#----------------------------------------------------------------------------------------------------------------------------------
# pass-through operations
#
# Each of these takes the document as a string and returns the result, without keeping any state. `XmlCleaner` below wraps them
# for chained use.

def remove_xml_comments(xml_string):
    return _remove_matching(_require_text(xml_string), CommentMatch())


def remove_elements_by_prefix(xml_string, prefix):
    """
    Removes every element whose name has the given namespace prefix, along with everything inside it.
    """
    return _remove_prefixed(xml_string, ElementPrefixMatch(prefix))


def remove_attributes_by_prefix(xml_string, prefix):
    """
    Removes every attribute whose name has the given namespace prefix. The elements that carried them are kept.
    """
    return _remove_prefixed(xml_string, AttributePrefixMatch(prefix))


def remove_unused_namespaces(xml_string):
    """
    Removes the `xmlns:prefix="uri"` declarations whose prefix isn't used by any element or attribute.
    """
    return prune_unused_namespaces(_require_text(xml_string))


def get_default_namespace(xml_string):
    return extract_default_namespace(_require_text(xml_string))


def get_root_element_name(xml_string):
    """
    Returns the local name of the root element, i.e. without its prefix.
    """
    return root_local_name(parse_xml_etree(xml_string))


def get_xml_namespaces(xml_string, sort_by_prefix=True):
    """
    Returns the `xmlns:prefix="uri"` declarations found in the document, as a list of (prefix, uri) pairs. The default namespace
    is not included. If `sort_by_prefix` is false, the order of the list is undefined.
    """
    return extract_namespaces(_require_text(xml_string)).bindings(sort_by_prefix=sort_by_prefix)


def get_tidy_xml(xml_string, config=None, encoding='utf8', tidier=None):
    """
    Reformats and repairs the document. `config` is a dict of libtidy-style options, `encoding` one of the names in
    `KNOWN_ENCODINGS`.
    """
    encoding_codec(encoding)
    if config is None:
        config = default_tidy_config()
    if tidier is None:
        tidier = LxmlTidier()
    return tidier.repair(_require_text(xml_string), config, encoding)

#----------------------------------------------------------------------------------------------------------------------------------

def _require_text(xml_string):
    if not isinstance(xml_string, str):
        raise DomainViolation('Expected XML text, got %r' % (type(xml_string),))
    return xml_string


def _remove_prefixed(xml_string, predicate):
    xml_string = _require_text(xml_string)
    if predicate.prefix + ':' not in xml_string:
        # Nothing in the document can carry that prefix, so a plain identity copy gives the same result
        logging.debug("%r: prefix not found in the document, copying it as-is", predicate)
        predicate = None
    return _remove_matching(xml_string, predicate)


def _remove_matching(xml_string, predicate):
    transform = build_transform(predicate, extract_namespaces(xml_string))
    return apply_transform(transform, xml_string)

#----------------------------------------------------------------------------------------------------------------------------------
# chained operations

class XmlCleaner:
    """
    Holds a document and applies the cleaning operations to it in turn, so that they can be chained:

        >>> cleaner = XmlCleaner().set_xml('<a xmlns:x="urn:x"><!-- c --><x:b/></a>')
        >>> cleaner.remove_xml_comments().remove_elements_by_prefix('x').remove_unused_namespaces().get_xml()
        '<a/>'

    Each operation stores its result as the new current document. If an operation fails, the current document is left as it was.
    `get_tidy_xml` is meant as the last step of a chain: it returns the tidied text but doesn't store it.

    For one-off operations on a given string, use the module-level functions instead.
    """

    def __init__(self, **kwargs):
        self.tidier = kwargs.pop('tidier', None) or LxmlTidier()
        self.config = CleanerConfig.from_kwargs(kwargs, consume_all_kwargs_for=self.__class__)
        self._xml = None

    # document

    def set_xml(self, value):
        self._xml = _require_text(value)
        return self

    def get_xml(self):
        if not self._xml:
            raise PreconditionViolation('XML MUST be set before it can be used')
        return self._xml

    # settings

    @property
    def character_encoding(self):
        return self.config.character_encoding

    def set_character_encoding(self, value):
        encoding_codec(value)
        self.config = self.config._replace(character_encoding=value)
        return self

    @property
    def tidy_config(self):
        return dict(self.config.tidy_config)

    def set_tidy_config(self, value):
        if not isinstance(value, dict):
            raise DomainViolation('Tidy config must be a dict, got %r' % (type(value),))
        self.config = self.config._replace(tidy_config=dict(value))
        return self

    # cleaning

    def remove_xml_comments(self):
        self._xml = remove_xml_comments(self.get_xml())
        return self

    def remove_elements_by_prefix(self, prefix):
        ElementPrefixMatch(prefix) # fail on a bad prefix before looking at the document
        self._xml = remove_elements_by_prefix(self.get_xml(), prefix)
        return self

    def remove_attributes_by_prefix(self, prefix):
        AttributePrefixMatch(prefix)
        self._xml = remove_attributes_by_prefix(self.get_xml(), prefix)
        return self

    def remove_unused_namespaces(self):
        self._xml = remove_unused_namespaces(self.get_xml())
        return self

    # introspection

    def get_default_namespace(self):
        return get_default_namespace(self.get_xml())

    def get_root_element_name(self):
        return get_root_element_name(self.get_xml())

    def get_xml_namespaces(self, sort_by_prefix=True):
        return get_xml_namespaces(self.get_xml(), sort_by_prefix=sort_by_prefix)

    def get_tidy_xml(self, config=None, encoding=None):
        return get_tidy_xml(
            self.get_xml(),
            config=self.tidy_config if config is None else config,
            encoding=self.character_encoding if encoding is None else encoding,
            tidier=self.tidier,
        )

#----------------------------------------------------------------------------------------------------------------------------------
