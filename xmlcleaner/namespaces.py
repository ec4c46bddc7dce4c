#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# standards
from collections import namedtuple
import logging

# xmlcleaner
from .etree_parser import parse_xml_etree, prefix_in_use
from .exceptions import NamespaceNotFound
from .xml_parser import find_default_namespace, iter_namespace_declarations, strip_namespace_declarations

#----------------------------------------------------------------------------------------------------------------------------------

NamespaceBinding = namedtuple( # it's a class, pylint: disable=invalid-name
    'NamespaceBinding',
    ('prefix', 'uri'),
)


class NamespaceIndex(dict):
    """
    Maps namespace prefixes to URIs, for the `xmlns:prefix="uri"` declarations of a document. The default namespace is not part of
    the index.

    The index is flat and document-wide: it doesn't track which element declares what. When a prefix is declared more than once
    the last declaration in the text wins, even if the earlier one binds it to a different URI.
    """

    def bindings(self, sort_by_prefix=True):
        """
        Returns the index as a list of `NamespaceBinding`. Unless `sort_by_prefix` is set, the order of the list is undefined.
        """
        items = sorted(self.items()) if sort_by_prefix else self.items()
        return [NamespaceBinding(prefix, uri) for prefix, uri in items]

    def uris(self):
        return list(self.values())

#----------------------------------------------------------------------------------------------------------------------------------

def extract_namespaces(xml_string):
    return NamespaceIndex(iter_namespace_declarations(xml_string))


def extract_default_namespace(xml_string):
    """
    Returns the URI of the default namespace, i.e. the one used for elements without a prefix. Raises `NamespaceNotFound` if the
    document has no `xmlns="uri"` declaration.
    """
    uri = find_default_namespace(xml_string)
    if uri is None:
        raise NamespaceNotFound('Default namespace is not set, check the XML')
    return uri

#----------------------------------------------------------------------------------------------------------------------------------

def prune_unused_namespaces(xml_string):
    """
    Removes the `xmlns:prefix="uri"` declarations of every prefix that no longer qualifies the name of any element or attribute in
    the document. Default namespace declarations are left alone.

    All prefixes are checked against the document before anything is removed, so the order in which they're pruned doesn't matter.
    Apart from the removed declarations the text is returned untouched.
    """
    tree = parse_xml_etree(xml_string)
    unused_prefixes = [
        prefix
        for prefix in extract_namespaces(xml_string)
        if not prefix_in_use(tree, prefix)
    ]
    for prefix in unused_prefixes:
        xml_string, num_removed = strip_namespace_declarations(xml_string, prefix)
        logging.debug("Pruned %d declaration%s of unused prefix %r", num_removed, '' if num_removed == 1 else 's', prefix)
    return xml_string

#----------------------------------------------------------------------------------------------------------------------------------
