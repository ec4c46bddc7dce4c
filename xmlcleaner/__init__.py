#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# xmlcleaner
from .cleaner import (
    XmlCleaner, get_default_namespace, get_root_element_name, get_tidy_xml, get_xml_namespaces, remove_attributes_by_prefix,
    remove_elements_by_prefix, remove_unused_namespaces, remove_xml_comments,
)
from .config import DEFAULT_CONFIG, KNOWN_ENCODINGS, CleanerConfig
from .exceptions import (
    DomainViolation, MalformedInput, NamespaceNotFound, PreconditionViolation, TidyError, TransformError, XmlCleanerException,
)
from .namespaces import NamespaceBinding, NamespaceIndex, extract_default_namespace, extract_namespaces, prune_unused_namespaces
from .tidy import LxmlTidier, NullTidier, Tidier
from .transform import (
    AttributePrefixMatch, CommentMatch, ElementPrefixMatch, MatchPredicate, Transform, apply_transform, build_transform,
)
from .version import XMLCLEANER_VERSION

#----------------------------------------------------------------------------------------------------------------------------------
