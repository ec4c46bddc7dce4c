#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# exception classes

class XmlCleanerException(Exception):

    def __init__(self, message=None, reason=None):
        super().__init__(message)
        self.reason = reason # a chain link to a further exception, where applicable


class DomainViolation(XmlCleanerException):
    pass


class PreconditionViolation(DomainViolation):
    pass


class NamespaceNotFound(DomainViolation):
    pass


class MalformedInput(XmlCleanerException):
    pass


class TransformError(XmlCleanerException):
    pass


class TidyError(XmlCleanerException):
    pass

#----------------------------------------------------------------------------------------------------------------------------------
