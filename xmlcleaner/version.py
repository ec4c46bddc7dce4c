#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------

XMLCLEANER_VERSION = xmlcleaner_version = '0.1.0'

#----------------------------------------------------------------------------------------------------------------------------------
