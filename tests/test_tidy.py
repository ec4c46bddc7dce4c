#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# standards
from os import path
import pathlib
import re
import tempfile

# 3rd parties
import lxml.etree as ET

# xmlcleaner
from xmlcleaner import get_tidy_xml
from xmlcleaner.config import KNOWN_ENCODINGS
from xmlcleaner.exceptions import DomainViolation, TidyError
from xmlcleaner.tidy import LxmlTidier, NullTidier, normalize_tidy_options

# tests
from .plumbing import XmlCleanerTest

#----------------------------------------------------------------------------------------------------------------------------------

XML_MODE = {'input-xml': True, 'output-xml': True}

_RE_DECLARATION = re.compile(r"^<\?xml version='1\.0' encoding='([^']+)'\?>\n")

#----------------------------------------------------------------------------------------------------------------------------------

class TidyOptionsTests(XmlCleanerTest):

    def test_libtidy_defaults(self):
        options = normalize_tidy_options({})
        self.assertFalse(options['indent'])
        self.assertFalse(options['input-xml'])
        self.assertEqual(options['indent-spaces'], 2)

    def test_conversions(self):
        options = normalize_tidy_options({'indent': 'yes', 'indent_spaces': '3', 'wrap': '1000', 'output-xml': 0})
        self.assertIs(options['indent'], True)
        self.assertEqual(options['indent-spaces'], 3)
        self.assertEqual(options['wrap'], 1000)
        self.assertIs(options['output-xml'], False)

    def test_bad_values(self):
        for options in ({'indent': 'maybe'}, {'indent-spaces': 'four'}, {'indent-spaces': True}, {'indent-spaces': -1}):
            with self.assertRaises(DomainViolation):
                normalize_tidy_options(options)

    def test_unknown_options_are_ignored(self):
        with self.assertLogs(level='WARNING') as logs:
            options = normalize_tidy_options({'clean': True, 'indent': True})
        self.assertNotIn('clean', options)
        self.assertTrue(options['indent'])
        self.assertIn("'clean'", logs.output[0])

#----------------------------------------------------------------------------------------------------------------------------------

class LxmlTidierTests(XmlCleanerTest):

    def _repair(self, xml_string, encoding='utf8', **options):
        config = dict(XML_MODE)
        config.update({key.replace('_', '-'): value for key, value in options.items()})
        return LxmlTidier().repair(xml_string, config, encoding)

    def test_indent(self):
        tidy = self._repair('<a><b>x</b><c/></a>', indent=True, indent_spaces=4)
        self.assertEqual(tidy, '<a>\n    <b>x</b>\n    <c/>\n</a>')

    def test_indent_replaces_existing_whitespace(self):
        tidy = self._repair('<a>\n<b>x</b>   <c/>\n\n</a>', indent=True, indent_spaces=2)
        self.assertEqual(tidy, '<a>\n  <b>x</b>\n  <c/>\n</a>')

    def test_no_indent(self):
        self.assertEqual(self._repair('<a><b>x</b></a>'), '<a><b>x</b></a>')

    def test_declaration_names_the_encoding(self):
        tidy = self._repair('<?xml version="1.0" encoding="ISO-8859-1"?><a/>', encoding='latin1', add_xml_decl=True)
        match = _RE_DECLARATION.match(tidy)
        self.assertIsNotNone(match, tidy)
        self.assertEqual(match.group(1).upper(), 'ISO-8859-1')
        self.assertEqual(tidy[match.end():], '<a/>')

    def test_ascii_uses_character_references(self):
        self.assertEqual(self._repair('<a>caf\xe9</a>', encoding='ascii'), '<a>caf&#233;</a>')

    def test_utf8_keeps_characters(self):
        self.assertEqual(self._repair('<a>caf\xe9</a>', encoding='utf8'), '<a>caf\xe9</a>')

    def test_repairs_unclosed_elements(self):
        tidy = self._repair('<a><b>x</a>')
        root = ET.fromstring(tidy)
        self.assertEqual(root.tag, 'a')
        self.assertEqual(root.findtext('b'), 'x')

    def test_html_input(self):
        tidy = self._repair('<p>one<br>two</p>', input_xml=False, output_xml=False)
        self.assertIn('<p>one<br>two</p>', tidy)

    def test_unknown_encoding(self):
        with self.assertRaises(DomainViolation):
            self._repair('<a/>', encoding='ebcdic')

    def test_codec_libxml2_lacks(self):
        tidy = self._repair('<a>caf\xe9 \u20ac \u2603</a>', encoding='ibm858', add_xml_decl=True)
        match = _RE_DECLARATION.match(tidy)
        self.assertIsNotNone(match, tidy)
        self.assertEqual(match.group(1), 'CP858')
        self.assertEqual(tidy[match.end():], '<a>caf\xe9 \u20ac &#9731;</a>')

    def test_codec_libxml2_lacks_in_html_mode(self):
        tidy = self._repair('<p>caf\xe9</p>', encoding='ibm858', input_xml=False, output_xml=False)
        self.assertIn('<p>caf\xe9</p>', tidy)

    def test_wrap_is_not_applied(self):
        with self.assertLogs(level='DEBUG') as logs:
            tidy = self._repair('<a>' + 'word ' * 40 + '</a>', wrap=20)
        self.assertNotIn('\n', tidy)
        self.assertTrue(any('wrap=20' in line for line in logs.output), logs.output)

    def test_external_entities_are_never_loaded(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            secret_path = path.join(temp_dir, 'secret.txt')
            with open(secret_path, 'wb') as file_out:
                file_out.write(b'top secret')
            xml_string = '<!DOCTYPE a [<!ENTITY e SYSTEM "%s">]><a>&e;</a>' % pathlib.Path(secret_path).as_uri()
            try:
                tidy = self._repair(xml_string)
            except TidyError:
                return
        self.assertNotIn('top secret', tidy)

#----------------------------------------------------------------------------------------------------------------------------------

class GetTidyXmlTests(XmlCleanerTest):

    def test_default_config(self):
        tidy = get_tidy_xml('<a><b>x</b></a>')
        match = _RE_DECLARATION.match(tidy)
        self.assertIsNotNone(match, tidy)
        self.assertEqual(tidy[match.end():], '<a>\n    <b>x</b>\n</a>')

    def test_every_known_encoding(self):
        for name, codec in sorted(KNOWN_ENCODINGS.items()):
            with self.subTest(encoding=name):
                tidy = get_tidy_xml('<a>caf\xe9 €</a>', encoding=name).lstrip('\ufeff')
                match = _RE_DECLARATION.match(tidy)
                self.assertIsNotNone(match, tidy)
                self.assertEqual(match.group(1).upper(), codec.upper())
                self.assertTrue(tidy[match.end():].startswith('<a>caf'), tidy)
                self.assertTrue(tidy.rstrip().endswith('</a>'), tidy)

    def test_output_is_well_formed(self):
        self.assertWellFormed(get_tidy_xml(self.read_fixture('drawing.svg')))

    def test_unknown_encoding_never_reaches_the_tidier(self):
        class RecordingTidier(NullTidier):
            calls = []
            def repair(self, xml_string, options, encoding):
                self.calls.append(encoding)
                return xml_string
        tidier = RecordingTidier()
        with self.assertRaises(DomainViolation):
            get_tidy_xml('<a/>', encoding='klingon', tidier=tidier)
        self.assertEqual(tidier.calls, [])

#----------------------------------------------------------------------------------------------------------------------------------
