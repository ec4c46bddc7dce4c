#!/usr/bin/env python

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# standards
import logging
from os import path

# xmlcleaner
import xmlcleaner

#----------------------------------------------------------------------------------------------------------------------------------
# Cleans up an SVG that has both left-over cruft from the application used to create it (Inkscape) and some manual edits.

HERE = path.dirname(path.abspath(__file__))

def main():
    logging.basicConfig(level='DEBUG')
    with open(path.join(HERE, 'test1.svg'), 'rb') as file_in:
        svg = file_in.read().decode('UTF-8')

    # chained: set the document once, then each call works on the result of the previous one
    cleaner = xmlcleaner.XmlCleaner()
    result_a = (
        cleaner.set_xml(svg)
        .remove_xml_comments()
        .remove_unused_namespaces()
        .get_tidy_xml()
    )
    _save('result1a.svg', result_a)

    # pass-through: each call takes the document and gives back the result
    result_b = xmlcleaner.remove_xml_comments(svg)
    result_b = xmlcleaner.remove_unused_namespaces(result_b)
    result_b = xmlcleaner.get_tidy_xml(result_b)
    _save('result1b.svg', result_b)

    assert result_a == result_b

def _save(file_name, xml_string):
    with open(path.join(HERE, file_name), 'wb') as file_out:
        file_out.write(xml_string.encode('UTF-8'))
    logging.info('%s saved', file_name)

if __name__ == '__main__':
    main()

#----------------------------------------------------------------------------------------------------------------------------------
