# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the ciftimodels package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Thin layer around xml.etree.ElementTree, to abstract ciftimodels xml support

The node primitives (:func:`attributes`, :func:`children`, :func:`text`) are
all the parsers need from an element, so any object with the ``attrib``,
``findall`` and ``itertext`` interface of :class:`xml.etree.ElementTree.Element`
can be handed to them.
"""
from xml.etree.ElementTree import Element, ParseError, SubElement, fromstring, tostring  # noqa


class XmlSerializable:
    """Basic interface for serializing an object to xml"""

    def _to_xml_element(self):
        """Output should be a xml.etree.ElementTree.Element"""
        raise NotImplementedError()

    def to_xml(self, enc='utf-8'):
        """Output should be an xml string with the given encoding.
        (default: utf-8)"""
        ele = self._to_xml_element()
        return '' if ele is None else tostring(ele, enc)


def is_element(obj):
    """True if `obj` quacks like a single XML element

    Elements are themselves sequences of their children, so this is the test
    that keeps a lone element from being treated as a sequence of nodes.
    """
    return isinstance(obj, Element) or (
        hasattr(obj, 'attrib') and hasattr(obj, 'tag') and hasattr(obj, 'findall')
    )


def attributes(node):
    """Attributes of `node` as a ``dict`` of strings, in document order"""
    return {str(key): str(value) for key, value in node.attrib.items()}


def children(node, name):
    """Direct children of `node` with tag `name`, in document order"""
    return list(node.findall(f'./{name}'))


def text(node):
    """Concatenated text content of `node` and its descendants"""
    return ''.join(node.itertext())
