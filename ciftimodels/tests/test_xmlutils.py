"""Testing the xml node primitives"""

from xml.etree import ElementTree

import pytest

from .. import xmlutils as xml


def test_node_primitives():
    node = xml.fromstring(
        '<BrainModel B="2" A="1"><VertexIndices>1 2</VertexIndices>'
        '<Other/><VertexIndices>3<Inner>4</Inner> 5</VertexIndices></BrainModel>'
    )
    assert xml.attributes(node) == {'B': '2', 'A': '1'}
    assert list(xml.attributes(node)) == ['B', 'A']
    blocks = xml.children(node, 'VertexIndices')
    assert len(blocks) == 2
    assert xml.text(blocks[0]) == '1 2'
    assert xml.text(blocks[1]) == '34 5'
    assert xml.children(node, 'Inner') == []
    assert xml.text(xml.Element('Empty')) == ''


def test_is_element():
    assert xml.is_element(xml.Element('A'))
    assert not xml.is_element([xml.Element('A')])
    assert not xml.is_element('A')


def test_xml_serializable():
    class Plain(xml.XmlSerializable):
        def _to_xml_element(self):
            ele = xml.Element('Plain')
            ele.attrib['Name'] = 'x'
            return ele

    class Nothing(xml.XmlSerializable):
        def _to_xml_element(self):
            return None

    assert Plain().to_xml() == b'<Plain Name="x" />'
    assert ElementTree.fromstring(Plain().to_xml()).tag == 'Plain'
    assert Nothing().to_xml() == ''
    with pytest.raises(NotImplementedError):
        xml.XmlSerializable().to_xml()
