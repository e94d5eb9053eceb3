# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the ciftimodels package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Brain model records parsed from the ``BrainModel`` elements of a CIFTI header

A ``BrainModel`` element of a CIFTI-2 ``MatrixIndicesMap`` maps a range of
matrix indices either to vertices of a surface or to voxels of a volume.  The
two cases are represented by :class:`SurfaceBrainModel` and
:class:`VolumeBrainModel`, which share the :class:`BrainModelRecord` base.

Definition of the CIFTI-2 header format can be found at:

    http://www.nitrc.org/projects/cifti
"""
import re
from types import MappingProxyType

import numpy as np

from . import xmlutils as xml

# Attributes of the CIFTI-2 XML schema that hold numbers
CIFTI_NUMERIC_ATTRIBUTES = (
    'IndexOffset',
    'IndexCount',
    'SurfaceNumberOfVertices',
    'NumberOfSeriesPoints',
    'SeriesExponent',
    'SeriesStart',
    'SeriesStep',
    'MeterExponent',
    'Key',
    'Red',
    'Green',
    'Blue',
    'Alpha',
)


class BrainModelError(Exception):
    """Error in CIFTI brain model extraction"""


class NumericCoercionError(BrainModelError, ValueError):
    """Attribute value or index token that is not a number"""


class BrainModelFormatError(BrainModelError):
    """BrainModel element with a malformed structure"""


class DuplicateVertexBlockError(BrainModelFormatError):
    """BrainModel element with more than one VertexIndices child"""


class DuplicateVoxelBlockError(BrainModelFormatError):
    """BrainModel element with more than one VoxelIndicesIJK child"""


class InconsistentVoxelGroupingError(BrainModelFormatError):
    """VoxelIndicesIJK text that cannot be read as (i, j, k) triples"""


class ConflictingGeometryError(BrainModelFormatError):
    """BrainModel element with both vertex and voxel indices"""


class CiftiXmlError(BrainModelError):
    """Document that is not a CIFTI XML header"""


class CiftiFileError(BrainModelError):
    """File that is not a readable CIFTI-2 container"""


def _underscore(string):
    """Convert a string from CamelCase to underscored"""
    string = re.sub(r'([A-Z]+)([A-Z][a-z])', r'\1_\2', string)
    return re.sub(r'([a-z0-9])([A-Z])', r'\1_\2', string).lower()


def _format_number(value):
    """Text for a parsed number, integral values without a fraction

    >>> _format_number(32492.0)
    '32492'
    >>> _format_number(0.5)
    '0.5'
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _readonly(arr):
    arr.flags.writeable = False
    return arr


def _attribute_property(key):
    def getter(self):
        return self._attributes.get(key)

    getter.__doc__ = f'Value of the ``{key}`` attribute, None if absent'
    return property(getter)


class BrainModelRecord(xml.XmlSerializable):
    """Base of the parsed brain model records

    Attributes
    ----------
    kind : str
        ``'surface'`` or ``'volume'``
    attributes : mapping
        Attributes of the source element, in source order.  Values of numeric
        attributes are floats, all others are the original strings.
    """

    kind = None
    _geometry_name = None

    index_offset = _attribute_property('IndexOffset')
    index_count = _attribute_property('IndexCount')
    model_type = _attribute_property('ModelType')
    brain_structure = _attribute_property('BrainStructure')
    surface_number_of_vertices = _attribute_property('SurfaceNumberOfVertices')

    def __init__(self, attributes=None):
        self._attributes = dict(attributes or {})

    @property
    def attributes(self):
        return MappingProxyType(self._attributes)

    @property
    def geometry(self):
        """The index array of this record's variant"""
        return getattr(self, self._geometry_name)

    def _arrays(self):
        raise NotImplementedError

    def __len__(self):
        return len(self.geometry)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._attributes == other._attributes and all(
            np.array_equal(mine, theirs) for mine, theirs in zip(self._arrays(), other._arrays())
        )

    __hash__ = None

    def __repr__(self):
        structure = self.brain_structure or 'unnamed'
        return f'<{self.__class__.__name__} {structure}, {len(self)} {self._geometry_name}>'

    def _attributes_to_xml(self, element):
        for key, value in self._attributes.items():
            element.attrib[key] = value if isinstance(value, str) else _format_number(value)

    def _vertices_to_xml(self, element):
        vertex_indices = xml.SubElement(element, 'VertexIndices')
        vertex_indices.text = ' '.join(_format_number(v) for v in self.vertices)


class SurfaceBrainModel(BrainModelRecord):
    """Brain model mapping matrix indices to surface vertices

    Parameters
    ----------
    vertices : sequence of numbers
        Vertex indices, in source order.  Duplicates are kept.
    attributes : mapping, optional
        Attributes of the source element.
    """

    kind = 'surface'
    _geometry_name = 'vertices'

    def __init__(self, vertices=(), attributes=None):
        super().__init__(attributes)
        self._vertices = _readonly(np.array(vertices, dtype=np.float64).reshape(-1))

    @property
    def vertices(self):
        return self._vertices

    def _arrays(self):
        return (self._vertices,)

    def _to_xml_element(self):
        brain_model = xml.Element('BrainModel')
        self._attributes_to_xml(brain_model)
        if len(self.vertices):
            self._vertices_to_xml(brain_model)
        return brain_model


class VolumeBrainModel(BrainModelRecord):
    """Brain model mapping matrix indices to voxels

    Parameters
    ----------
    voxels : (N, 3) array-like
        One (i, j, k) row per voxel, in source order.
    attributes : mapping, optional
        Attributes of the source element.
    vertices : sequence of numbers, optional
        Vertex indices read from the same element.  Kept beside the voxels,
        not in them; empty for any element that passed validation.
    """

    kind = 'volume'
    _geometry_name = 'voxels'

    def __init__(self, voxels=(), attributes=None, vertices=()):
        super().__init__(attributes)
        voxels = np.array(voxels, dtype=np.float64)
        if voxels.size == 0:
            voxels = voxels.reshape(0, 3)
        if voxels.ndim != 2 or voxels.shape[1] != 3:
            raise ValueError('voxels must be an (N, 3) array of i, j, k indices')
        self._voxels = _readonly(voxels)
        self._vertices = _readonly(np.array(vertices, dtype=np.float64).reshape(-1))

    @property
    def voxels(self):
        return self._voxels

    @property
    def vertices(self):
        return self._vertices

    def _arrays(self):
        return (self._voxels, self._vertices)

    def _to_xml_element(self):
        brain_model = xml.Element('BrainModel')
        self._attributes_to_xml(brain_model)
        if len(self.voxels):
            voxel_indices = xml.SubElement(brain_model, 'VoxelIndicesIJK')
            voxel_indices.text = '\n'.join(
                ' '.join(_format_number(v) for v in row) for row in self.voxels
            )
        if len(self.vertices):
            self._vertices_to_xml(brain_model)
        return brain_model
