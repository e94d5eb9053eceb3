# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the ciftimodels package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Parse ``BrainModel`` elements of a CIFTI XML header into brain model records

>>> from ciftimodels import xmlutils as xml
>>> node = xml.fromstring(
...     '<BrainModel IndexOffset="0" IndexCount="2" '
...     'BrainStructure="CIFTI_STRUCTURE_THALAMUS_LEFT">'
...     '<VoxelIndicesIJK>1 2 3 4 5 6</VoxelIndicesIJK></BrainModel>')
>>> record, = parse_brain_model([node])
>>> record.kind
'volume'
>>> record.voxels.tolist()
[[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
>>> record.index_count
2.0
"""
import re
from collections import namedtuple
from collections.abc import Iterable

import numpy as np
from packaging.version import InvalidVersion, Version, parse

from . import xmlutils as xml
from .brainmodel import (
    CIFTI_NUMERIC_ATTRIBUTES,
    BrainModelError,
    CiftiXmlError,
    ConflictingGeometryError,
    DuplicateVertexBlockError,
    DuplicateVoxelBlockError,
    InconsistentVoxelGroupingError,
    NumericCoercionError,
    SurfaceBrainModel,
    VolumeBrainModel,
)
from .ciftiglobals import logger

#: Result of :func:`voxel_layout`: the layout recognized in the text and the
#: ``(N, 3)`` array of voxel indices read with it
VoxelLayout = namedtuple('VoxelLayout', ['policy', 'triples'])


# Plain decimal literals: no digit group underscores, no non-ASCII digits
_NUMBER = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.ASCII | re.IGNORECASE,
)


def _to_numbers(tokens, where):
    for token in tokens:
        if not _NUMBER.fullmatch(token):
            raise NumericCoercionError(f'{where} holds a value that is not a number: {token!r}')
    try:
        return np.array(tokens, dtype=np.float64)
    except ValueError as e:
        raise NumericCoercionError(f'{where} holds a value that is not a number ({e})') from e


def node_attributes(node, numeric_attributes=CIFTI_NUMERIC_ATTRIBUTES):
    """Attributes of `node`, numbers where the attribute name says so

    Parameters
    ----------
    node : Element
        XML element
    numeric_attributes : container of str, optional
        Names of the attributes to convert to float.  Every other attribute
        keeps its string value.

    Returns
    -------
    attributes : dict
        Attribute name to value, in source order
    """
    attributes = xml.attributes(node)
    for key, value in attributes.items():
        if key in numeric_attributes:
            if not _NUMBER.fullmatch(value.strip()):
                raise NumericCoercionError(
                    f'Attribute {key} should be a number; found {value!r}'
                )
            attributes[key] = float(value)
    return attributes


def vertex_indices(node):
    """Vertex indices of the ``VertexIndices`` child of `node`

    Returns an empty array if there is no such child or it has no text.
    """
    blocks = xml.children(node, 'VertexIndices')
    if len(blocks) > 1:
        raise DuplicateVertexBlockError('multiple vertex index blocks')
    if not blocks:
        return np.empty(0)
    return _to_numbers(xml.text(blocks[0]).split(), 'VertexIndices')


def voxel_layout(text):
    """Read (i, j, k) voxel triples from the text of a ``VoxelIndicesIJK`` element

    Two layouts are accepted:

    * ``'grouped'`` - one triple per line;
    * ``'flat'`` - all numbers on a single line, or one number per line, with
      a total count that is a multiple of three.  Consecutive numbers form the
      triples.

    Parameters
    ----------
    text : str
        Element text

    Returns
    -------
    layout : VoxelLayout
        ``policy`` is ``'grouped'``, ``'flat'``, or ``'empty'`` for blank
        text.  ``triples`` is an ``(N, 3)`` float array.

    Raises
    ------
    InconsistentVoxelGroupingError
        If the text follows neither layout

    Examples
    --------
    >>> voxel_layout('1 2 3\\n4 5 6').policy
    'grouped'
    >>> voxel_layout('1 2 3 4 5 6').policy
    'flat'
    """
    groups = [line.split() for line in text.splitlines() if line.strip()]
    if not groups:
        return VoxelLayout('empty', np.empty((0, 3)))
    sizes = {len(group) for group in groups}
    n_tokens = sum(len(group) for group in groups)
    if sizes == {3}:
        policy = 'grouped'
    elif (len(groups) == 1 or sizes == {1}) and n_tokens % 3 == 0:
        policy = 'flat'
    else:
        raise InconsistentVoxelGroupingError('unrecognized or inconsistent voxel IJK sequence')
    tokens = [token for group in groups for token in group]
    return VoxelLayout(policy, _to_numbers(tokens, 'VoxelIndicesIJK').reshape(-1, 3))


def voxel_indices(node):
    """Voxel triples of the ``VoxelIndicesIJK`` child of `node`

    Returns an empty ``(0, 3)`` array if there is no such child or it has no
    text.  A second ``VoxelIndicesIJK`` child is not ignored: it raises
    :class:`DuplicateVoxelBlockError`, the voxel counterpart of
    :class:`DuplicateVertexBlockError`.  Text that is neither layout of
    :func:`voxel_layout` raises :class:`InconsistentVoxelGroupingError`.
    """
    blocks = xml.children(node, 'VoxelIndicesIJK')
    if len(blocks) > 1:
        raise DuplicateVoxelBlockError('multiple voxel index blocks')
    if not blocks:
        return np.empty((0, 3))
    return voxel_layout(xml.text(blocks[0])).triples


def _parse_node(node, numeric_attributes):
    attributes = node_attributes(node, numeric_attributes)
    vertices = vertex_indices(node)
    voxels = voxel_indices(node)

    has_vertices = len(vertices) > 0
    has_voxels = len(voxels) > 0
    if has_vertices and has_voxels:
        raise ConflictingGeometryError('bad specification for Vox IJK or Vertices')

    if has_voxels:
        return VolumeBrainModel(voxels, attributes, vertices=vertices)
    return SurfaceBrainModel(vertices, attributes)


def _is_node_sequence(node):
    return (
        isinstance(node, Iterable)
        and not isinstance(node, (str, bytes))
        and not xml.is_element(node)
    )


def _is_nested(nodes):
    nested = [_is_node_sequence(node) for node in nodes]
    if any(nested) and not all(nested):
        raise TypeError('nodes should be all elements or all sequences of elements, not a mix')
    return len(nodes) > 0 and all(nested)


def parse_brain_model(nodes, numeric_attributes=CIFTI_NUMERIC_ATTRIBUTES):
    """Parse ``BrainModel`` elements into brain model records

    Parameters
    ----------
    nodes : sequence of Element
        ``BrainModel`` elements, as returned by :func:`brain_model_nodes`.
        A sequence of such sequences (one per index map) is also accepted.
    numeric_attributes : container of str, optional
        Names of the attributes to convert to float

    Returns
    -------
    records : list
        One :class:`SurfaceBrainModel` or :class:`VolumeBrainModel` per
        element, in input order; a list of such lists for nested input.

    Raises
    ------
    BrainModelError
        Subclasses name the problem with the first bad element.  Nothing is
        returned for the other elements.
    TypeError
        If `nodes` mixes elements and sequences of elements at one level
    """
    if xml.is_element(nodes):
        nodes = [nodes]
    nodes = list(nodes)
    if _is_nested(nodes):
        return [parse_brain_model(nodeset, numeric_attributes) for nodeset in nodes]

    records = []
    for position, node in enumerate(nodes):
        try:
            record = _parse_node(node, numeric_attributes)
        except BrainModelError as e:
            e.args = (f'BrainModel {position}: {e}',) + e.args[1:]
            raise
        if len(record) == 0:
            logger.debug('BrainModel %d has neither vertex nor voxel indices', position)
        else:
            logger.debug('BrainModel %d: %s model of %d indices', position, record.kind, len(record))
        records.append(record)
    return records


def _applies_to(index_map):
    value = index_map.attrib.get('AppliesToMatrixDimension', '')
    try:
        return [int(dim) for dim in value.split(',') if dim.strip()]
    except ValueError as e:
        raise CiftiXmlError(f'Invalid AppliesToMatrixDimension {value!r}') from e


def brain_model_nodes(source, dimension=None):
    """``BrainModel`` elements of a CIFTI XML document, in document order

    Parameters
    ----------
    source : str, bytes or Element
        CIFTI XML document, or its parsed root element
    dimension : None or int, optional
        If given, only search the index maps that apply to this matrix
        dimension.

    Returns
    -------
    nodes : list of Element
    """
    if xml.is_element(source):
        root = source
    else:
        try:
            root = xml.fromstring(source)
        except xml.ParseError as e:
            raise CiftiXmlError(f'Could not parse CIFTI XML: {e}') from e
    if root.tag != 'CIFTI':
        raise CiftiXmlError(f'Root element should be CIFTI; found {root.tag}')
    version = root.attrib.get('Version')
    if version is not None:
        try:
            too_old = parse(version) < Version('2')
        except InvalidVersion as e:
            raise CiftiXmlError(f'Invalid CIFTI version {version!r}') from e
        if too_old:
            raise CiftiXmlError(f'Only CIFTI-2 files are supported; found version {version}')

    nodes = []
    for index_map in xml.children(root, 'Matrix/MatrixIndicesMap'):
        if dimension is not None and dimension not in _applies_to(index_map):
            continue
        nodes.extend(xml.children(index_map, 'BrainModel'))
    return nodes


def get_brain_model(
    fname, dimension=None, numeric_attributes=CIFTI_NUMERIC_ATTRIBUTES, verbose=False
):
    """Brain model records of a CIFTI-2 file

    Parameters
    ----------
    fname : str or file-like
        CIFTI-2 file, possibly gzip or bz2 compressed
    dimension : None or int, optional
        Restrict to the index maps of one matrix dimension
    numeric_attributes : container of str, optional
        Names of the attributes to convert to float
    verbose : bool, optional
        Log progress at info level

    Returns
    -------
    records : list
        Records of all ``BrainModel`` elements, in document order
    """
    from .ciftifile import read_cifti_xml

    nodes = brain_model_nodes(read_cifti_xml(fname), dimension=dimension)
    if verbose:
        logger.info('Parsing Brain Model Data')
    return parse_brain_model(nodes, numeric_attributes)
