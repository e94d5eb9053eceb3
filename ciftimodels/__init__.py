# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the ciftimodels package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##

from .info import __version__
from .info import long_description as __doc__

__doc__ += """
Quickstart
==========

::

   import ciftimodels as cm

   records = cm.get_brain_model('my_file.dscalar.nii')
   for record in records:
       print(record.brain_structure, record.kind, len(record))

   # or from XML you already have
   nodes = cm.brain_model_nodes(xml_bytes, dimension=1)
   records = cm.parse_brain_model(nodes)
"""

# isort: split

# object imports
from .brainmodel import (
    CIFTI_NUMERIC_ATTRIBUTES,
    BrainModelError,
    BrainModelFormatError,
    BrainModelRecord,
    CiftiFileError,
    CiftiXmlError,
    ConflictingGeometryError,
    DuplicateVertexBlockError,
    DuplicateVoxelBlockError,
    InconsistentVoxelGroupingError,
    NumericCoercionError,
    SurfaceBrainModel,
    VolumeBrainModel,
)
from .ciftifile import read_cifti_xml
from .ciftiglobals import logger
from .parse_brainmodel import (
    VoxelLayout,
    brain_model_nodes,
    get_brain_model,
    node_attributes,
    parse_brain_model,
    vertex_indices,
    voxel_indices,
    voxel_layout,
)
