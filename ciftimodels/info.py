"""Define static ciftimodels metadata

The long description parameter is used in the ciftimodels top-level docstring.
We exec this file in several places, so it cannot import ciftimodels or use
relative imports.
"""

__version__ = '1.0.0'

long_description = """
Extract the ``BrainModel`` entries of a `CIFTI-2`_ file header as typed
records.

Each ``BrainModel`` element of a CIFTI XML index map becomes either a surface
record (vertex indices) or a volume record ((i, j, k) voxel indices), carrying
the element's attributes with the numeric ones converted to floats.  Both
layouts of voxel indices seen in the wild (one triple per line, or one flat
run of numbers) are accepted, and malformed elements raise named errors.

.. _CIFTI-2: https://www.nitrc.org/projects/cifti/

Installation
============

To install from a source checkout, run::

   pip install .

Testing
=======

To test an installed version of ciftimodels, install the test dependencies
and run pytest_::

    pip install ciftimodels[test]
    pytest --pyargs ciftimodels

.. _pytest: https://docs.pytest.org

License
=======

ciftimodels is licensed under the terms of the MIT license.
"""
