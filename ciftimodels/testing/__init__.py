# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the ciftimodels package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Utilities for testing"""

from importlib.resources import files

import numpy as np

from ..ciftifile import CIFTI_EXTENSION_CODE, header_dtd, sizeof_hdr


def get_test_data(fname=None):
    parts = ('tests', 'data')
    if fname is not None:
        parts += (fname,)
    return files('ciftimodels').joinpath(*parts)


# set path to example data
data_path = get_test_data()


def cifti2_bytes(xml, endianness='<', code=CIFTI_EXTENSION_CODE, extra_extensions=()):
    """Minimal single-file NIfTI-2 image carrying `xml` as a header extension

    Parameters
    ----------
    xml : bytes
        Extension content
    endianness : {'<', '>'}, optional
        Byte order of the header and the extension preambles
    code : int, optional
        Extension code for `xml`
    extra_extensions : sequence of (code, bytes), optional
        Extensions written before the `xml` one

    Returns
    -------
    contents : bytes
        Header, extensions and a 4 byte data block
    """
    extensions = b''
    for ecode, content in tuple(extra_extensions) + ((code, xml),):
        # pad content so that the extension is a multiple of 16 bytes
        content += b'\x00' * (-(len(content) + 8) % 16)
        preamble = np.array([len(content) + 8, ecode], dtype=f'{endianness}i4')
        extensions += preamble.tobytes() + content
    hdr = np.zeros((), dtype=np.dtype(header_dtd).newbyteorder(endianness))
    hdr['sizeof_hdr'] = sizeof_hdr
    hdr['magic'] = b'n+2'
    hdr['vox_offset'] = sizeof_hdr + 4 + len(extensions)
    hdr['intent_code'] = 3006
    return hdr.tobytes() + b'\x01\x00\x00\x00' + extensions + b'\x00' * 4
