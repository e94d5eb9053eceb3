# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the ciftimodels package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Read the CIFTI XML header out of a CIFTI-2 file

A CIFTI-2 file is a single NIfTI-2 file whose header extensions hold the
CIFTI XML in an extension with code 32.  Format of the NIFTI2 container
described here:

    http://www.nitrc.org/forum/message.php?msg_id=3738

Only the fields needed to find the extensions are read; the data array is
never touched.
"""
import warnings

import numpy as np

from .brainmodel import CiftiFileError
from .openers import Opener

#: Extension code of the CIFTI XML in a NIfTI-2 header
CIFTI_EXTENSION_CODE = 32

sizeof_hdr = 540
single_magic = b'n+2'

# The NIfTI-2 header fields we need, at their offsets in the 540 byte header
header_dtd = {
    'names': ['sizeof_hdr', 'magic', 'vox_offset', 'intent_code'],
    'formats': ['i4', 'S4', 'i8', 'i4'],
    'offsets': [0, 4, 168, 504],
    'itemsize': sizeof_hdr,
}


def _read_header(fileobj):
    binaryblock = fileobj.read(sizeof_hdr)
    if len(binaryblock) < sizeof_hdr:
        raise CiftiFileError('File too short for a NIfTI-2 header')
    for endianness in ('<', '>'):
        dt = np.dtype(header_dtd).newbyteorder(endianness)
        hdr = np.frombuffer(binaryblock, dtype=dt, count=1)[0]
        if hdr['sizeof_hdr'] == sizeof_hdr:
            break
    else:
        raise CiftiFileError('Not a NIfTI-2 file; header size should be 540')
    if hdr['magic'] != single_magic:
        raise CiftiFileError(
            f'CIFTI-2 files are single NIfTI-2 files; found magic {hdr["magic"]!r}'
        )
    return hdr, endianness


def read_extensions(fileobj, size, endianness='<'):
    """Read header extensions from a fileobj

    Parameters
    ----------
    fileobj : file-like object
        We begin reading the extensions at the current file position
    size : int
        Number of bytes to read.
    endianness : {'<', '>'}, optional
        Byte order of the extension preambles

    Returns
    -------
    extensions : list of (code, content) tuples
        Trailing NULs are stripped from the content.
    """
    extensions = []
    # each extension is a multiple of 16 bytes, led by 8 bytes of esize and
    # ecode; esize includes those 8 bytes
    while size >= 16:
        ext_def = fileobj.read(8)
        if len(ext_def) != 8:
            raise CiftiFileError('failed to read extension header')
        esize, ecode = np.frombuffer(ext_def, dtype=f'{endianness}i4')
        if esize < 8:
            raise CiftiFileError(f'Invalid extension size {esize}')
        if esize % 16:
            warnings.warn(
                'Extension size is not a multiple of 16 bytes; '
                'Assuming size is correct and hoping for the best',
                UserWarning,
            )
        evalue = fileobj.read(int(esize - 8))
        if len(evalue) != esize - 8:
            raise CiftiFileError('failed to read extension content')
        size -= esize
        extensions.append((int(ecode), evalue.rstrip(b'\x00')))
    return extensions


def read_cifti_xml(fileish):
    """CIFTI XML stored in the header extensions of a CIFTI-2 file

    Parameters
    ----------
    fileish : str or file-like
        File name (``.gz`` and ``.bz2`` files are decompressed) or open binary
        file positioned at the start of the header.  Files given as objects
        are left open.

    Returns
    -------
    xml : bytes
        The CIFTI XML document
    """
    with Opener(fileish) as fileobj:
        hdr, endianness = _read_header(fileobj)
        # the next 4 bytes flag extensions if the first one is not zero
        extension_status = fileobj.read(4)
        if len(extension_status) < 4 or extension_status[0:1] == b'\x00':
            raise CiftiFileError('NIfTI-2 header does not contain extensions')
        extensions = read_extensions(
            fileobj, int(hdr['vox_offset']) - sizeof_hdr - 4, endianness
        )
    for code, content in extensions:
        if code == CIFTI_EXTENSION_CODE:
            return content
    raise CiftiFileError('NIfTI2 header does not contain a CIFTI-2 extension')
