# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the ciftimodels package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Context manager opener for reading CIFTI files and file objects"""

from __future__ import annotations

import gzip
import io
import typing as ty
from bz2 import BZ2File
from os.path import splitext

if ty.TYPE_CHECKING:
    from types import TracebackType

    OpenerFunc = ty.Callable[..., io.IOBase]


@ty.runtime_checkable
class Fileish(ty.Protocol):
    def read(self, size: int = -1, /) -> bytes: ...


class Opener:
    r"""Class to accept, maybe open, and context-manage file-likes / filenames

    Provides context manager to close files that the constructor opened for
    you.

    Parameters
    ----------
    fileish : str or file-like
        if str, then open for binary reading with a method suited to the file
        extension (``.gz``, ``.bz2`` or plain).  If file-like, accept as is
    """

    compress_ext_map: dict[str | None, OpenerFunc] = {
        '.gz': gzip.open,
        '.bz2': BZ2File,
        None: open,  # default
    }

    fobj: io.IOBase

    def __init__(self, fileish: str | io.IOBase):
        if isinstance(fileish, (io.IOBase, Fileish)):
            self.fobj = fileish
            self.me_opened = False
            self._name = getattr(fileish, 'name', None)
            return
        opener = self._get_opener(str(fileish))
        self.fobj = opener(fileish, mode='rb')
        self._name = str(fileish)
        self.me_opened = True

    def _get_opener(self, fileish: str) -> OpenerFunc:
        _, ext = splitext(fileish)
        return self.compress_ext_map.get(ext.lower(), self.compress_ext_map[None])

    @property
    def closed(self) -> bool:
        return self.fobj.closed

    @property
    def name(self) -> str | None:
        """Return ``self.fobj.name`` or self._name if not present

        self._name will be None if object was created with a fileobj, otherwise
        it will be the filename.
        """
        return self._name

    def read(self, size: int = -1, /) -> bytes:
        return self.fobj.read(size)

    def tell(self, /) -> int:
        return self.fobj.tell()

    def close(self, /) -> None:
        return self.fobj.close()

    def close_if_mine(self) -> None:
        """Close ``self.fobj`` iff we opened it in the constructor"""
        if self.me_opened:
            self.close()

    def __enter__(self) -> Opener:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close_if_mine()
