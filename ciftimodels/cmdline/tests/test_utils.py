# emacs: -*- mode: python; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
"""Test cmdline helpers"""

from io import StringIO

import pytest

import ciftimodels.cmdline.utils
from ciftimodels.cmdline.utils import _err, fmt_number, table2string, verbose


def test_table2string():
    assert table2string([['A', 'B', 'C', 'D'], ['E', 'F', 'G', 'H']]) == 'A B C D\nE F G H\n'
    assert (
        table2string(
            [
                ["Let's", 'Make', 'Tests', 'And'],
                ['Have', 'Lots', 'Of', 'Fun'],
                ['With', 'Python', 'Guys', '!'],
            ]
        )
        == "Let's  Make  Tests And\nHave   Lots   Of   Fun\nWith  Python Guys   !\n"
    )
    assert table2string([['@lA', '@r1'], ['@lBBB', '@r22']]) == 'A    1\nBBB 22\n'
    out = StringIO()
    assert table2string([['A']], out) is None
    assert out.getvalue() == 'A\n'
    with pytest.raises(ValueError):
        table2string([['@xA']])


def test_err():
    assert _err() == '!error'
    assert _err('bad') == '!bad'


def test_fmt_number():
    assert fmt_number(None) == '-'
    assert fmt_number(32492.0) == '32492'
    assert fmt_number(0.5) == '0.5'
    assert fmt_number('5') == '5'


def test_verbose(capsys, monkeypatch):
    monkeypatch.setattr(ciftimodels.cmdline.utils, 'verbose_level', 1)
    verbose(1, 'shown')
    verbose(2, 'hidden')
    assert capsys.readouterr().out == ' shown\n'
