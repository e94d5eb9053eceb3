# emacs: -*- mode: python; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
"""Test the cifti-brainmodels script"""

import pytest

import ciftimodels as cm
import ciftimodels.cmdline.utils
from ciftimodels.cmdline.ls_brainmodels import main
from ciftimodels.testing import cifti2_bytes, data_path


@pytest.fixture
def cifti_file(tmp_path):
    path = tmp_path / 'models.dscalar.nii'
    path.write_bytes(cifti2_bytes((data_path / 'brainmodels.xml').read_bytes()))
    return str(path)


@pytest.fixture(autouse=True)
def reset_verbosity(monkeypatch):
    monkeypatch.setattr(ciftimodels.cmdline.utils, 'verbose_level', 0)
    monkeypatch.setattr(cm.logger, 'level', cm.logger.level)


def test_ls_brainmodels(cifti_file, capsys):
    main([cifti_file])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    fields = [line.split() for line in lines]
    assert [f[0] for f in fields] == [cifti_file] * 4
    assert [f[1:] for f in fields] == [
        ['0', 'surface', 'CIFTI_STRUCTURE_CORTEX_LEFT', '0', '5', '5'],
        ['1', 'surface', 'CIFTI_STRUCTURE_CORTEX_RIGHT', '5', '3', '3'],
        ['2', 'volume', 'CIFTI_STRUCTURE_THALAMUS_LEFT', '8', '3', '3'],
        ['3', 'volume', 'CIFTI_STRUCTURE_THALAMUS_RIGHT', '11', '2', '2'],
    ]


def test_ls_brainmodels_dimension(cifti_file, capsys):
    main(['-d', '0', cifti_file])
    assert capsys.readouterr().out.split() == [cifti_file, '-']


def test_ls_brainmodels_bad_file(cifti_file, tmp_path, capsys):
    bad = tmp_path / 'bad.nii'
    bad.write_bytes(b'\x00' * 600)
    missing = str(tmp_path / 'missing.nii')
    main([str(bad), missing, cifti_file])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split() == [str(bad), '!error']
    assert lines[1].split() == [missing, '!error']
    assert len(lines) == 6


def test_ls_brainmodels_verbose(tmp_path, capsys):
    bad = tmp_path / 'bad.nii'
    bad.write_bytes(b'\x00' * 600)
    main(['-vv', str(bad)])
    out = capsys.readouterr().out
    assert f' Loading {bad}' in out
    assert 'Failed to gather brain models' in out


def test_ls_brainmodels_version(capsys):
    with pytest.raises(SystemExit):
        main(['--version'])
    assert cm.__version__ in capsys.readouterr().out
