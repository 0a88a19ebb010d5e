import pytest

import run_cases as script
from ..cases import PolyCase, dump_cases


def sqrt_two(x0=1.0, roots=(1.4142135623730951,)) -> PolyCase:
    c = PolyCase()
    c.desc = "sqrt two"
    c.coeffs = [-2.0, 0.0, 1.0]
    c.x0 = x0
    c.roots = list(roots)
    return c


def test_cases_dir_from_env(tmp_path, monkeypatch, capsys):
    """ `ROOTFIND_CASES` picks the directory of cases """
    dump_cases([sqrt_two()], tmp_path / "sqrt.yaml")
    monkeypatch.setenv('ROOTFIND_CASES', str(tmp_path))
    script.yaml_testcases()
    out = capsys.readouterr().out
    assert 'Running Test-Cases sqrt.yaml' in out
    assert 'sqrt two' in out


def test_failing_case_exits(tmp_path, monkeypatch, capsys):
    """ Any failing case ends the script with a non-zero exit """
    wrong = sqrt_two(roots=[-1.4142135623730951])
    dump_cases([sqrt_two(), wrong], tmp_path / "sqrt.yaml")
    monkeypatch.setenv('ROOTFIND_CASES', str(tmp_path))
    with pytest.raises(SystemExit) as e:
        script.yaml_testcases()
    assert '1 of 2 cases failed' in str(e.value)
    assert 'Unexpected result for sqrt two' in capsys.readouterr().out
