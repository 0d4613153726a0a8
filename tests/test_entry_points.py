import sys

import pytest

import run_converter
from fnt2lua import main as main_module


def test_standalone_script_uses_package_main():
    assert run_converter.main is main_module.main


def test_missing_input_file_exits(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr(sys, "argv", ["fnt2lua", str(tmp_path / "missing.fnt")])

    with pytest.raises(SystemExit) as excinfo:
        main_module.main()

    assert excinfo.value.code == 1
    assert "File not found" in capsys.readouterr().err
