import sys

import pytest
from PIL import Image

import run_identicon


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    # Default output lands in tmp and no inherited setting leaks in.
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("IDENTICON_OUTPUT_DIR", raising=False)


def _run(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["run_identicon.py", *args])
    return run_identicon.main()


def test_main_defaults_to_input_name_in_current_directory(tmp_path, monkeypatch):
    assert _run(monkeypatch, "example") == 0
    with Image.open(tmp_path / "example.png") as img:
        assert img.size == (250, 250)


def test_main_uses_output_dir_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("IDENTICON_OUTPUT_DIR", str(tmp_path / "from-env"))
    assert _run(monkeypatch, "example") == 0
    assert (tmp_path / "from-env" / "example.png").exists()


def test_main_output_dir_flag_overrides_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("IDENTICON_OUTPUT_DIR", str(tmp_path / "from-env"))
    assert _run(monkeypatch, "example", "--output-dir", str(tmp_path / "from-flag")) == 0
    assert (tmp_path / "from-flag" / "example.png").exists()
    assert not (tmp_path / "from-env").exists()


def test_main_name_flag(tmp_path, monkeypatch):
    assert _run(monkeypatch, "example", "--name", "avatar") == 0
    assert (tmp_path / "avatar.png").exists()
    assert not (tmp_path / "example.png").exists()


def test_main_returns_1_on_failure(tmp_path, monkeypatch):
    blocker = tmp_path / "blocker"
    blocker.write_bytes(b"")
    assert _run(monkeypatch, "example", "--output-dir", str(blocker)) == 1
    assert blocker.read_bytes() == b""
