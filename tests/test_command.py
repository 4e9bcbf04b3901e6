"""run_cmd against real short-lived child processes."""

import sys

import pytest

from pimcore_vsf_installer.lib.command import run_cmd


def test_exit_code_is_reported(tmp_path):
    r = run_cmd([sys.executable, "-c", "import sys; sys.exit(3)"], cwd=str(tmp_path))

    assert r.returncode == 3


def test_missing_working_directory_raises_os_error(tmp_path):
    with pytest.raises(OSError):
        run_cmd([sys.executable, "-c", "pass"], cwd=str(tmp_path / "missing"))


def test_output_is_appended_to_log(tmp_path):
    log = tmp_path / "install.log"
    log.write_text("earlier\n", encoding="utf-8")

    r = run_cmd(
        [sys.executable, "-c", "import sys; print('out'); print('err', file=sys.stderr)"],
        cwd=str(tmp_path),
        output_path=str(log),
    )

    text = log.read_text(encoding="utf-8")
    assert r.returncode == 0
    assert text.startswith("earlier\n")
    assert "out" in text
    assert "err" in text


def test_dry_run_does_not_execute(tmp_path):
    marker = tmp_path / "ran"

    r = run_cmd([sys.executable, "-c", f"open({str(marker)!r}, 'w').close()"], dry_run=True)

    assert r.returncode == 0
    assert not marker.exists()
