"""
Shared fixtures for running IMP scripts through the command line.
"""
import subprocess
import sys
from pathlib import Path

import pytest

CLI = Path(__file__).resolve().parents[2] / "impi.py"


@pytest.fixture
def write_script(tmp_path):
    """
    Return a helper that writes a script file and returns its path.

    ``bytes`` content is written unchanged so tests can supply invalid encodings.
    """
    def write(content, name="script.imp"):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path
    return write


@pytest.fixture
def run_cli():
    """
    Return a helper that runs ``impi.py`` in a subprocess.
    """
    def run(*args):
        return subprocess.run(
            [sys.executable, str(CLI), *map(str, args)],
            capture_output=True, text=True, check=False,
        )
    return run
