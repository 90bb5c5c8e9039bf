"""Basic smoke tests for the caw package."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest


@pytest.mark.skipif(sys.executable is None, reason="Python executable not available")
def test_module_help_runs() -> None:
    """``python -m caw --help`` lists the subcommands."""
    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    env = os.environ.copy()
    existing_path = env.get("PYTHONPATH", "")
    env["PYTHONPATH"] = (
        f"{src_dir}{os.pathsep}{existing_path}" if existing_path else str(src_dir)
    )

    result = subprocess.run(
        [sys.executable, "-m", "caw", "--help"],
        check=False,
        capture_output=True,
        text=True,
        env=env,
    )
    assert result.returncode == 0, result.stderr
    for command in ("don", "doff", "doctor"):
        assert command in result.stdout
