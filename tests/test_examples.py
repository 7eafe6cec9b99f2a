from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path


def test_examples_run_without_credentials() -> None:
    """Every example starts, notices the missing configuration and exits cleanly."""
    examples_dir = Path(__file__).resolve().parents[1] / "examples"
    assert examples_dir.is_dir()

    example_files = [p for p in examples_dir.iterdir() if p.is_file() and p.suffix == ".py"]
    assert example_files, "No example .py files found in examples/"

    env = {k: v for k, v in os.environ.items() if not k.startswith("OUTSETA_")}
    for script_path in example_files:
        result = subprocess.run(
            [sys.executable, str(script_path)],
            capture_output=True,
            text=True,
            timeout=45,
            env=env,
            cwd=examples_dir,
        )
        assert result.returncode == 0, (
            f"{script_path.name} failed with code {result.returncode}\n"
            f"STDOUT:\n{result.stdout}\n"
            f"STDERR:\n{result.stderr}"
        )
        assert "Error:" in result.stdout
