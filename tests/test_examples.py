"""Smoke tests for example scripts.

These tests ensure that the example scripts can be imported and run their
main execution paths without raising exceptions.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

# Determine the repo root
ROOT = Path(__file__).resolve().parents[1]


def test_route_planning_example_runs() -> None:
    """Test that examples/route_planning.py runs successfully."""
    script = ROOT / "examples" / "route_planning.py"
    assert script.exists(), f"Example script not found: {script}"

    result = subprocess.run(
        [sys.executable, str(script)],
        capture_output=True,
        text=True,
        check=False,
        timeout=30,  # Should complete in seconds
    )

    assert result.returncode == 0, (
        f"Example script failed with return code {result.returncode}.\n"
        f"STDOUT:\n{result.stdout}\n"
        f"STDERR:\n{result.stderr}"
    )

    # Verify expected output is present
    assert "Final MST weight" in result.stdout, (
        "Expected output message not found in script output"
    )
    assert "Topological Sort Result" in result.stdout
