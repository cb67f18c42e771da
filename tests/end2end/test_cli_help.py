from __future__ import annotations

import subprocess
import sys


def test_cli_help_runs() -> None:
    completed = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "infopathreader.cli", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert completed.returncode == 0
    assert "usage: infopathreader" in completed.stdout
    for command in ("views", "schema", "render", "template"):
        assert command in completed.stdout
