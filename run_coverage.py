"""
Coverage runner for swflaunch.
Runs the test suite under pytest-cov and prints missing lines.
"""

import subprocess
import sys
from pathlib import Path


def run_coverage():
    """Run tests with coverage and write terminal and XML reports."""

    cmd = [
        sys.executable,
        "-m",
        "pytest",
        "--cov=swflaunch",
        "--cov-report=term-missing",
        "--cov-report=xml",
        "tests",
    ]

    project_dir = Path(__file__).resolve().parent
    result = subprocess.run(cmd, check=False, cwd=str(project_dir))
    sys.exit(result.returncode)


if __name__ == "__main__":
    run_coverage()
