#!/usr/bin/env python3
"""
Run the CI checks for rusnames locally, inside the ACTIVE virtual environment.

Steps:
  1) uv sync --all-extras (frozen when uv.lock exists)
  2) black --check on the package, the tests and this scripts/ directory
  3) mypy on the package and the scripts
  4) pytest with coverage of the rusnames package

Every command runs from the repository root (the directory holding pyproject.toml).
"""

import os
import sys
import shutil
import subprocess
from pathlib import Path

BLACK = "black==24.8.0"
LINE_LENGTH = "120"
MIN_COVERAGE = "90"


def find_repo_root() -> Path:
    here = Path(__file__).resolve().parent
    for candidate in [here, *here.parents]:
        if (candidate / "pyproject.toml").exists():
            return candidate
    return here


REPO = find_repo_root()


def uv() -> list[str]:
    path = shutil.which("uv")
    if path:
        return [path]
    print("ERROR: 'uv' not found. Install uv first.", file=sys.stderr)
    sys.exit(2)


def run(cmd: list[str], env: dict[str, str] | None = None) -> None:
    print(">>>", " ".join(cmd))
    subprocess.run(cmd, check=True, cwd=str(REPO), env=env)


def python_targets() -> list[str]:
    scripts = [str(p.relative_to(REPO)) for p in sorted((REPO / "scripts").glob("*.py"))]
    return ["rusnames", "tests", *scripts]


def main() -> None:
    sync = ["sync", "--active", "--all-extras"]
    if (REPO / "uv.lock").exists():
        sync.append("--frozen")
    run(uv() + sync)

    uvx = shutil.which("uvx")
    if uvx:
        run([uvx, "--from", BLACK, "black", *python_targets(), "--check", "--line-length", LINE_LENGTH])
    else:
        run(uv() + ["run", "--active", "black", *python_targets(), "--check", "--line-length", LINE_LENGTH])

    run(uv() + ["run", "--active", "mypy", *[t for t in python_targets() if t != "tests"]])

    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO)
    run(
        uv()
        + [
            "run",
            "--active",
            "pytest",
            "tests/",
            "--cov=rusnames",
            "--cov-report=term-missing",
            f"--cov-fail-under={MIN_COVERAGE}",
        ],
        env=env,
    )

    print("\nALL CHECKS PASSED")


if __name__ == "__main__":
    try:
        main()
    except subprocess.CalledProcessError as e:
        print(f"\nCommand failed with exit code {e.returncode}", file=sys.stderr)
        sys.exit(e.returncode)
