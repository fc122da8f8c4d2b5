#!/usr/bin/env python3
"""
Run the CI checks locally using the ACTIVE virtual environment.

Steps:
  1) uv sync --all-extras --dev [--frozen if uv.lock exists]
  2) black --check (line length 120) on glyphnames/, scripts/ and tests/
  3) mypy on glyphnames/ and scripts/
  4) pytest tests/ with coverage, PYTHONPATH=<repo root>

Commands run from the directory holding pyproject.toml, wherever this is invoked from.
"""

import os
import sys
import shutil
import subprocess
from pathlib import Path

BLACK_VERSION = "24.8.0"
LINE_LENGTH = "120"
COVERAGE_FLOOR = "80"


def repo_root() -> Path:
    here = Path(__file__).resolve().parent
    for d in [here] + list(here.parents):
        if (d / "pyproject.toml").exists():
            return d
    return here


REPO = repo_root()


def uv_exe() -> list[str]:
    uv_path = shutil.which("uv")
    if uv_path:
        return [uv_path]
    print("ERROR: 'uv' not found. Install uv first.", file=sys.stderr)
    sys.exit(2)


def run(cmd: list[str], *, env: dict[str, str] | None = None) -> None:
    print(">>>", " ".join(cmd))
    subprocess.run(cmd, check=True, cwd=str(REPO), env=env)


def script_paths() -> list[str]:
    return [str(p.relative_to(REPO)) for p in sorted((REPO / "scripts").glob("*.py"))]


def run_black(paths: list[str]) -> None:
    uvx = shutil.which("uvx")
    if uvx:
        run([uvx, "--from", f"black=={BLACK_VERSION}", "black", *paths, "--check", "--line-length", LINE_LENGTH])
    else:
        run(uv_exe() + ["run", "--active", "black", *paths, "--check", "--line-length", LINE_LENGTH])


def main() -> None:
    sync_args = ["sync", "--active", "--all-extras", "--dev"]
    if (REPO / "uv.lock").exists():
        sync_args.append("--frozen")
    run(uv_exe() + sync_args)

    run_black(["glyphnames", "tests"] + script_paths())

    run(uv_exe() + ["run", "--active", "mypy", "glyphnames", *script_paths(), "--ignore-missing-imports"])

    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO)
    run(
        uv_exe()
        + [
            "run",
            "--active",
            "pytest",
            "tests/",
            "--cov=glyphnames",
            "--cov-report=term-missing",
            f"--cov-fail-under={COVERAGE_FLOOR}",
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
