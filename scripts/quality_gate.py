"""Run lint, format, type and test checks and print one JSON report.

Usage:
    python scripts/quality_gate.py              # everything
    python scripts/quality_gate.py --skip-tests # no pytest
    python scripts/quality_gate.py --fix        # let ruff fix what it can first
"""

from __future__ import annotations

import argparse
import json
import re
import subprocess
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent

# mcp_server is left out: its FastMCP import is an optional extra.
MYPY_TARGETS = [
    "yggdrasilctl/client.py",
    "yggdrasilctl/models.py",
    "yggdrasilctl/exceptions.py",
    "yggdrasilctl/values.py",
    "yggdrasilctl/formatters/",
]

_LINT_LINE = re.compile(r"^\S+:\d+:\d+:")


def _run(cmd: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(cmd, capture_output=True, text=True, cwd=str(ROOT), timeout=300)


def _timed(cmd: list[str]) -> tuple[subprocess.CompletedProcess, float]:
    t0 = time.monotonic()
    r = _run(cmd)
    return r, round(time.monotonic() - t0, 1)


def _report(r: subprocess.CompletedProcess, duration: float, output: str, **counts) -> dict:
    ok = r.returncode == 0
    result: dict = {"status": "pass" if ok else "fail", **counts, "duration_s": duration}
    if not ok:
        result["output"] = output
    return result


def check_ruff_lint(fix: bool = False) -> dict:
    if fix:
        _run([sys.executable, "-m", "ruff", "check", "--fix", "."])
    r, duration = _timed([sys.executable, "-m", "ruff", "check", "."])
    errors = sum(1 for line in r.stdout.splitlines() if _LINT_LINE.match(line))
    return _report(r, duration, r.stdout.strip(), errors=errors)


def check_ruff_format() -> dict:
    r, duration = _timed([sys.executable, "-m", "ruff", "format", "--check", "."])
    lines = r.stdout.splitlines() + r.stderr.splitlines()
    pending = sum(1 for line in lines if line.startswith("Would reformat"))
    return _report(r, duration, r.stdout.strip(), files_to_reformat=pending)


def check_mypy() -> dict:
    r, duration = _timed([sys.executable, "-m", "mypy", *MYPY_TARGETS])
    errors = sum(1 for line in r.stdout.splitlines() if ": error:" in line)
    return _report(r, duration, r.stdout.strip(), errors=errors)


def check_pytest() -> dict:
    r, duration = _timed([sys.executable, "-m", "pytest", "-q", "--no-header", "--tb=short"])
    summary = r.stdout.strip().splitlines()[-1:] or [""]
    passed = re.search(r"(\d+)\s+passed", summary[0])
    failed = re.search(r"(\d+)\s+failed", summary[0])
    return _report(
        r,
        duration,
        r.stdout.strip()[-2000:],
        passed=int(passed.group(1)) if passed else 0,
        failed=int(failed.group(1)) if failed else 0,
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Run all quality checks")
    parser.add_argument("--skip-tests", action="store_true", help="Skip pytest")
    parser.add_argument("--fix", action="store_true", help="Auto-fix ruff issues first")
    args = parser.parse_args()

    t0 = time.monotonic()
    checks: dict[str, dict] = {}
    print("Running ruff lint...", file=sys.stderr)
    checks["ruff_lint"] = check_ruff_lint(fix=args.fix)
    print("Running ruff format...", file=sys.stderr)
    checks["ruff_format"] = check_ruff_format()
    print("Running mypy...", file=sys.stderr)
    checks["mypy"] = check_mypy()
    if args.skip_tests:
        checks["pytest"] = {"status": "skip", "reason": "--skip-tests"}
    else:
        print("Running pytest...", file=sys.stderr)
        checks["pytest"] = check_pytest()

    passing = all(c["status"] in ("pass", "skip") for c in checks.values())
    print(
        json.dumps(
            {
                "overall": "pass" if passing else "fail",
                "checks": checks,
                "total_duration_s": round(time.monotonic() - t0, 1),
            },
            indent=2,
        )
    )
    sys.exit(0 if passing else 1)


if __name__ == "__main__":
    main()
