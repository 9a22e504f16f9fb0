#!/usr/bin/env python3
import subprocess, sys

TEST_PATHS = ["lazyutf8/tests", "tests"]


def main():
    try:
        res = subprocess.run([sys.executable, "-m", "pytest", "-q", *TEST_PATHS], capture_output=True, text=True)
    except FileNotFoundError:
        print("pytest not found. Run: pip install -e .[test]")
        return 1
    print(res.stdout)
    if res.returncode != 0:
        print(res.stderr)
    summary = ""
    for line in reversed((res.stdout or "").splitlines()):
        if "passed" in line or "failed" in line:
            summary = line.strip()
            break
    print("\nSUMMARY:", summary)
    return res.returncode


if __name__ == "__main__":
    sys.exit(main())
