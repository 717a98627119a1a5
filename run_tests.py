#!/usr/bin/env python3
"""
Test runner for the link tracker.
Extra arguments are passed straight to pytest (e.g. -k track).
"""

import os
import subprocess
import sys


def run_tests(extra_args):
    """Run the test suite from the project root"""
    os.chdir(os.path.dirname(os.path.abspath(__file__)))
    
    try:
        result = subprocess.run(
            [sys.executable, "-m", "pytest", "tests/", "-v", "--tb=short", *extra_args]
        )
    except FileNotFoundError:
        print("pytest not found. Install with: pip install -e .[test]")
        return 1
    
    if result.returncode == 0:
        print("\nAll tests passed")
    else:
        print(f"\nTests failed with exit code {result.returncode}")
    return result.returncode


if __name__ == "__main__":
    sys.exit(run_tests(sys.argv[1:]))
