#!/usr/bin/env python
"""
Simple Test Runner for NodeTree
===============================

Runs the test suite through pytest.

Usage:
    python run_tests.py           # Run all tests
    python run_tests.py --cov     # Run with a coverage report (needs pytest-cov)
"""

import subprocess
import sys
import argparse
from pathlib import Path


def run_tests(with_coverage=False):
    """Run the test suite."""
    cmd = [
        sys.executable, "-m", "pytest",
        "tests",
        "--tb=short",               # Short traceback format
        "-v"                        # Verbose output
    ]

    if with_coverage:
        cmd.extend(["--cov=nodetree", "--cov-report=term-missing"])
        print("Running all tests with coverage...")
    else:
        print("Running all tests...")
    print("=" * 60)

    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def main():
    parser = argparse.ArgumentParser(description="Test runner for NodeTree")
    parser.add_argument("--cov", action="store_true", help="Report coverage for the nodetree package")

    args = parser.parse_args()

    return run_tests(with_coverage=args.cov)


if __name__ == "__main__":
    sys.exit(main())
