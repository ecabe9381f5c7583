#!/usr/bin/env python3
"""
Test runner script for the conditional package.
Run this script to execute tests with proper environment setup.
"""

import os
import sys
import subprocess
import argparse


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Run conditional tests")
    parser.add_argument("--unit-only", action="store_true", help="Run only unit tests")
    parser.add_argument("--cov", action="store_true", help="Generate coverage report")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging in the package (CONDITIONAL_DEBUG)"
    )
    return parser.parse_args()


def run_tests(args):
    """Run tests based on command line arguments."""
    cmd = ["pytest"]

    if args.verbose:
        cmd.append("-v")

    if args.cov:
        cmd.extend(["--cov=conditional", "--cov-report=term-missing"])

    if args.unit_only:
        cmd.append("tests/unit/")

    env = dict(os.environ)
    if args.debug:
        env["CONDITIONAL_DEBUG"] = "true"

    print(f"Running: {' '.join(cmd)}")

    try:
        result = subprocess.run(cmd, check=True, env=env)
        return result.returncode
    except subprocess.CalledProcessError as e:
        print(f"Tests failed with code {e.returncode}")
        return e.returncode


if __name__ == "__main__":
    # Ensure we're in the project root directory
    script_dir = os.path.dirname(os.path.abspath(__file__))
    os.chdir(script_dir)

    args = parse_args()

    sys.exit(run_tests(args))
