#!/usr/bin/env python
"""
Test runner script for the YouTube Captions test suite.

Usage:
    python run_tests.py [options]

Options:
    -k EXPR          Only run tests matching the expression
    --verbose        Verbose output
    --quiet          Minimal output
    --xvs            Generate JUnit XML report
    --help           Show this help message
"""

import sys
import os
import subprocess
import argparse


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Run YouTube Captions tests")

    # Test selection options
    test_group = parser.add_argument_group("Test Selection")
    test_group.add_argument("-k", dest="keyword", default="", help="Only run tests matching the expression")

    # Output options
    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument("--verbose", action="store_true", help="Verbose output")
    output_group.add_argument("--quiet", action="store_true", help="Minimal output")
    output_group.add_argument("--xvs", action="store_true", help="Generate JUnit XML report")

    return parser.parse_args()


def run_tests(args):
    """Run tests with the specified options and return pytest's exit code."""
    root = os.path.abspath(os.path.dirname(__file__))

    # Set PYTHONPATH for the subprocess
    env = os.environ.copy()
    env["PYTHONPATH"] = os.path.join(root, "src")
    env.setdefault("LOG_LEVEL", "WARNING")

    cmd = [sys.executable, "-m", "pytest", os.path.join(root, "tests")]

    if args.keyword:
        cmd.extend(["-k", args.keyword])

    # Output options
    if args.verbose:
        cmd.append("-v")
    if args.quiet:
        cmd.append("-q")
    if args.xvs:
        cmd.append("--junitxml=test-results.xml")

    print(f"Running: {' '.join(cmd)}")
    print(f"PYTHONPATH={env['PYTHONPATH']}")
    return subprocess.run(cmd, env=env).returncode


def main():
    """Main entry point."""
    args = parse_args()
    sys.exit(run_tests(args))


if __name__ == "__main__":
    main()
