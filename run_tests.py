#!/usr/bin/env python3
"""
Test runner script for the stackenv package.
Provides convenient ways to run different test suites.
"""

import sys
import subprocess
import argparse


def run_command(cmd, description):
    """Run a command and handle the output."""
    print(f"\n🔄 {description}")
    print(f"Running: {' '.join(cmd)}")
    print("-" * 50)

    try:
        subprocess.run(cmd, check=True, capture_output=False)
        print(f"✅ {description} completed successfully")
        return True
    except subprocess.CalledProcessError as e:
        print(f"❌ {description} failed with exit code {e.returncode}")
        return False


def build_parser():
    parser = argparse.ArgumentParser(description="Test runner for stackenv")
    parser.add_argument(
        "suite",
        nargs="?",
        default="all",
        choices=["all", "unit", "integration", "config", "env", "cli", "coverage"],
        help="Test suite to run"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--failfast", "-x", action="store_true", help="Stop on first failure")
    parser.add_argument("--markers", "-m", help="Run tests with specific markers")
    parser.add_argument("--pattern", "-k", help="Run tests matching pattern")
    return parser


def build_test_suites(args):
    """Command and description of every suite, for the parsed arguments."""
    # Base pytest command, without the test path
    pytest_cmd = [sys.executable, "-m", "pytest"]

    # Add common options
    if args.verbose:
        pytest_cmd.append("-v")
    if args.failfast:
        pytest_cmd.append("-x")
    if args.markers:
        pytest_cmd.extend(["-m", args.markers])
    if args.pattern:
        pytest_cmd.extend(["-k", args.pattern])

    base_cmd = pytest_cmd + ["test/"]

    return {
        "all": {
            "cmd": base_cmd,
            "desc": "Running all tests"
        },
        "unit": {
            "cmd": base_cmd + ["-m", "unit"],
            "desc": "Running unit tests"
        },
        "integration": {
            "cmd": base_cmd + ["-m", "integration"],
            "desc": "Running integration tests"
        },
        "config": {
            "cmd": pytest_cmd + ["test/test_config/"],
            "desc": "Running rule, registry, composer and validator tests"
        },
        "env": {
            "cmd": pytest_cmd + ["test/test_env/"],
            "desc": "Running startup scenario tests"
        },
        "cli": {
            "cmd": pytest_cmd + ["test/test_cli/"],
            "desc": "Running command line tests"
        },
        "coverage": {
            "cmd": base_cmd + ["--cov=stackenv", "--cov-report=html", "--cov-report=term-missing"],
            "desc": "Running tests with coverage"
        }
    }


def main():
    args = build_parser().parse_args()
    test_suites = build_test_suites(args)

    # Run the selected test suite
    suite_config = test_suites.get(args.suite)
    if not suite_config:
        print(f"❌ Unknown test suite: {args.suite}")
        sys.exit(1)

    success = run_command(suite_config["cmd"], suite_config["desc"])

    if not success:
        sys.exit(1)

    print(f"\n🎉 Test suite '{args.suite}' completed successfully!")


if __name__ == "__main__":
    main()
