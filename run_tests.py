#!/usr/bin/env python3
"""
Test runner script for rostermanager

This script provides various testing options:
- Run all tests
- Run specific test categories (unit, integration, ui)
- Run with coverage reporting
- Run tests matching patterns

Usage:
    python run_tests.py              # Run all tests
    python run_tests.py --unit       # Run only unit tests
    python run_tests.py --ui         # Run only UI tests
    python run_tests.py --coverage   # Run with coverage report
    python run_tests.py --fast       # Skip slow tests
    python run_tests.py --pattern union  # Run tests matching pattern
"""

import argparse
import subprocess
import sys
from pathlib import Path


def run_command(cmd, description=""):
    """Run a command and handle output"""
    print(f"\n{'='*60}")
    if description:
        print(f"🚀 {description}")
    print(f"📝 Running: {' '.join(cmd)}")
    print(f"{'='*60}")

    try:
        result = subprocess.run(cmd, check=False, capture_output=False)
        if result.returncode == 0:
            print(f"✅ {description or 'Command'} completed successfully")
        else:
            print(
                f"❌ {description or 'Command'} failed with exit code {result.returncode}"
            )
        return result.returncode
    except FileNotFoundError:
        print(f"❌ Command not found: {cmd[0]}")
        return 127


def install_dependencies():
    """Install the package with its test extra"""
    print("📦 Installing test dependencies...")
    return run_command(
        [sys.executable, "-m", "pip", "install", "-e", ".[test]"],
        "Installing dependencies",
    )


def run_tests(args):
    """Run tests based on provided arguments"""
    cmd = [sys.executable, "-m", "pytest", "-v"]

    # Test selection
    if args.unit:
        cmd.extend(["-m", "unit"])
        description = "Unit tests"
    elif args.integration:
        cmd.extend(["-m", "integration"])
        description = "Integration tests"
    elif args.ui:
        cmd.extend(["-m", "ui"])
        description = "UI tests"
    else:
        description = "All tests"

    if args.coverage:
        cmd.extend(
            [
                "--cov=rostermanager",
                "--cov-report=html",
                "--cov-report=term",
            ]
        )
        description += " with coverage"

    if args.fast:
        cmd.extend(["-m", "not slow"])
        description += " (fast only)"

    if args.pattern:
        cmd.extend(["-k", args.pattern])
        description += f" (pattern: {args.pattern})"

    if args.file:
        cmd.append(f"tests/{args.file}")
        description += f" (file: {args.file})"
    else:
        cmd.append("tests/")

    return run_command(cmd, description)


def check_environment():
    """Check if the environment is set up correctly"""
    print("🔍 Checking test environment...")

    if not Path("rostermanager").exists():
        print("❌ Not in the correct directory. Please run from project root.")
        return False

    if not Path("tests").exists():
        print("❌ tests directory not found")
        return False

    print("✅ Environment looks good")
    return True


def main():
    parser = argparse.ArgumentParser(
        description="Test runner for rostermanager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tests.py                    # Run all tests
  python run_tests.py --unit             # Run unit tests only
  python run_tests.py --ui --coverage    # Run UI tests with coverage
  python run_tests.py --pattern search   # Run tests with 'search' in the name
  python run_tests.py --file test_tournament_manager.py
        """,
    )

    test_group = parser.add_mutually_exclusive_group()
    test_group.add_argument("--unit", action="store_true", help="Run unit tests only")
    test_group.add_argument(
        "--integration", action="store_true", help="Run integration tests only"
    )
    test_group.add_argument("--ui", action="store_true", help="Run UI tests only")

    parser.add_argument(
        "--coverage", action="store_true", help="Run tests with coverage reporting"
    )
    parser.add_argument("--fast", action="store_true", help="Skip slow tests")
    parser.add_argument("--pattern", help="Run tests matching this pattern")
    parser.add_argument("--file", help="Run specific test file")
    parser.add_argument(
        "--install-deps",
        action="store_true",
        help="Install dependencies before running tests",
    )
    parser.add_argument(
        "--no-env-check", action="store_true", help="Skip environment checks"
    )

    args = parser.parse_args()

    print("🧪 Rostermanager Test Runner")
    print("=" * 60)

    if not args.no_env_check and not check_environment():
        return 1

    if args.install_deps:
        if install_dependencies() != 0:
            return 1

    exit_code = run_tests(args)

    print(f"\n{'='*60}")
    if exit_code == 0:
        print("🎉 All tests passed!")
        if args.coverage:
            print("📊 Coverage report generated in htmlcov/")
    else:
        print("💥 Some tests failed")
        print("📋 Check the output above for details")
    print(f"{'='*60}")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
