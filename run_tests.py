#!/usr/bin/env python3
"""
Test runner script for the rwanda_geo project.

This script provides various options for running tests including:
- All tests
- A single test module
- Coverage reporting
"""

import sys
import subprocess
import argparse


def run_command(cmd, description=""):
    """Run a command and return the result."""
    print(f"\n{'='*60}")
    if description:
        print(f"Running: {description}")
    print(f"Command: {' '.join(cmd)}")
    print(f"{'='*60}")

    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=False)

        if result.stdout:
            print("STDOUT:")
            print(result.stdout)

        if result.stderr:
            print("STDERR:")
            print(result.stderr)

        print(f"\nExit code: {result.returncode}")
        return result.returncode == 0

    except OSError as e:
        print(f"Error running command: {e}")
        return False


def run_unit_tests():
    """Run the test suite with unittest discovery."""
    cmd = [sys.executable, "-m", "unittest", "discover", "-s", ".", "-p", "test_*.py", "-v"]
    return run_command(cmd, "Unit Tests")


def run_pytest_tests():
    """Run tests using pytest."""
    cmd = [sys.executable, "-m", "pytest", "tests", "-v", "--tb=short"]
    return run_command(cmd, "Pytest Tests")


def run_coverage_tests():
    """Run tests with coverage reporting."""
    cmd = [sys.executable, "-m", "pytest", "tests", "--cov=rwanda_geo",
           "--cov-report=html", "--cov-report=term-missing", "-v"]
    success = run_command(cmd, "Coverage Tests")

    if success:
        print("\nCoverage report generated in htmlcov/index.html")

    return success


def run_specific_test(test_module):
    """Run a specific test module (e.g. tests.test_search)."""
    cmd = [sys.executable, "-m", "unittest", test_module, "-v"]
    return run_command(cmd, f"Specific Test: {test_module}")


def _is_available(package):
    try:
        __import__(package)
        return True
    except ImportError:
        return False


def check_test_environment():
    """Check if the test environment is properly set up."""
    print("Checking test environment...")
    print(f"Python version: {sys.version}")

    missing_packages = []
    for package in ['pandas', 'rapidfuzz', 'tqdm', 'rwanda_geo']:
        if _is_available(package):
            print(f"  OK       {package}")
        else:
            print(f"  MISSING  {package}")
            missing_packages.append(package)

    for package in ['pytest', 'pytest_cov']:
        status = "OK" if _is_available(package) else "absent"
        print(f"  {status:<8} {package} (optional)")

    if missing_packages:
        print(f"\nMissing required packages: {', '.join(missing_packages)}")
        print("Please install them using: pip install -r requirements.txt")
        return False

    print("\nTest environment is ready")
    return True


def main():
    """Main test runner function."""
    parser = argparse.ArgumentParser(description="rwanda_geo Test Runner")
    parser.add_argument("--type", choices=["all", "coverage"], default="all",
                        help="Type of tests to run")
    parser.add_argument("--file", help="Run a specific test module")
    parser.add_argument("--check-env", action="store_true", help="Check test environment")
    parser.add_argument("--use-pytest", action="store_true", help="Use pytest instead of unittest")

    args = parser.parse_args()

    if args.check_env:
        return 0 if check_test_environment() else 1

    if not check_test_environment():
        print("\nTest environment check failed. Please fix the issues above.")
        return 1

    if args.file:
        success = run_specific_test(args.file)
    elif args.type == "coverage":
        success = run_coverage_tests()
    elif args.use_pytest:
        success = run_pytest_tests()
    else:
        success = run_unit_tests()

    if success:
        print("\nAll tests completed successfully!")
        return 0

    print("\nSome tests failed. Please check the output above.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
