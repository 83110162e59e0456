#!/usr/bin/env python
"""
Quick reference: Running the chainquant test suite.

Execute this file or use the commands below directly.
"""

import subprocess
import sys


def run_tests():
    """Run all test groups."""

    print("=" * 70)
    print("RUNNING CHAINQUANT TEST SUITE")
    print("=" * 70)
    print()

    commands = [
        ("Unit Tests - Descriptive", "pytest tests/unit/test_descriptive.py -v"),
        ("Unit Tests - Correlation", "pytest tests/unit/test_correlation.py -v"),
        ("Unit Tests - Time Series", "pytest tests/unit/test_timeseries.py -v"),
        ("Unit Tests - Regression", "pytest tests/unit/test_regression.py -v"),
        ("Unit Tests - Risk", "pytest tests/unit/test_risk.py -v"),
        ("Unit Tests - Anomaly", "pytest tests/unit/test_anomaly.py -v"),
        ("Unit Tests - Probability", "pytest tests/unit/test_probability.py -v"),
        ("Unit Tests - Utilities", "pytest tests/unit/test_utils.py -v"),
        ("Unit Tests - Gas Engine", "pytest tests/unit/test_gas_engine.py -v"),
        ("Integration Tests - Pipeline", "pytest tests/integration/ -v"),
        ("All Tests with Coverage", "pytest tests/ -v --cov=chainquant --cov-report=html"),
    ]

    failed = 0
    for name, cmd in commands:
        print(f"\n{'='*70}")
        print(f"{name}")
        print(f"{'='*70}")
        print(f"Command: {cmd}\n")
        result = subprocess.run(cmd, shell=True)
        if result.returncode != 0:
            failed += 1
            print(f"✗ {name} failed")
        else:
            print(f"✓ {name} passed")
    return failed


def run_specific_tests():
    """Print common test commands."""

    print("\nQuick test commands:")
    print("  pytest tests/unit/ -v          # All unit tests")
    print("  pytest tests/integration/ -v   # All integration tests")
    print("  pytest tests/ -v -m integration  # Tests marked integration")
    print("  pytest tests/ -v -k drawdown   # Tests matching 'drawdown'")
    print("  pytest tests/ --co             # List test collection (no run)")


if __name__ == "__main__":
    failures = run_tests()
    run_specific_tests()
    sys.exit(1 if failures else 0)
