#!/usr/bin/env python3
"""
Test runner script for the box league tracker.

Runs all test suites, or a single category of them.
"""

import unittest
import sys
import os
import time

# Add current directory to Python path to ensure imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

TEST_CATEGORIES = {
    'scores': 'test_score_parser.py',
    'fixtures': 'test_fixtures.py',
    'standings': 'test_standings.py',
    'database': 'test_database.py',
    'reports': 'test_reports.py'
}


def _load_module_tests(loader, test_file):
    module_name = test_file.replace('.py', '')
    module = __import__(module_name)
    return loader.loadTestsFromModule(module)


def discover_and_run_tests():
    """Discover and run all tests in the project."""
    print("=" * 80)
    print("BOX LEAGUE TRACKER TEST SUITE")
    print("=" * 80)
    print()

    start_time = time.time()
    loader = unittest.TestLoader()
    all_tests = unittest.TestSuite()

    for test_file in TEST_CATEGORIES.values():
        if os.path.exists(test_file):
            print(f"Loading tests from: {test_file}")
            try:
                tests = _load_module_tests(loader, test_file)
                all_tests.addTests(tests)
                print(f"  Loaded {tests.countTestCases()} test cases")
            except Exception as e:
                print(f"  Error loading {test_file}: {e}")
        else:
            print(f"  - Skipping {test_file} (file not found)")

    print()
    print(f"Total test cases: {all_tests.countTestCases()}")
    print()
    print("Running tests...")
    print("-" * 80)

    runner = unittest.TextTestRunner(
        verbosity=2,
        stream=sys.stdout,
        descriptions=True,
        failfast=False
    )
    result = runner.run(all_tests)

    duration = time.time() - start_time

    print()
    print("-" * 80)
    print("TEST SUMMARY")
    print("-" * 80)
    print(f"Tests run: {result.testsRun}")
    print(f"Failures: {len(result.failures)}")
    print(f"Errors: {len(result.errors)}")
    print(f"Skipped: {len(result.skipped)}")
    print(f"Duration: {duration:.2f} seconds")
    print()

    if result.wasSuccessful():
        print("ALL TESTS PASSED")
        return 0
    else:
        print("SOME TESTS FAILED - review the failures and errors above.")
        return 1


def run_specific_test_category(category):
    """Run tests for a specific category."""
    if category not in TEST_CATEGORIES:
        print(f"Unknown test category: {category}")
        print(f"Available categories: {', '.join(TEST_CATEGORIES.keys())}")
        return 1

    test_file = TEST_CATEGORIES[category]
    if not os.path.exists(test_file):
        print(f"Test file not found: {test_file}")
        return 1

    print(f"Running {category} tests from {test_file}...")
    print()

    tests = _load_module_tests(unittest.TestLoader(), test_file)
    result = unittest.TextTestRunner(verbosity=2).run(tests)

    return 0 if result.wasSuccessful() else 1


def main():
    """Main entry point."""
    if len(sys.argv) > 1:
        command = sys.argv[1].lower()

        if command == 'all':
            return discover_and_run_tests()
        elif command in TEST_CATEGORIES:
            return run_specific_test_category(command)
        elif command == 'help':
            print("Box league tracker test runner usage:")
            print()
            print("  python run_all_tests.py [command]")
            print()
            print("Commands:")
            print("  all        - Run all tests (default)")
            for category, test_file in TEST_CATEGORIES.items():
                print(f"  {category:<10} - Run {test_file} only")
            print("  help       - Show this help message")
            print()
            return 0
        else:
            print(f"Unknown command: {command}")
            print("Use 'python run_all_tests.py help' for usage information.")
            return 1
    else:
        return discover_and_run_tests()


if __name__ == '__main__':
    try:
        exit_code = main()
        sys.exit(exit_code)
    except KeyboardInterrupt:
        print("\n\nTest run interrupted by user.")
        sys.exit(1)
