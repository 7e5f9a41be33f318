"""
Test suites package.

Kept importable so that `run_tests.py`, IDEs and CI can import the
framework (`testsuites.ui_testing.framework`) and page objects directly.
"""
