"""
================================================================================
Autotest Tools
================================================================================

Shared infrastructure for the test suites.

Modules:
    - common: Loguru logging setup
    - report_tools: Allure attachment helpers

Example:
    from autotest_tools.common import init_logger
    from autotest_tools.report_tools.allure_utils import attach_text

    init_logger()
    attach_text("title mismatch", name="failure")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
