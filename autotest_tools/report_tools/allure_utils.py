"""
================================================================================
Allure Report Utilities
================================================================================

Attachment helpers used by page objects and UI fixtures to put failure
diagnostics (assertion text, screenshots, session details) into the
Allure report.

================================================================================
"""

import allure


def attach_text(text: str, name: str = "Text"):
    """
    Attach text content to Allure report.

    Args:
        text: Text to attach
        name: Attachment name
    """
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def attach_png(image: bytes, name: str = "Screenshot"):
    """
    Attach PNG screenshot bytes to Allure report.

    Args:
        image: PNG bytes as returned by page.screenshot()
        name: Attachment name
    """
    allure.attach(
        image,
        name=name,
        attachment_type=allure.attachment_type.PNG
    )


__all__ = [
    "attach_text",
    "attach_png",
]
