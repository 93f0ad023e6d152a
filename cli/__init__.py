"""CLI package for Password Breach Check.

Provides interactive flows for checking passwords from a terminal.
"""

from cli.tester import check_password_flow, main, report_result

__all__ = [
    "check_password_flow",
    "main",
    "report_result",
]
