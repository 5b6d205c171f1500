"""Presentation of test results."""

from .console import ConsoleUI

__all__ = ["ConsoleUI"]
