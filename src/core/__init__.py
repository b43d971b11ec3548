"""
Core functionality for rozmarra.

Logging setup and the numeric helpers shared by every calculator.
"""

__version__ = "1.0.0"
