"""
Task Clock
A terminal time tracker with an ASCII-art elapsed clock and a daily markdown log.
"""

__version__ = "0.1.0"
