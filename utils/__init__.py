"""
Utilities Package

Shared helpers such as logging setup.
"""

from .logger import setup_logger

__all__ = ['setup_logger']
