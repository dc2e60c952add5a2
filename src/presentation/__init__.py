"""
Presentation Layer Package

This package contains the presentation layer components,
which are responsible for handling HTTP requests and responses:
routers, the error to status mapping and exception handlers.
"""

from src.presentation import controllers

__all__ = ["controllers"]
