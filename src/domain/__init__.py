"""
Domain Layer Package

This package contains the forecast and position rules of the application.
It defines entities, repository contracts and ports without dependencies on
external frameworks or infrastructure concerns.
"""

# Re-export submodules
from src.domain import entities, ports, repositories

__all__ = ["entities", "repositories", "ports"]
