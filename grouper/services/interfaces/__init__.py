"""
Service interfaces for dependency injection and testing.
"""

from .distance_interface import IDistanceService

__all__ = ['IDistanceService']
