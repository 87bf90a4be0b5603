"""
Flask Blueprints for the package planner
"""

from .api import api_bp

__all__ = [
    'api_bp',
]
