"""Shared domain model base classes"""
from .base import CamelModel

__all__ = ['CamelModel']
