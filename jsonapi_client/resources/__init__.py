"""Declarative JSON:API resources."""

from .base import Resource
from .fields import Attribute, HasMany, HasOne, Relationship

__all__ = ["Attribute", "HasMany", "HasOne", "Relationship", "Resource"]
