"""
Pydantic models for request and response payloads, one module per namespace.
"""

from .common import DropboxModel, PropertyField, PropertyGroup, Tag, Void

__all__ = ["DropboxModel", "PropertyField", "PropertyGroup", "Tag", "Void"]
