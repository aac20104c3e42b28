"""
Base classes shared by the payload models.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, RootModel


class DropboxModel(BaseModel):
    """Base for request and response payloads.

    Fields may be populated by name or by alias (``.tag``); unknown fields in
    responses are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Tag(DropboxModel):
    """Union member that carries no data besides its tag."""

    tag: str = Field(alias=".tag")


class Void(RootModel[None]):
    """Result of routes that answer with a JSON ``null``."""


class PropertyField(DropboxModel):
    name: str
    value: str


class PropertyGroup(DropboxModel):
    template_id: str
    fields: List[PropertyField]
