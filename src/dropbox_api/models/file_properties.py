"""
Payloads of the file_properties namespace (properties and templates).
"""

from typing import List, Literal, Optional

from pydantic import Field

from .common import DropboxModel, PropertyField, PropertyGroup, Tag


class PathWithPropertyGroupsArg(DropboxModel):
    path: str
    property_groups: List[PropertyGroup]


class RemovePropertiesArg(DropboxModel):
    path: str
    property_template_ids: List[str]


class PropertiesSearchMode(DropboxModel):
    tag: Literal["field_name"] = Field("field_name", alias=".tag")
    field_name: str


class PropertiesSearchQuery(DropboxModel):
    query: str
    mode: PropertiesSearchMode
    logical_operator: str = "or_operator"


class PropertiesSearchArg(DropboxModel):
    queries: List[PropertiesSearchQuery]
    template_filter: str = "filter_none"


class PropertiesSearchContinueArg(DropboxModel):
    cursor: str


class PropertiesSearchMatch(DropboxModel):
    id: str
    path: str
    is_deleted: bool
    property_groups: List[PropertyGroup]


class PropertiesSearchResult(DropboxModel):
    matches: List[PropertiesSearchMatch]
    cursor: Optional[str] = None


class UpdatePropertyGroupArg(DropboxModel):
    template_id: str
    add_or_update_fields: Optional[List[PropertyField]] = None
    remove_fields: Optional[List[str]] = None


class UpdatePropertiesArg(DropboxModel):
    path: str
    update_property_groups: List[UpdatePropertyGroupArg]


class PropertyFieldTemplate(DropboxModel):
    name: str
    description: str
    type: str = "string"


class AddTemplateArg(DropboxModel):
    name: str
    description: str
    fields: List[PropertyFieldTemplate]


class AddTemplateResult(DropboxModel):
    template_id: str


class GetTemplateArg(DropboxModel):
    template_id: str


class TemplateField(DropboxModel):
    name: str
    description: str
    type: Tag


class GetTemplateResult(DropboxModel):
    name: str
    description: str
    fields: List[TemplateField]


class ListTemplateResult(DropboxModel):
    template_ids: List[str]


class RemoveTemplateArg(DropboxModel):
    template_id: str


class UpdateTemplateArg(DropboxModel):
    template_id: str
    name: Optional[str] = None
    description: Optional[str] = None
    add_fields: Optional[List[PropertyFieldTemplate]] = None


class UpdateTemplateResult(DropboxModel):
    template_id: str
