from typing import Literal

from pydantic import Field

from .common import DropboxModel


class PhotoSourceArg(DropboxModel):
    tag: Literal["base64_data"] = Field("base64_data", alias=".tag")
    base64_data: str


class SetProfilePhotoArg(DropboxModel):
    photo: PhotoSourceArg


class SetProfilePhotoResult(DropboxModel):
    profile_photo_url: str
