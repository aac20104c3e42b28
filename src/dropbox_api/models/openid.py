from typing import Optional

from .common import DropboxModel


class UserInfoArgs(DropboxModel):
    pass


class UserInfoResult(DropboxModel):
    family_name: Optional[str] = None
    given_name: Optional[str] = None
    email: Optional[str] = None
    email_verified: Optional[bool] = None
    iss: str = ""
    sub: str = ""
