"""
Payloads of the users namespace.
"""

from typing import List, Literal, Optional, Union

from pydantic import Field

from .common import DropboxModel, Tag


class Name(DropboxModel):
    given_name: str
    surname: str
    familiar_name: str
    display_name: str
    abbreviated_name: str


class BasicAccount(DropboxModel):
    account_id: str
    name: Name
    email: str
    email_verified: bool
    disabled: bool
    is_teammate: bool
    profile_photo_url: Optional[str] = None
    team_member_id: Optional[str] = None


class FullAccount(DropboxModel):
    account_id: str
    name: Name
    email: str
    email_verified: bool
    disabled: bool
    locale: str
    referral_link: str
    is_paired: bool
    account_type: Tag
    root_info: dict
    profile_photo_url: Optional[str] = None
    country: Optional[str] = None
    team_member_id: Optional[str] = None


class GetAccountArg(DropboxModel):
    account_id: str


class GetAccountBatchArg(DropboxModel):
    account_ids: List[str]


class IndividualSpaceAllocation(DropboxModel):
    tag: Literal["individual"] = Field("individual", alias=".tag")
    allocated: int


class TeamSpaceAllocation(DropboxModel):
    tag: Literal["team"] = Field("team", alias=".tag")
    used: int
    allocated: int
    user_within_team_space_allocated: int
    user_within_team_space_limit_type: Optional[Tag] = None
    user_within_team_space_used_cached: Optional[int] = None


class SpaceUsage(DropboxModel):
    used: int
    allocation: Union[IndividualSpaceAllocation, TeamSpaceAllocation, Tag]


class UserFeaturesGetValuesBatchArg(DropboxModel):
    features: List[Tag]


class UserFeaturesGetValuesBatchResult(DropboxModel):
    values: List[dict]
