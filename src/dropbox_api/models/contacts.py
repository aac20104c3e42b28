from typing import List

from .common import DropboxModel


class DeleteManualContactsArg(DropboxModel):
    email_addresses: List[str]
