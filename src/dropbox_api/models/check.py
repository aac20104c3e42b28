from .common import DropboxModel


class EchoArg(DropboxModel):
    query: str = ""


class EchoResult(DropboxModel):
    result: str = ""
