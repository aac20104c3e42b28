"""
Header policy.

An operation declares an ordered tuple of headers. Static headers are sent
as declared; derived headers are computed from the serialized payload at
dispatch time.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class StaticHeader:
    name: str
    value: str


@dataclass(frozen=True)
class DerivedHeader:
    """Header whose value is computed from the serialized request payload."""

    name: str
    derive: Callable[[str], str]


Header = Union[StaticHeader, DerivedHeader]
HeaderSpec = Tuple[Header, ...]


def _payload_as_argument(serialized: str) -> str:
    return serialized


CONTENT_TYPE_JSON = StaticHeader("Content-Type", "application/json")
CONTENT_TYPE_OCTET_STREAM = StaticHeader("Content-Type", "application/octet-stream")
DROPBOX_API_ARG = DerivedHeader("Dropbox-API-Arg", _payload_as_argument)


def resolve_headers(
    spec: Sequence[Header], serialized_payload: Optional[str]
) -> List[Tuple[str, str]]:
    """Produce the name/value pairs for a header spec, in declaration order.

    A derived header with no payload resolves to an empty string.
    """
    source = serialized_payload if serialized_payload is not None else ""
    resolved = []
    for header in spec:
        if isinstance(header, DerivedHeader):
            resolved.append((header.name, header.derive(source)))
        else:
            resolved.append((header.name, header.value))
    return resolved


def declares_header(spec: Sequence[Header], name: str) -> bool:
    return any(header.name.lower() == name.lower() for header in spec)
