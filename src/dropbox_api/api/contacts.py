from ..core import Operation
from ..endpoints import Endpoint
from ..endpoints.headers import CONTENT_TYPE_JSON
from ..models.common import Void
from ..models.contacts import DeleteManualContactsArg
from ..service import ApiRequest


class DeleteManualContactsRequest(ApiRequest[Void, Void]):
    """Remove every manually added contact."""

    operation = Operation(
        endpoint=Endpoint.CONTACTS_DELETE_MANUAL_CONTACTS,
        response_model=Void,
        headers=(CONTENT_TYPE_JSON,),
    )


class DeleteManualContactsBatchRequest(ApiRequest[DeleteManualContactsArg, Void]):
    operation = Operation(
        endpoint=Endpoint.CONTACTS_DELETE_MANUAL_CONTACTS_BATCH,
        request_model=DeleteManualContactsArg,
        response_model=Void,
        headers=(CONTENT_TYPE_JSON,),
    )
