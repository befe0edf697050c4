"""Transport-shape models: paging, registry descriptors, operations and files."""

from aas_api_client.model.descriptors import (
    AssetAdministrationShellDescriptor,
    Endpoint,
    ProtocolInformation,
    SubmodelDescriptor,
)
from aas_api_client.model.files import InMemoryFile
from aas_api_client.model.operation import ExecutionState, OperationRequest, OperationResult
from aas_api_client.model.paging import Page, PagingMetadata

__all__ = [
    "AssetAdministrationShellDescriptor",
    "Endpoint",
    "ExecutionState",
    "InMemoryFile",
    "OperationRequest",
    "OperationResult",
    "Page",
    "PagingMetadata",
    "ProtocolInformation",
    "SubmodelDescriptor",
]
