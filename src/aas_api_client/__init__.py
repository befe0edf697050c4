"""Typed Python client for the Asset Administration Shell REST API v3.0."""

from aas_api_client.config import ClientConfig, ClientSettings, load_config
from aas_api_client.exceptions import (
    BadRequestError,
    ClientError,
    ConflictError,
    ConnectivityError,
    ForbiddenError,
    InternalServerError,
    InvalidPayloadError,
    MethodNotAllowedError,
    NotFoundError,
    StatusCodeError,
    UnauthorizedError,
    UnsupportedStatusCodeError,
)
from aas_api_client.http import BearerTokenAuth, create_http_client
from aas_api_client.interfaces import (
    AASBasicDiscoveryInterface,
    AASInterface,
    AASRegistryInterface,
    AASRepositoryInterface,
    ConceptDescriptionRepositoryInterface,
    DescriptionInterface,
    SerializationInterface,
    SubmodelInterface,
    SubmodelRegistryInterface,
    SubmodelRepositoryInterface,
)
from aas_api_client.model import InMemoryFile, OperationResult, Page
from aas_api_client.query import Content, Extent, Level, PagingInfo, QueryModifier

__version__ = "0.1.0"

__all__ = [
    "AASBasicDiscoveryInterface",
    "AASInterface",
    "AASRegistryInterface",
    "AASRepositoryInterface",
    "BadRequestError",
    "BearerTokenAuth",
    "ClientConfig",
    "ClientError",
    "ClientSettings",
    "ConceptDescriptionRepositoryInterface",
    "ConflictError",
    "ConnectivityError",
    "Content",
    "DescriptionInterface",
    "Extent",
    "ForbiddenError",
    "InMemoryFile",
    "InternalServerError",
    "InvalidPayloadError",
    "Level",
    "MethodNotAllowedError",
    "NotFoundError",
    "OperationResult",
    "Page",
    "PagingInfo",
    "QueryModifier",
    "SerializationInterface",
    "StatusCodeError",
    "SubmodelInterface",
    "SubmodelRegistryInterface",
    "SubmodelRepositoryInterface",
    "UnauthorizedError",
    "UnsupportedStatusCodeError",
    "__version__",
    "create_http_client",
    "load_config",
]
