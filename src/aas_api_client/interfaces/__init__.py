"""One interface class per resource group of the AAS REST API."""

from aas_api_client.interfaces.aas import AASInterface
from aas_api_client.interfaces.aas_registry import AASRegistryInterface
from aas_api_client.interfaces.aas_repository import AASRepositoryInterface
from aas_api_client.interfaces.base import BaseInterface, id_path, id_short_path
from aas_api_client.interfaces.concept_description_repository import (
    ConceptDescriptionRepositoryInterface,
)
from aas_api_client.interfaces.description import DescriptionInterface
from aas_api_client.interfaces.discovery import AASBasicDiscoveryInterface
from aas_api_client.interfaces.serialization import SerializationInterface
from aas_api_client.interfaces.submodel import SubmodelInterface
from aas_api_client.interfaces.submodel_registry import SubmodelRegistryInterface
from aas_api_client.interfaces.submodel_repository import SubmodelRepositoryInterface

__all__ = [
    "AASBasicDiscoveryInterface",
    "AASInterface",
    "AASRegistryInterface",
    "AASRepositoryInterface",
    "BaseInterface",
    "ConceptDescriptionRepositoryInterface",
    "DescriptionInterface",
    "SerializationInterface",
    "SubmodelInterface",
    "SubmodelRegistryInterface",
    "SubmodelRepositoryInterface",
    "id_path",
    "id_short_path",
]
