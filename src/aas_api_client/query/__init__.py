"""Query modifiers, paging input and search criteria."""

from aas_api_client.query.builder import build_path, query_params
from aas_api_client.query.criteria import (
    AASDescriptorSearchCriteria,
    AASSearchCriteria,
    AssetLinkSearchCriteria,
    ConceptDescriptionSearchCriteria,
    SearchCriteria,
    SerializationSearchCriteria,
    SubmodelSearchCriteria,
)
from aas_api_client.query.modifiers import Content, Extent, Level, PagingInfo, QueryModifier

__all__ = [
    "AASDescriptorSearchCriteria",
    "AASSearchCriteria",
    "AssetLinkSearchCriteria",
    "ConceptDescriptionSearchCriteria",
    "Content",
    "Extent",
    "Level",
    "PagingInfo",
    "QueryModifier",
    "SearchCriteria",
    "SerializationSearchCriteria",
    "SubmodelSearchCriteria",
    "build_path",
    "query_params",
]
