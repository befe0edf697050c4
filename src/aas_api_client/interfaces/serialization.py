"""Serialization interface (``/serialization``)."""

from __future__ import annotations

from collections.abc import Iterable

from basyx.aas import model

from aas_api_client import codec
from aas_api_client.http import JSON_CONTENT_TYPE
from aas_api_client.interfaces.base import BaseInterface
from aas_api_client.model.files import InMemoryFile
from aas_api_client.query import SerializationSearchCriteria, build_path

AASX_CONTENT_TYPE = "application/asset-administration-shell-package+xml"


class SerializationInterface(BaseInterface):
    """Export shells and submodels as AASX package or JSON environment."""

    API_PATH = "/serialization"

    def get_aasx_package(
        self,
        aas_ids: Iterable[str] = (),
        submodel_ids: Iterable[str] = (),
        include_concept_descriptions: bool = True,
    ) -> InMemoryFile:
        criteria = SerializationSearchCriteria(
            tuple(aas_ids), tuple(submodel_ids), include_concept_descriptions
        )
        return self._get_file(build_path(criteria=criteria), accept=AASX_CONTENT_TYPE)

    def get_environment(
        self,
        aas_ids: Iterable[str] = (),
        submodel_ids: Iterable[str] = (),
        include_concept_descriptions: bool = True,
    ) -> model.DictObjectStore[model.Identifiable]:
        """Environment of the selected shells and submodels as object store."""
        criteria = SerializationSearchCriteria(
            tuple(aas_ids), tuple(submodel_ids), include_concept_descriptions
        )
        file = self._get_file(build_path(criteria=criteria), accept=JSON_CONTENT_TYPE)
        return self._decoded(codec.decode_environment, file.content)
