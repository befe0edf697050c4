"""Submodel interface (``/submodels/{submodelIdentifier}``).

Also used for submodels addressed through a shell
(``/shells/{aasIdentifier}/submodels/{submodelIdentifier}``).
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import timedelta
from typing import Any

from basyx.aas import model

from aas_api_client import codec
from aas_api_client.interfaces.base import BaseInterface, id_short_path
from aas_api_client.model.files import InMemoryFile
from aas_api_client.model.operation import OperationRequest, OperationResult
from aas_api_client.model.paging import Page
from aas_api_client.query import Content, Level, PagingInfo, QueryModifier

_ELEMENTS = "/submodel-elements"

_to_submodel = codec.metamodel(model.Submodel)
_to_element = codec.metamodel(model.SubmodelElement)


def _element_path(path: str) -> str:
    return _ELEMENTS + id_short_path(path)


class SubmodelInterface(BaseInterface):
    """Access to a single submodel and its submodel elements.

    Element paths are idShort paths, e.g. ``TechnicalData.MaxSpeed`` or
    ``Markings[0].MarkingName``.
    """

    # --- submodel ---------------------------------------------------------

    def get(self, modifier: QueryModifier = QueryModifier.DEFAULT) -> model.Submodel:
        return self._get(None, _to_submodel, modifier=modifier)

    def put(self, submodel: model.Submodel) -> None:
        """Replace the submodel including all its elements."""
        self._put(None, submodel, modifier=QueryModifier(level=Level.DEEP))

    def patch(self, submodel: model.Submodel) -> None:
        """Update the submodel and its direct elements."""
        self._patch(None, submodel, modifier=QueryModifier(level=Level.CORE))

    def get_metadata(self, modifier: QueryModifier = QueryModifier.DEFAULT) -> model.Submodel:
        """Submodel without its elements (``$metadata``)."""
        return self._get(None, _to_submodel, Content.METADATA, modifier)

    def patch_metadata(
        self, submodel: model.Submodel, modifier: QueryModifier = QueryModifier.DEFAULT
    ) -> None:
        self._patch(None, submodel, Content.METADATA, modifier)

    def get_value(self, modifier: QueryModifier = QueryModifier.DEFAULT) -> Any:
        """Value-only representation of the submodel as plain JSON."""
        return self._get(None, codec.to_json, Content.VALUE, modifier)

    def patch_value(self, value: Any, modifier: QueryModifier = QueryModifier.DEFAULT) -> None:
        self._patch_value(None, value, modifier)

    def get_reference(self) -> model.Reference:
        return self._get(None, codec.to_reference, Content.REFERENCE, QueryModifier.MINIMAL)

    def get_path(self, modifier: QueryModifier = QueryModifier.DEFAULT) -> list[str]:
        """idShort paths of all elements (``$path``)."""
        return self._get(None, _to_string_list, Content.PATH, modifier)

    # --- element collections ----------------------------------------------

    def get_all_elements(
        self, modifier: QueryModifier = QueryModifier.DEFAULT
    ) -> list[model.SubmodelElement]:
        return self._get_all(_ELEMENTS, _to_element, modifier=modifier)

    def get_elements(
        self, paging: PagingInfo, modifier: QueryModifier = QueryModifier.DEFAULT
    ) -> Page[model.SubmodelElement]:
        return self._get_page(_ELEMENTS, _to_element, modifier=modifier, paging=paging)

    def get_elements_metadata(
        self, paging: PagingInfo, modifier: QueryModifier = QueryModifier.DEFAULT
    ) -> Page[model.SubmodelElement]:
        return self._get_page(_ELEMENTS, _to_element, Content.METADATA, modifier, paging)

    def get_elements_value(
        self, paging: PagingInfo, modifier: QueryModifier = QueryModifier.DEFAULT
    ) -> Page[Any]:
        return self._get_page(_ELEMENTS, codec.to_json, Content.VALUE, modifier, paging)

    def get_elements_reference(
        self, paging: PagingInfo, modifier: QueryModifier = QueryModifier.DEFAULT
    ) -> Page[model.Reference]:
        return self._get_page(_ELEMENTS, codec.to_reference, Content.REFERENCE, modifier, paging)

    def get_elements_path(
        self, paging: PagingInfo, modifier: QueryModifier = QueryModifier.DEFAULT
    ) -> Page[str]:
        return self._get_page(_ELEMENTS, codec.to_string, Content.PATH, modifier, paging)

    def post_element(self, element: model.SubmodelElement) -> model.SubmodelElement:
        """Create a top-level element."""
        return self._post(_ELEMENTS, element, _to_element)

    # --- single element ---------------------------------------------------

    def get_element(
        self, path: str, modifier: QueryModifier = QueryModifier.DEFAULT
    ) -> model.SubmodelElement:
        return self._get(_element_path(path), _to_element, modifier=modifier)

    def post_element_at(
        self, path: str, element: model.SubmodelElement
    ) -> model.SubmodelElement:
        """Create an element inside the collection, list or entity at ``path``."""
        return self._post(_element_path(path), element, _to_element)

    def put_element(self, path: str, element: model.SubmodelElement) -> None:
        self._put(_element_path(path), element)

    def patch_element(self, path: str, element: model.SubmodelElement) -> None:
        self._patch(_element_path(path), element)

    def delete_element(self, path: str) -> None:
        self._delete(_element_path(path))

    def get_element_metadata(self, path: str) -> model.SubmodelElement:
        return self._get(_element_path(path), _to_element, Content.METADATA)

    def patch_element_metadata(self, path: str, element: model.SubmodelElement) -> None:
        self._patch(
            _element_path(path), element, Content.METADATA, QueryModifier(level=Level.CORE)
        )

    def get_element_value(
        self, path: str, modifier: QueryModifier = QueryModifier.DEFAULT
    ) -> Any:
        """Value-only representation of an element as plain JSON."""
        return self._get(_element_path(path), codec.to_json, Content.VALUE, modifier)

    def patch_element_value(self, path: str, value: Any) -> None:
        self._patch_value(_element_path(path), value)

    def get_element_reference(self, path: str) -> model.Reference:
        return self._get(
            _element_path(path), codec.to_reference, Content.REFERENCE, QueryModifier.MINIMAL
        )

    def get_element_path(self, path: str) -> list[str]:
        return self._get(
            _element_path(path), _to_string_list, Content.PATH, QueryModifier(level=Level.DEEP)
        )

    # --- attachments ------------------------------------------------------

    def get_attachment(self, path: str) -> InMemoryFile:
        """Download the file behind a File or Blob element."""
        return self._get_file(_element_path(path) + "/attachment", accept="*/*")

    def put_attachment(self, path: str, attachment: InMemoryFile) -> None:
        self._put_file(_element_path(path) + "/attachment", attachment)

    def delete_attachment(self, path: str) -> None:
        self._delete(_element_path(path) + "/attachment", expected=(200, 204))

    # --- operations -------------------------------------------------------

    def invoke_operation(
        self,
        path: str,
        input_arguments: Sequence[model.SubmodelElement] = (),
        inoutput_arguments: Sequence[model.SubmodelElement] = (),
        timeout: timedelta = timedelta(seconds=60),
    ) -> OperationResult:
        """Invoke an Operation synchronously and wait for its result.

        Args:
            path: idShort path of the Operation element.
            input_arguments: Values for the operation's input variables.
            inoutput_arguments: Values for the in/out variables.
            timeout: Client timeout forwarded to the server.
        """
        request = OperationRequest(
            input_arguments=tuple(input_arguments),
            inoutput_arguments=tuple(inoutput_arguments),
            client_timeout=timeout,
        )
        return self._post(
            _element_path(path) + "/invoke",
            request,
            codec.to_operation_result,
            expected=(200,),
        )


def _to_string_list(data: Any) -> list[str]:
    if isinstance(data, str):
        return [data]
    return [codec.to_string(item) for item in data]
