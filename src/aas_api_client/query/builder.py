"""Build request paths with content suffix and query string."""

from urllib.parse import quote, urlencode

from aas_api_client.encoding import base64url_encode
from aas_api_client.query.criteria import SearchCriteria
from aas_api_client.query.modifiers import Content, PagingInfo, QueryModifier


def query_params(
    modifier: QueryModifier = QueryModifier.DEFAULT,
    paging: PagingInfo = PagingInfo.ALL,
    criteria: SearchCriteria = SearchCriteria.DEFAULT,
) -> list[tuple[str, str]]:
    """Collect query parameters in their fixed order.

    Order is level, extent, limit, cursor, then the criteria parameters.
    Defaults are omitted.
    """
    params = modifier.to_query_params()
    if paging.limit is not None:
        params.append(("limit", str(paging.limit)))
    if paging.cursor is not None:
        params.append(("cursor", base64url_encode(paging.cursor)))
    params.extend(criteria.to_query_params())
    return params


def build_path(
    path: str | None = None,
    content: Content = Content.DEFAULT,
    modifier: QueryModifier = QueryModifier.DEFAULT,
    paging: PagingInfo = PagingInfo.ALL,
    criteria: SearchCriteria = SearchCriteria.DEFAULT,
) -> str:
    """Return ``path`` + content suffix + ``?query`` (no ``?`` when empty).

    Example:
        >>> build_path("/submodels", Content.REFERENCE, QueryModifier.MINIMAL)
        '/submodels/$reference?level=core'
    """
    result = (path or "").rstrip("/") + content.path_suffix
    params = query_params(modifier, paging, criteria)
    if params:
        result += "?" + urlencode(params, safe=",", quote_via=quote)
    return result
