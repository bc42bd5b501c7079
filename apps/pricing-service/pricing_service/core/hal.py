from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse


class HALJSONResponse(JSONResponse):
    media_type = "application/hal+json"


def href(
    request: Request,
    route_name: str,
    *,
    query: Optional[Dict[str, Any]] = None,
    template: str = "",
    **path_params,
) -> Dict[str, Any]:
    """
    HAL link to a named route.

    `template` is an RFC 6570 suffix such as "{?vehicleId}"; when given the
    link is flagged as templated.
    """
    url = request.url_for(route_name, **path_params)
    if query:
        url = url.include_query_params(**query)
    if template:
        return {"href": f"{url}{template}", "templated": True}
    return {"href": str(url)}
