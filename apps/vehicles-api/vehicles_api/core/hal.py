from __future__ import annotations

from typing import Dict

from fastapi import Request
from fastapi.responses import JSONResponse


class HALJSONResponse(JSONResponse):
    media_type = "application/hal+json"


def href(request: Request, route_name: str, **path_params) -> Dict[str, str]:
    return {"href": str(request.url_for(route_name, **path_params))}
