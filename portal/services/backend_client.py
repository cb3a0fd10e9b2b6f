import json
from typing import Any, Dict, Optional, Tuple

import requests
from fastapi import HTTPException
from fastapi.responses import JSONResponse

from portal.core.config import settings
from portal.core.logger import logger
from portal.utils.backend_request import build_backend_request, clean_params

INVALID_FORMAT_MESSAGE = "Server error: Invalid response format"


def envelope(status: int, message: str, data: Any = None, success: bool = None) -> Dict[str, Any]:
    if success is None:
        success = 200 <= status < 300
    return {
        "success": success,
        "status": status,
        "message": message,
        "data": data,
    }


def parse_backend_response(response: requests.Response) -> Dict[str, Any]:
    content_type = response.headers.get("content-type", "")
    if "application/json" not in content_type:
        logger.error(
            f"BACKEND NON-JSON | url={response.url} | status={response.status_code}"
        )
        return envelope(response.status_code, INVALID_FORMAT_MESSAGE, success=False)

    try:
        return response.json()
    except ValueError:
        logger.error(f"BACKEND BAD JSON | url={response.url}")
        return envelope(response.status_code, INVALID_FORMAT_MESSAGE, success=False)


def call_backend(
    method: str,
    path: str,
    *,
    token: Optional[str] = None,
    params: Optional[Dict[str, Any]] = None,
    body: Optional[Dict[str, Any]] = None
) -> Tuple[int, Dict[str, Any]]:
    """
    Forward one call to the backend API and return (status_code, json body).
    Backend error statuses are returned, not raised; only transport
    failures become a 502.
    """
    url, headers = build_backend_request(path, token)

    try:
        response = requests.request(
            method,
            url,
            params=clean_params(params),
            data=json.dumps(body) if body is not None else None,
            headers=headers,
            timeout=settings.BACKEND_TIMEOUT
        )
    except requests.RequestException as e:
        logger.error(f"BACKEND UNAVAILABLE | {method} {url} | error={e}")
        raise HTTPException(
            status_code=502,
            detail="Backend API call failed"
        )

    logger.debug(f"BACKEND CALL | {method} {url} | status={response.status_code}")
    return response.status_code, parse_backend_response(response)


def forward(
    method: str,
    path: str,
    *,
    token: Optional[str] = None,
    params: Optional[Dict[str, Any]] = None,
    body: Optional[Dict[str, Any]] = None
) -> JSONResponse:
    """Proxy a call and relay the backend's status code and JSON as-is."""
    status_code, data = call_backend(
        method, path, token=token, params=params, body=body
    )
    return JSONResponse(content=data, status_code=status_code)
