from fastapi import APIRouter
from fastapi.responses import JSONResponse

from portal.core.logger import logger
from portal.services.backend_client import envelope
from portal.services.content_service import read_content

router = APIRouter(prefix="/api/admin/content", tags=["Content"])


@router.get("/{path:path}")
def get_content(path: str):
    try:
        status_code, message, data = read_content(path)
    except (OSError, ValueError) as e:
        logger.error(f"CONTENT READ FAILED | path={path!r} | error={e}")
        return JSONResponse(
            envelope(500, "Internal server error", success=False),
            status_code=500
        )

    headers = {}
    if status_code == 200:
        headers["Cache-Control"] = "public, max-age=3600"
    else:
        logger.info(f"CONTENT REJECTED | path={path!r} | status={status_code}")

    return JSONResponse(
        envelope(status_code, message, data),
        status_code=status_code,
        headers=headers
    )
