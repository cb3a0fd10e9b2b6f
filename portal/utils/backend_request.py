from typing import Dict, Optional

from portal.core.config import settings


def build_backend_request(path: str, token: Optional[str] = None):
    base_url = settings.BACKEND_URL.rstrip("/")
    url = f"{base_url}/{path.lstrip('/')}"

    headers = {
        "Content-Type": "application/json; charset=utf-8",
        "Accept": "application/json",
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"

    return url, headers


def clean_params(params: Optional[Dict]) -> Optional[Dict]:
    # boş query parametreleri backend'e gitmesin
    if not params:
        return None
    return {k: v for k, v in params.items() if v is not None and v != ""}
