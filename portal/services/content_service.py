"""
Static content files served from CONTENT_DIR.

Every outcome is an envelope: (http status, message, data).
"""
import json
import os
from pathlib import Path
from typing import Any, Optional, Tuple

from portal.core.config import settings

ALLOWED_EXTENSIONS = {".json", ".txt", ".html", ".md", ".csv"}

CONTENT_TYPES = {
    ".json": "application/json",
    ".txt": "text/plain",
    ".html": "text/html",
    ".md": "text/markdown",
    ".csv": "text/csv",
}

ContentResult = Tuple[int, str, Any]


def sanitize_path(raw_path: str) -> str:
    # "../" ve "..\" parçalarını at
    cleaned = raw_path
    while "../" in cleaned or "..\\" in cleaned:
        cleaned = cleaned.replace("../", "").replace("..\\", "")
    return cleaned


def resolve_content_path(raw_path: str, base_dir: Optional[str] = None) -> Optional[Path]:
    """Absolute path inside the content root, or None if it escapes it."""
    if "\x00" in raw_path:
        return None

    base = Path(base_dir or settings.CONTENT_DIR).resolve()
    try:
        full = (base / sanitize_path(raw_path).lstrip("/")).resolve()
    except ValueError:
        # embedded null byte
        return None

    if full != base and base not in full.parents:
        return None
    return full


def _is_listable(entry: Path) -> bool:
    return entry.is_dir() or entry.suffix.lower() in ALLOWED_EXTENSIONS


def read_content(raw_path: str, base_dir: Optional[str] = None) -> ContentResult:
    full = resolve_content_path(raw_path, base_dir)
    if full is None:
        return 400, "Invalid path", None

    if not full.exists():
        return 404, "File not found", None

    if full.is_dir():
        files = sorted(entry.name for entry in full.iterdir() if _is_listable(entry))
        return 200, "Directory listing retrieved successfully", {"files": files}

    extension = full.suffix.lower()
    if extension not in ALLOWED_EXTENSIONS:
        return 403, "File type not allowed", None

    if os.path.getsize(full) > settings.CONTENT_MAX_BYTES:
        return 413, "File too large", None

    text = full.read_text(encoding="utf-8")
    content_type = CONTENT_TYPES[extension]

    if content_type == "application/json":
        try:
            return 200, "Success", json.loads(text)
        except ValueError:
            return 200, "Success", {"content": text}

    return 200, "Success", {"content": text, "type": content_type}
