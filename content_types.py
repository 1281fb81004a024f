FALLBACK_CONTENT_TYPE = "application/octet-stream"

CONTENT_TYPES: dict[str, str] = {
    "html": "text/html",
    "css": "text/css",
    "js": "application/javascript",
    "json": "application/json",
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "svg": "image/svg+xml",
    "webp": "image/webp",
    "woff": "font/woff",
    "woff2": "font/woff2",
}


def content_type_for(filename: str) -> str:
    """
    MIME type for a site file, from its extension only.

    Never fails: unknown or missing extensions get the octet-stream fallback.
    """
    name = (filename or "").rsplit("/", 1)[-1]
    if "." not in name:
        return FALLBACK_CONTENT_TYPE
    ext = name.rsplit(".", 1)[-1].lower()
    return CONTENT_TYPES.get(ext, FALLBACK_CONTENT_TYPE)
