from typing import Optional, Tuple


def parse_content_type(header: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """Split a Content-Type header into (media type, charset), both lower-cased."""
    if not header:
        return None, None
    parts = [p.strip() for p in header.split(";")]
    media_type = parts[0].lower() or None
    charset = None
    for p in parts[1:]:
        if p.lower().startswith("charset="):
            charset = p.split("=", 1)[1].strip().strip('"').lower()
            break
    return media_type, charset


def is_html(content_type: Optional[str]) -> bool:
    media_type, _ = parse_content_type(content_type)
    return bool(media_type and "text/html" in media_type)
