"""Utility functions for swift-object."""

import urllib.parse


def humanize_size(size: float) -> str:
    """Format a byte count for display, e.g. 2048 -> "2.0 KB"."""
    value = float(size)
    for unit in ("B", "KB", "MB", "GB"):
        if value < 1024:
            break
        value /= 1024
    else:
        unit = "TB"
    return f"{value:.1f} {unit}"


def name_from_url(url: str) -> str:
    """Derive an object name from its URL.

    Swift URLs look like ``<endpoint>/v1/<account>/<container>/<object>``;
    the object name may itself contain slashes, so everything after the
    container segment is kept.

    Examples:
        "https://swift/v1/AUTH_x/photos/2012/cat.jpg" -> "2012/cat.jpg"
        "https://swift/other/cat.jpg" -> "cat.jpg"
    """
    path = urllib.parse.unquote(urllib.parse.urlparse(url).path)
    parts = [p for p in path.split("/") if p]
    if "v1" in parts:
        idx = parts.index("v1")
        if len(parts) > idx + 3:
            return "/".join(parts[idx + 3:])
    return parts[-1] if parts else ""
