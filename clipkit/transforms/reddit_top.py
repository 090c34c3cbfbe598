#!/usr/bin/env python3
"""
Rewrite a reddit link so it opens sorted by top, all time.

  /r/<sub>            -> /r/<sub>/top?sort=top&t=all
  /u/<name>, /user/.. -> .../submitted?sort=top
  .../comments/...    -> same thread, ?sort=top&t=all

Query parameters other than sort and t are left exactly as written.
"""
from urllib.parse import quote, unquote_plus, urlsplit, urlunsplit

from clipkit.errors import InvalidUrl

USER_PREFIXES = ("/u/", "/user/")


def _parse(text: str):
    try:
        parts = urlsplit(text.strip())
        parts.port  # raises on a malformed port
    except ValueError as e:
        raise InvalidUrl(f"Not a URL: {text!r} ({e})") from e
    if not parts.scheme:
        raise InvalidUrl(f"Not a URL: {text!r}")
    if not parts.netloc:
        raise InvalidUrl(f"URL has no host to hang path segments on: {text!r}")
    return parts


def _append_segment(path: str, segment: str) -> str:
    return f"{path}/{quote(segment, safe='')}"


def _key(piece: str) -> str:
    return unquote_plus(piece.split("=", 1)[0])


def _set_params(query: str, **params) -> str:
    """
    Set each param in the raw *query*, replacing the first match and dropping
    repeats. Other pieces are kept verbatim.
    """
    pieces = query.split("&") if query else []
    for key, value in params.items():
        out, seen = [], False
        for piece in pieces:
            if _key(piece) != key:
                out.append(piece)
            elif not seen:
                out.append(f"{key}={value}")
                seen = True
        if not seen:
            out.append(f"{key}={value}")
        pieces = out
    return "&".join(pieces)


def transform(text: str) -> str:
    parts = _parse(text)
    path = parts.path.rstrip("/")

    if path.startswith(USER_PREFIXES):
        path = _append_segment(path, "submitted")
        query = _set_params(parts.query, sort="top")
    else:
        if "/comments/" not in path:
            path = _append_segment(path, "top")
        query = _set_params(parts.query, sort="top", t="all")

    return urlunsplit((parts.scheme, parts.netloc, path, query, parts.fragment))
