"""
Bearer token handling for drawing downloads.

Drawing links handed out by the web front-end carry the session token as a
`token` query parameter. The token is moved into an Authorization header so
it never appears in the request line.
"""

from urllib.parse import unquote_plus, urlsplit, urlunsplit

TOKEN_PARAM = "token"


def split_token(url: str) -> tuple[str, str | None]:
    """
    Removes the `token` query parameter from a URL.

    The other query segments are kept byte for byte, in their original order.

    Returns:
        The URL without the parameter and the token value, or the unchanged
        URL and None when no token parameter is present.
    """
    parts = urlsplit(url)
    kept: list[str] = []
    tokens: list[str] = []
    for segment in parts.query.split("&") if parts.query else []:
        key, _, value = segment.partition("=")
        if unquote_plus(key) == TOKEN_PARAM:
            tokens.append(unquote_plus(value))
        else:
            kept.append(segment)

    if not tokens:
        return url, None

    clean_url = urlunsplit(parts._replace(query="&".join(kept)))
    return clean_url, tokens[0]


def bearer_headers(token: str | None) -> dict[str, str]:
    if not token:
        return {}
    return {"Authorization": f"Bearer {token}"}


def prepare_request(url: str, auth_token: str | None = None) -> tuple[str, dict[str, str]]:
    """
    Builds the request URL and headers for a download.

    An explicit `auth_token` takes precedence over one found in the URL. The
    `token` parameter is stripped from the URL in both cases.
    """
    clean_url, url_token = split_token(url)
    return clean_url, bearer_headers(auth_token or url_token)
