"""Small HTTP helpers that send the client's headers and undo gzip."""

import gzip
import urllib.error
import urllib.request
from typing import BinaryIO

_MOBILE_AGENT = "QQ/8.2.0.1296 CFNetwork/1126"
_ANDROID_AGENT = "Dalvik/2.1.0 (Linux; U; Android 7.1.2; PCRT00 Build/N2G48H)"

_opener = urllib.request.build_opener()


def _open(request: urllib.request.Request):
    """Send request; an HTTP error status still yields its response."""
    try:
        return _opener.open(request)
    except urllib.error.HTTPError as error:
        return error


def _is_gzip(response) -> bool:
    return "gzip" in (response.headers.get("Content-Encoding") or "")


def _read_body(response) -> bytes:
    with response:
        body = response.read()
        if _is_gzip(response):
            return gzip.decompress(body)
        return body


class _GzipResponse(gzip.GzipFile):
    """Decompressing reader that also closes the underlying response."""

    def __init__(self, response) -> None:
        super().__init__(fileobj=response, mode="rb")
        self._response = response

    def close(self) -> None:
        try:
            super().close()
        finally:
            self._response.close()


def http_get_stream(url: str, cookie: str = "") -> BinaryIO:
    """GET url and return a readable body stream, gunzipped if needed."""
    headers = {"User-Agent": _MOBILE_AGENT, "Net-Type": "Wifi"}
    if cookie:
        headers["Cookie"] = cookie
    response = _open(urllib.request.Request(url, headers=headers, method="GET"))
    if _is_gzip(response):
        return _GzipResponse(response)
    return response


def http_get_bytes(url: str, cookie: str = "") -> bytes:
    """GET url with an optional cookie and return the whole body."""
    with http_get_stream(url, cookie) as body:
        return body.read()


def http_post_bytes(url: str, data: bytes) -> bytes:
    """POST data to url and return the body."""
    headers = {"User-Agent": _MOBILE_AGENT, "Net-Type": "Wifi"}
    request = urllib.request.Request(url, data=data, headers=headers, method="POST")
    return _read_body(_open(request))


def http_post_bytes_with_cookie(
    url: str, data: bytes, cookie: str = "", content_type: str = "application/json"
) -> bytes:
    """POST data to url with a cookie and content type and return the body."""
    headers = {"User-Agent": _ANDROID_AGENT, "Content-Type": content_type}
    if cookie:
        headers["Cookie"] = cookie
    request = urllib.request.Request(url, data=data, headers=headers, method="POST")
    return _read_body(_open(request))