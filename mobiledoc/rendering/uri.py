"""
URI parsing and normalization for image section sources.

Parsing is permissive in the way generic URI references are: relative
references such as ``img/foo.png`` are accepted. A source is rejected when it
contains ASCII control characters, starts with ``:``, has a colon in the first
segment of a scheme-less reference, has a malformed percent escape, has a host or
userinfo with characters not allowed there, or carries a non-numeric port.

Normalization lower-cases the scheme and percent-encodes characters that may
not appear unescaped in the path or fragment. Queries and hosts are kept
verbatim; no whitespace is stripped.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple
from urllib.parse import quote, unquote

from ..exceptions import MalformedURI

_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_CTL_RE = re.compile(r"[\x00-\x1f\x7f]")

_ALNUM = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"

# Characters that may appear as-is in an already-encoded path or fragment.
_VALID_ENCODED = set(_ALNUM + "-._~!$&'()*+,;=:@[]/%")
# ASCII characters allowed in a host; non-ASCII is allowed for IDNs.
_HOST_CHARS = set(_ALNUM + "-._~!$&'()*+,;=%<>\"")
_USERINFO_CHARS = set(_ALNUM + "-._~!$&'()*+,;=%:@")
_PATH_SAFE = "/:@$&+,;="
_FRAGMENT_SAFE = "/:@$&+,;=!()*?"


def _split_scheme(source: str) -> Tuple[Optional[str], str]:
    if source.startswith(":"):
        raise MalformedURI(source, "missing protocol scheme")
    m = _SCHEME_RE.match(source)
    if m:
        return m.group(1), source[m.end() :]
    return None, source


def _check_authority(source: str, authority: str) -> None:
    userinfo, _, hostport = authority.rpartition("@")
    if any(ch not in _USERINFO_CHARS for ch in userinfo):
        raise MalformedURI(source, "invalid userinfo")
    if hostport.startswith("["):
        end = hostport.find("]")
        if end < 0:
            raise MalformedURI(source, "missing ']' in host")
        host, port_part = hostport[1:end], hostport[end + 1 :]
        if port_part and not port_part.startswith(":"):
            raise MalformedURI(source, f"invalid port {port_part!r} after host")
        port = port_part[1:]
        host_chars = _HOST_CHARS | {":"}
    else:
        host, _, port = hostport.partition(":")
        host_chars = _HOST_CHARS
    if port and not port.isdigit():
        raise MalformedURI(source, f"invalid port {':' + port!r} after host")
    for ch in host:
        if ord(ch) < 0x80 and ch not in host_chars:
            raise MalformedURI(source, f"invalid character {ch!r} in host name")


def _escape(component: str, safe: str) -> str:
    if all(ch in _VALID_ENCODED for ch in component):
        return component
    return quote(unquote(component), safe=safe)


def parse_uri(source: str) -> str:
    """Validate ``source`` as a URI reference and return its normalized form.

    Raises MalformedURI when the source does not parse.
    """
    if _CTL_RE.search(source):
        raise MalformedURI(source, "invalid control character in URL")
    if _BAD_ESCAPE_RE.search(source):
        raise MalformedURI(source, "invalid URL escape")

    scheme, rest = _split_scheme(source)
    if scheme is None:
        first_segment = rest.split("/", 1)[0]
        if ":" in first_segment:
            raise MalformedURI(
                source, "first path segment in URL cannot contain colon"
            )

    body, has_fragment, fragment = rest.partition("#")
    body, has_query, query = body.partition("?")

    authority = None
    path = body
    if body.startswith("//"):
        authority, slash, tail = body[2:].partition("/")
        path = slash + tail
        _check_authority(source, authority)

    out = []
    if scheme is not None:
        out.append(scheme.lower() + ":")
    if authority is not None:
        out.append("//" + authority)
    try:
        out.append(_escape(path, _PATH_SAFE))
        if has_query:
            out.append("?" + query)
        if has_fragment:
            out.append("#" + _escape(fragment, _FRAGMENT_SAFE))
    except UnicodeError as e:
        raise MalformedURI(source, f"cannot encode: {e}") from e
    return "".join(out)
