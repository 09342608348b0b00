from __future__ import annotations

from urllib.parse import quote, unquote
import xml.etree.ElementTree as ET

from console_plot.errors import EncodingError
from console_plot.scene import SvgNode


DATA_URI_PREFIX = "data:image/svg+xml;utf8,"
# Unreserved marks left as-is. Quotes and parentheses are escaped so the URI
# can sit unquoted inside a CSS url().
_SAFE_CHARS = "-_.!~*"


def serialize_scene(node: SvgNode) -> str:
    try:
        return ET.tostring(_to_element(node), encoding="unicode")
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"failed to serialize scene: {exc}") from exc


def encode_markup(markup: str) -> str:
    try:
        payload = quote(markup, safe=_SAFE_CHARS, encoding="utf-8", errors="strict")
    except (TypeError, UnicodeEncodeError) as exc:
        raise EncodingError(f"failed to percent-encode markup: {exc}") from exc
    return DATA_URI_PREFIX + payload


def encode_scene(node: SvgNode) -> str:
    return encode_markup(serialize_scene(node))


def decode_data_uri(uri: str) -> str:
    if not uri.startswith(DATA_URI_PREFIX):
        raise EncodingError(f"not an SVG data URI: {uri[:40]!r}")
    try:
        return unquote(uri[len(DATA_URI_PREFIX) :], encoding="utf-8", errors="strict")
    except UnicodeDecodeError as exc:
        raise EncodingError(f"failed to decode data URI payload: {exc}") from exc


def _to_element(node: SvgNode) -> ET.Element:
    elem = ET.Element(node.tag, dict(node.attrs))
    if node.text is not None:
        elem.text = node.text
    for child in node.children:
        elem.append(_to_element(child))
    return elem
