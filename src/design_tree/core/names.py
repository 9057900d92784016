import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)

_TAG_INVALID = re.compile(r"[^a-zA-Z0-9\-_ ]")
_ATTR_INVALID = re.compile(r"[^a-zA-Z0-9\-_]")
_WHITESPACE = re.compile(r"\s+")
_LEADING_DIGIT = re.compile(r"^(\d)")

_URL_FILE_KEY = re.compile(r"/(file|design)/([a-zA-Z0-9]+)")
_URL_NODE_ID = re.compile(r"node-id=([0-9]+-[0-9]+)")


@dataclass(frozen=True)
class DesignUrl:
    file_key: str
    node_id: str | None = None


def escape_xml(value: object) -> str:
    """Escape the five XML special characters; ``&`` goes first so nothing is escaped twice."""
    escaped = str(value)
    for char, entity in _XML_ESCAPES:
        escaped = escaped.replace(char, entity)
    return escaped


def to_tag_name(value: str) -> str:
    tag = _TAG_INVALID.sub("", value)
    tag = _WHITESPACE.sub("-", tag)
    tag = _LEADING_DIGIT.sub(r"_\1", tag)
    return tag or "Element"


def to_attr_name(value: str) -> str:
    attr = _ATTR_INVALID.sub("", value)
    attr = _LEADING_DIGIT.sub(r"_\1", attr)
    return attr or "attr"


def to_kebab_case(value: str) -> str:
    kebab = value.strip().lower()
    kebab = re.sub(r"[^a-z0-9\s-]", "", kebab)
    kebab = _WHITESPACE.sub("-", kebab)
    kebab = re.sub(r"-+", "-", kebab)
    return kebab.strip("-")


def screen_filename(name: str, node_id: str) -> str:
    """File stem for a compacted screen, e.g. ``dashboard-main_1234-5678``."""
    return f"{to_kebab_case(name)}_{node_id.replace(':', '-')}"


def node_id_to_api_format(url_node_id: str) -> str:
    return url_node_id.replace("-", ":")


def parse_design_url(url: str) -> DesignUrl | None:
    file_key_match = _URL_FILE_KEY.search(url)
    if not file_key_match:
        logger.error("Invalid design URL format: %s", url)
        return None

    node_id_match = _URL_NODE_ID.search(url)
    return DesignUrl(
        file_key=file_key_match.group(2),
        node_id=node_id_match.group(1) if node_id_match else None,
    )
