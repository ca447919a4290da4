"""XML configuration source.

Parses documents such as::

    <?xml version="1.0" encoding="utf-8" ?>
    <logs>
        <info prefix="[INFO] ">
            <console output="stdout" />
        </info>
    </logs>

into a ConfigNode tree. Only elements and attributes are kept; text,
comments and processing instructions are ignored.
"""

import os
import xml.etree.ElementTree as ET

from logtree.core.errors import ConfigParseError
from logtree.core.models import ConfigNode


def parse_xml_string(text: str | bytes) -> ConfigNode:
    """Parse an XML document into a ConfigNode tree.

    Args:
        text: The document. Leading whitespace is ignored.

    Returns:
        The root node.

    Raises:
        ConfigParseError: If the document is not well formed.
        ConfigShapeError: If an element has two children with the same name.
    """
    try:
        element = ET.fromstring(text.strip())
    except ET.ParseError as e:
        raise ConfigParseError(f"invalid XML configuration: {e}") from e
    return _to_node(element)


def parse_xml_file(path: str | os.PathLike[str]) -> ConfigNode:
    """Parse an XML configuration file.

    Raises:
        OSError: If the file cannot be read.
        ConfigParseError: If the document is not well formed.
        ConfigShapeError: If an element has two children with the same name.
    """
    with open(path, "rb") as f:
        return parse_xml_string(f.read())


def _local(name: str) -> str:
    """Strip an ElementTree ``{namespace}`` prefix."""
    return name.rpartition("}")[2]


def _to_node(element: ET.Element) -> ConfigNode:
    node = ConfigNode(
        name=_local(element.tag),
        attrs={_local(key): value for key, value in element.attrib.items()},
    )
    for child in element:
        # Comments and processing instructions have non-string tags
        if not isinstance(child.tag, str):
            continue
        node.add_child(_to_node(child))
    return node
