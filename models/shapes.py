"""
Declarative XML response shapes.

A shape is a dataclass whose fields carry an ``xml`` path in their
metadata. Paths use ``>`` between element names and are resolved
relative to the document root, ignoring XML namespaces:

    @dataclass
    class Subnet:
        subnet_id: str = xml_field("subnetId")

    @dataclass
    class SubnetResponse:
        subnets: List[Subnet] = xml_list("subnetSet>item", Subnet)
"""
from dataclasses import field, fields, is_dataclass
from typing import Any, Dict, Type, TypeVar
from xml.etree import ElementTree as ET

from utils.exceptions import DecodeError

T = TypeVar("T")


def xml_field(path: str) -> Any:
    """
    Scalar string field read from the element at path.

    When the path matches several elements (an instance in more than one
    security group, say) the first one in document order is used.
    """
    return field(default="", metadata={"xml": path})


def xml_list(path: str, item: type = str) -> Any:
    """List field with one entry per element at path, in document order."""
    return field(default_factory=list, metadata={"xml": path, "item": item})


def _xpath(path: str) -> str:
    return "/".join(part.strip() for part in path.split(">"))


def strip_namespaces(root: ET.Element) -> ET.Element:
    """Drop ``{namespace}`` prefixes from every tag under root."""
    for element in root.iter():
        if isinstance(element.tag, str) and "}" in element.tag:
            element.tag = element.tag.rsplit("}", 1)[1]
    return root


def parse_xml(body: bytes) -> ET.Element:
    """Parse body into a namespace-free element tree; raises ET.ParseError."""
    return strip_namespaces(ET.fromstring(body))


def decode_element(shape: Type[T], element: ET.Element) -> T:
    """Fill a shape dataclass from an already parsed element."""
    values: Dict[str, Any] = {}
    for shape_field in fields(shape):
        path = shape_field.metadata.get("xml")
        if path is None:
            continue
        xpath = _xpath(path)
        item = shape_field.metadata.get("item")
        if item is None:
            node = element.find(xpath)
            if node is not None:
                values[shape_field.name] = node.text or ""
        elif is_dataclass(item):
            values[shape_field.name] = [
                decode_element(item, node) for node in element.findall(xpath)
            ]
        else:
            values[shape_field.name] = [
                node.text or "" for node in element.findall(xpath)
            ]
    return shape(**values)


def decode(shape: Type[T], body: bytes) -> T:
    """
    Decode an XML document into a new instance of shape.

    Args:
        shape: Response dataclass
        body: Raw XML response body

    Returns:
        Populated shape instance

    Raises:
        DecodeError: If body is not well-formed XML
    """
    try:
        root = parse_xml(body)
    except ET.ParseError as e:
        raise DecodeError(str(e), shape=shape.__name__) from e
    return decode_element(shape, root)
