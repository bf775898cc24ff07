"""pom.xml parsing"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional, Union

from ..api.exceptions import ParseError
from ..constants import DEFAULT_PACKAGING
from ..models.descriptor import BuildDescriptor


def _local_name(tag: str) -> str:
    # Strip "{http://maven.apache.org/POM/4.0.0}" style namespaces
    return tag.rsplit("}", 1)[-1]


def _child(element: ET.Element, name: str) -> Optional[ET.Element]:
    for child in element:
        if isinstance(child.tag, str) and _local_name(child.tag) == name:
            return child
    return None


def _text(element: Optional[ET.Element]) -> str:
    if element is None or element.text is None:
        return ""
    return element.text.strip()


def parse_descriptor(content: Union[str, bytes], source: Optional[str] = None) -> BuildDescriptor:
    """Parse pom.xml contents

    Only direct children of ``<project>`` are read, so a ``<parent>``
    block never supplies the artifact id.

    Args:
        content: Descriptor contents
        source: Path used in error messages

    Returns:
        Parsed descriptor

    Raises:
        ParseError: On malformed XML, a non-project root or a missing artifactId
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise ParseError(f"invalid XML: {e}", source)

    if _local_name(root.tag) != "project":
        raise ParseError(f"expected <project> root element, found <{_local_name(root.tag)}>", source)

    artifact = _child(root, "artifactId")
    if artifact is None:
        raise ParseError("artifactId not found", source)

    modules = ()
    modules_element = _child(root, "modules")
    if modules_element is not None:
        modules = tuple(
            _text(m) for m in modules_element
            if isinstance(m.tag, str) and _local_name(m.tag) == "module" and _text(m)
        )

    return BuildDescriptor(
        artifact_id=_text(artifact),
        packaging=_text(_child(root, "packaging")) or DEFAULT_PACKAGING,
        modules=modules,
    )


def read_descriptor(path: Union[str, Path]) -> BuildDescriptor:
    """Read and parse a pom.xml file

    Raises:
        ParseError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        content = path.read_bytes()
    except OSError as e:
        raise ParseError(f"cannot read file: {e}", str(path))
    return parse_descriptor(content, str(path))
