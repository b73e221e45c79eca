#!/usr/bin/env python3
"""
.resx resource file codec.

A .resx file is a flat key/value envelope:

```xml
<?xml version="1.0" encoding="utf-8"?>
<root>
  <resheader name="resmimetype">
    <value>text/microsoft-resx</value>
  </resheader>
  <resheader name="version">...</resheader>
  <resheader name="reader">...</resheader>
  <resheader name="writer">...</resheader>
  <data name="Greeting" xml:space="preserve">
    <value>Hello</value>
  </data>
</root>
```

The four resheader entries are required by ResXResourceReader and Visual
Studio; without them the file is not recognized as a resource file.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union
from xml.etree import ElementTree as ET

from .errors import ConversionError, FormatError, NotFoundError
from .format_handlers import local_name, to_xml_string

logger = logging.getLogger(__name__)

XML_NS = "http://www.w3.org/XML/1998/namespace"
STRING_TYPE = "System.String"

RESHEADERS = (
    ("resmimetype", "text/microsoft-resx"),
    ("version", "2.0"),
    ("reader", "System.Resources.ResXResourceReader, System.Windows.Forms, "
               "Version=4.0.0.0, Culture=neutral, PublicKeyToken=b77a5c561934e089"),
    ("writer", "System.Resources.ResXResourceWriter, System.Windows.Forms, "
               "Version=4.0.0.0, Culture=neutral, PublicKeyToken=b77a5c561934e089"),
)


@dataclass
class ResxEntry:
    """A single string resource."""
    key: str
    value: str


def _is_string_resource(elem: ET.Element) -> bool:
    resource_type = elem.get('type')
    return resource_type is None or STRING_TYPE in resource_type


def _read_entries(root: ET.Element, source: str) -> list[ResxEntry]:
    if local_name(root.tag) != 'root':
        raise ConversionError(f"Not a .resx file: root element is '{root.tag}'", source)

    values: dict[str, str] = {}
    skipped = 0
    for elem in root.iter('data'):
        name = elem.get('name')
        value_elem = elem.find('value')
        if name is None or value_elem is None:
            continue
        if not _is_string_resource(elem):
            skipped += 1
            continue
        values[name] = ''.join(value_elem.itertext())

    if skipped:
        logger.info("Skipped %d non-string resource(s) in %s", skipped, source)
    return [ResxEntry(key, value) for key, value in values.items()]


def parse_resx(content: str, source: str = "<string>") -> list[ResxEntry]:
    """
    Parse .resx text into string entries, in file order.

    Entries with a non-string type are skipped. When a name occurs more
    than once, the last value wins.

    Raises:
        ConversionError: Content is not a parseable .resx envelope
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise ConversionError(f"Failed to read .resx content: {e}", source) from e
    return _read_entries(root, source)


def read_resx(path: Union[str, Path]) -> list[ResxEntry]:
    """
    Read string entries from a .resx file.

    Raises:
        NotFoundError: File does not exist
        ConversionError: File is not a parseable .resx envelope
    """
    if not path:
        raise FormatError("Resx path is required")
    path = Path(path)
    if not path.is_file():
        raise NotFoundError("Resx file not found", str(path))
    try:
        root = ET.parse(str(path)).getroot()
    except ET.ParseError as e:
        raise ConversionError(f"Failed to read .resx file: {e}", str(path)) from e
    return _read_entries(root, str(path))


def build_resx(entries: list[ResxEntry], pretty: bool = True) -> str:
    """
    Build .resx text from entries.

    Args:
        entries: Resources in output order
        pretty: Indent output with two spaces

    Returns:
        Complete .resx document
    """
    root = ET.Element('root')
    for name, value in RESHEADERS:
        header = ET.SubElement(root, 'resheader', {'name': name})
        ET.SubElement(header, 'value').text = value

    for entry in entries:
        data = ET.SubElement(root, 'data', {'name': entry.key, f'{{{XML_NS}}}space': 'preserve'})
        ET.SubElement(data, 'value').text = entry.value

    return to_xml_string(root, pretty=pretty)


def is_valid_resx(path: Union[str, Path]) -> bool:
    """Whether path is a readable .resx file with at least one <data> element."""
    if not path or not Path(path).is_file():
        return False
    try:
        root = ET.parse(str(path)).getroot()
    except ET.ParseError as e:
        logger.debug("Not a valid .resx file %s: %s", path, e)
        return False
    return local_name(root.tag) == 'root' and root.find('.//data') is not None


def get_resource_count(path: Union[str, Path]) -> int:
    """Number of string resources in a .resx file, 0 when the file is not valid."""
    if not is_valid_resx(path):
        return 0
    return len(read_resx(path))
