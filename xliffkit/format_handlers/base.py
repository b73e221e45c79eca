#!/usr/bin/env python3
"""
Base classes for XLIFF generation handlers.

XliffHandler is the abstract base class every generation-specific codec
implements: it turns XML text into a typed document tree and back.
HandlerRegistry maps XLIFF versions and document types to handlers.
"""

import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional, Union
from xml.etree import ElementTree as ET

from ..enums import XliffVersion
from ..errors import FormatError, TypeMismatchError

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'
INDENT = "  "

_ILLEGAL_XML_CHARS = re.compile(r"[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def qualify(namespace: str, tag: str) -> str:
    """Return the ElementTree qualified name ``{namespace}tag``."""
    return f"{{{namespace}}}{tag}"


def local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix from an ElementTree tag."""
    if tag.startswith('{'):
        return tag.split('}', 1)[1]
    return tag


def element_text(elem: ET.Element) -> str:
    """
    Plain text content of an element.

    Inline markup (<g>, <ph>, <pc>, ...) is flattened to its text; the
    model only keeps plain strings.
    """
    return ''.join(elem.itertext())


def set_optional(elem: ET.Element, name: str, value: Optional[str]) -> None:
    """Set attribute only when value is not None."""
    if value is not None:
        elem.set(name, value)


def check_characters(root: ET.Element) -> None:
    """
    Reject text and attribute values that XML 1.0 cannot represent.

    Raises:
        FormatError: A control character or other illegal code point was found
    """
    for elem in root.iter():
        values = [elem.text, elem.tail, *elem.attrib.values()]
        for value in values:
            if value is None:
                continue
            match = _ILLEGAL_XML_CHARS.search(value)
            if match is not None:
                raise FormatError(
                    f"Character U+{ord(match.group()):04X} is not allowed in XML",
                    f"<{local_name(elem.tag)}>",
                )


def to_xml_string(root: ET.Element, pretty: bool = True) -> str:
    """
    Serialize an element tree with an XML declaration.

    Args:
        root: Root element (mutated by indentation when pretty)
        pretty: Two-space indentation when True, no whitespace otherwise

    Returns:
        XML document as string

    Raises:
        FormatError: Text contains characters XML cannot represent
    """
    check_characters(root)
    if pretty:
        ET.indent(root, space=INDENT)
        return XML_DECLARATION + '\n' + ET.tostring(root, encoding='unicode') + '\n'
    return XML_DECLARATION + ET.tostring(root, encoding='unicode')


class XliffHandler(ABC):
    """
    Abstract base class for XLIFF generation handlers.

    Each handler owns one namespace and one document model. Subclasses
    implement the element-level mapping (read_root / build_root); the
    parse / serialize entry points and the root checks live here.
    """

    @property
    @abstractmethod
    def version(self) -> XliffVersion:
        """XLIFF version handled."""
        pass

    @property
    @abstractmethod
    def namespace(self) -> str:
        """XML namespace of this generation."""
        pass

    @property
    @abstractmethod
    def document_type(self) -> type:
        """Model class of the document root."""
        pass

    @property
    def name(self) -> str:
        return f"xliff-{self.version.value}"

    @abstractmethod
    def read_root(self, root: ET.Element, source: str) -> Any:
        """
        Build a document tree from a verified <xliff> root element.

        Args:
            root: Parsed root element (namespace and version already checked)
            source: Path or content description for error messages

        Returns:
            Document of this handler's model
        """
        pass

    @abstractmethod
    def build_root(self, document: Any) -> ET.Element:
        """
        Build the <xliff> element tree for a document.

        Args:
            document: Document of this handler's model

        Returns:
            Root element declaring this generation's namespace
        """
        pass

    def q(self, tag: str) -> str:
        """Qualified tag name in this handler's namespace."""
        return qualify(self.namespace, tag)

    def parse(self, content: str, source: str = "<string>") -> Any:
        """
        Parse XLIFF text into a document tree.

        Args:
            content: Raw XML
            source: Description used in error messages

        Returns:
            Document of this handler's model

        Raises:
            FormatError: Invalid XML or structure not matching this generation
        """
        if not content:
            raise FormatError("XLIFF content is empty", source)
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise FormatError(f"Invalid XML: {e}", source) from e
        return self._read_checked(root, source)

    def parse_file(self, path: Union[str, Path]) -> Any:
        """
        Parse an XLIFF file into a document tree.

        The caller is responsible for checking the path exists.
        """
        try:
            root = ET.parse(str(path)).getroot()
        except ET.ParseError as e:
            raise FormatError(f"Invalid XML: {e}", str(path)) from e
        return self._read_checked(root, str(path))

    def _read_checked(self, root: ET.Element, source: str) -> Any:
        if root.tag != self.q('xliff'):
            raise FormatError(
                f"Expected root <xliff> in namespace '{self.namespace}', found '{root.tag}'",
                source,
            )
        version = root.get('version')
        if version != self.version.value:
            raise FormatError(
                f"Expected XLIFF version {self.version.value}, found '{version}'",
                source,
            )
        return self.read_root(root, source)

    def serialize(self, document: Any, pretty: bool = True) -> str:
        """
        Serialize a document tree to XLIFF text.

        Args:
            document: Document of this handler's model
            pretty: Indent output with two spaces

        Returns:
            XML text including the XML declaration

        Raises:
            TypeMismatchError: Document belongs to another generation
        """
        if not isinstance(document, self.document_type):
            raise TypeMismatchError(
                f"{self.name} handler cannot serialize {type(document).__name__}"
            )
        return to_xml_string(self.build_root(document), pretty=pretty)


class HandlerRegistry:
    """Registry of available XLIFF handlers."""

    _handlers: dict[XliffVersion, type[XliffHandler]] = {}
    _document_map: dict[type, XliffVersion] = {}  # document class -> version

    @classmethod
    def register(cls, handler_class: type[XliffHandler]) -> None:
        """Register a handler class."""
        handler = handler_class()
        cls._handlers[handler.version] = handler_class
        cls._document_map[handler.document_type] = handler.version

    @classmethod
    def get_handler(cls, version: XliffVersion) -> XliffHandler:
        """Get handler instance by version."""
        if version not in cls._handlers:
            available = ', '.join(v.value for v in cls._handlers)
            raise ValueError(f"Unknown XLIFF version: {version}. Available: {available}")
        return cls._handlers[version]()

    @classmethod
    def get_handler_for_document(cls, document: Any) -> XliffHandler:
        """
        Get the handler matching a document's type.

        Raises:
            TypeMismatchError: Value is not a registered document type
        """
        version = cls._document_map.get(type(document))
        if version is None:
            raise TypeMismatchError(
                f"Unsupported document type: {type(document).__name__}"
            )
        return cls.get_handler(version)

    @classmethod
    def list_handlers(cls) -> list[dict[str, Any]]:
        """List all registered handlers."""
        result = []
        for version, handler_class in cls._handlers.items():
            handler = handler_class()
            result.append({
                'name': handler.name,
                'version': version.value,
                'namespace': handler.namespace,
            })
        return result
