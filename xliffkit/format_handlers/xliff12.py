#!/usr/bin/env python3
"""
XLIFF 1.2 format handler.

Maps between <xliff version="1.2"> XML and the xliffkit.models.xliff12
tree. The full TranslationState vocabulary is written and read verbatim.
"""

import logging
from typing import Optional
from xml.etree import ElementTree as ET

from ..enums import TranslationState, XliffVersion
from ..errors import FormatError
from ..models import xliff12
from .base import XliffHandler, element_text, set_optional

logger = logging.getLogger(__name__)

_STATES_BY_NAME = {state.value: state for state in TranslationState}


def encode_state(state: TranslationState) -> Optional[str]:
    """
    Wire string for a translation state.

    NEW is the schema default and is never written (returns None).
    """
    if state is TranslationState.NEW:
        return None
    return state.value


def decode_state(value: Optional[str], unit: str = "<unit>") -> TranslationState:
    """
    Translation state for a `state` attribute value.

    An absent or empty attribute means NEW. Matching is case-insensitive.
    Values outside the predefined list (including `x-` extension states)
    are read as NEW with a warning.

    Args:
        value: Raw attribute value
        unit: Unit description used in the warning
    """
    if not value:
        return TranslationState.NEW
    state = _STATES_BY_NAME.get(value.lower())
    if state is None:
        logger.warning("Unknown XLIFF 1.2 state '%s' on %s, reading as new", value, unit)
        return TranslationState.NEW
    return state


class Xliff12Handler(XliffHandler):
    """
    Handler for XLIFF 1.2 documents.

    Structure:
    ```xml
    <xliff version="1.2" xmlns="urn:oasis:names:tc:xliff:document:1.2">
      <file original="app.resx" source-language="en" target-language="de" datatype="resx">
        <header>
          <tool tool-id="xliffkit" tool-name="xliffkit" tool-version="1.0.0"/>
        </header>
        <body>
          <trans-unit id="a" resname="a" state="translated">
            <source>Hello</source>
            <target>Hallo</target>
            <note from="dev">Greeting</note>
          </trans-unit>
          <group id="g1">...</group>
        </body>
      </file>
    </xliff>
    ```
    """

    @property
    def version(self) -> XliffVersion:
        return XliffVersion.V1_2

    @property
    def namespace(self) -> str:
        return xliff12.NAMESPACE

    @property
    def document_type(self) -> type:
        return xliff12.Document

    # Reading

    def read_root(self, root: ET.Element, source: str) -> xliff12.Document:
        document = xliff12.Document(
            files=[self._read_file(elem, source) for elem in root.findall(self.q('file'))]
        )
        logger.debug("Read XLIFF 1.2 document with %d file(s) from %s", len(document.files), source)
        return document

    def _read_file(self, elem: ET.Element, source: str) -> xliff12.File:
        header_elem = elem.find(self.q('header'))
        body_elem = elem.find(self.q('body'))

        xliff_file = xliff12.File(
            original=elem.get('original', ''),
            source_language=elem.get('source-language', ''),
            target_language=elem.get('target-language'),
            datatype=elem.get('datatype', 'xml'),
            header=self._read_header(header_elem) if header_elem is not None else None,
        )
        if body_elem is not None:
            units, groups = self._read_container(body_elem, source)
            xliff_file.body = xliff12.Body(units=units, groups=groups)
        return xliff_file

    def _read_header(self, elem: ET.Element) -> xliff12.Header:
        header = xliff12.Header(notes=self._read_notes(elem))
        tool_elem = elem.find(self.q('tool'))
        if tool_elem is not None:
            header.tool = xliff12.Tool(
                tool_id=tool_elem.get('tool-id', ''),
                tool_name=tool_elem.get('tool-name', ''),
                tool_version=tool_elem.get('tool-version', ''),
            )
        return header

    def _read_container(
        self, elem: ET.Element, source: str
    ) -> tuple[list[xliff12.TransUnit], list[xliff12.Group]]:
        """Read trans-unit and group children of a body or group, in order."""
        units = []
        groups = []
        for child in elem:
            if child.tag == self.q('trans-unit'):
                units.append(self._read_unit(child, source))
            elif child.tag == self.q('group'):
                nested_units, nested_groups = self._read_container(child, source)
                groups.append(xliff12.Group(
                    id=child.get('id', ''),
                    resource_name=child.get('resname'),
                    units=nested_units,
                    groups=nested_groups,
                ))
        return units, groups

    def _read_unit(self, elem: ET.Element, source: str) -> xliff12.TransUnit:
        unit_id = elem.get('id')
        if unit_id is None:
            raise FormatError("<trans-unit> without 'id' attribute", source)

        source_elem = elem.find(self.q('source'))
        if source_elem is None:
            raise FormatError(f"<trans-unit id='{unit_id}'> has no <source>", source)
        target_elem = elem.find(self.q('target'))

        return xliff12.TransUnit(
            id=unit_id,
            source=element_text(source_elem),
            target=element_text(target_elem) if target_elem is not None else None,
            resource_name=elem.get('resname'),
            approved=elem.get('approved'),
            state=decode_state(elem.get('state'), f"trans-unit '{unit_id}' in {source}"),
            notes=self._read_notes(elem),
        )

    def _read_notes(self, elem: ET.Element) -> list[xliff12.Note]:
        return [
            xliff12.Note(
                content=element_text(note),
                priority=note.get('priority'),
                from_=note.get('from'),
            )
            for note in elem.findall(self.q('note'))
        ]

    # Writing

    def build_root(self, document: xliff12.Document) -> ET.Element:
        root = ET.Element('xliff', {'version': xliff12.VERSION, 'xmlns': self.namespace})
        for xliff_file in document.files:
            self._build_file(root, xliff_file)
        return root

    def _build_file(self, parent: ET.Element, xliff_file: xliff12.File) -> None:
        elem = ET.SubElement(parent, 'file')
        elem.set('original', xliff_file.original)
        elem.set('source-language', xliff_file.source_language)
        set_optional(elem, 'target-language', xliff_file.target_language)
        elem.set('datatype', xliff_file.datatype)

        if xliff_file.header is not None:
            self._build_header(elem, xliff_file.header)

        body = ET.SubElement(elem, 'body')
        self._build_container(body, xliff_file.body.units, xliff_file.body.groups)

    def _build_header(self, parent: ET.Element, header: xliff12.Header) -> None:
        elem = ET.SubElement(parent, 'header')
        if header.tool is not None:
            ET.SubElement(elem, 'tool', {
                'tool-id': header.tool.tool_id,
                'tool-name': header.tool.tool_name,
                'tool-version': header.tool.tool_version,
            })
        self._build_notes(elem, header.notes)

    def _build_container(
        self,
        parent: ET.Element,
        units: list[xliff12.TransUnit],
        groups: list[xliff12.Group],
    ) -> None:
        for unit in units:
            self._build_unit(parent, unit)
        for group in groups:
            elem = ET.SubElement(parent, 'group', {'id': group.id})
            set_optional(elem, 'resname', group.resource_name)
            self._build_container(elem, group.units, group.groups)

    def _build_unit(self, parent: ET.Element, unit: xliff12.TransUnit) -> None:
        elem = ET.SubElement(parent, 'trans-unit', {'id': unit.id})
        set_optional(elem, 'resname', unit.resource_name)
        set_optional(elem, 'approved', unit.approved)
        set_optional(elem, 'state', encode_state(unit.state))

        ET.SubElement(elem, 'source').text = unit.source
        if unit.target is not None:
            ET.SubElement(elem, 'target').text = unit.target
        self._build_notes(elem, unit.notes)

    def _build_notes(self, parent: ET.Element, notes: list[xliff12.Note]) -> None:
        for note in notes:
            elem = ET.SubElement(parent, 'note')
            set_optional(elem, 'priority', note.priority)
            set_optional(elem, 'from', note.from_)
            elem.text = note.content
