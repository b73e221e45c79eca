#!/usr/bin/env python3
"""
XLIFF 2.0 format handler.

Maps between <xliff version="2.0"> XML and the xliffkit.models.xliff20
tree. XLIFF 2.0 only defines four segment states, so the shared
TranslationState enum is mapped through a dedicated codec:

    initial    <-> NEW (never written, it is the default)
    translated <-> TRANSLATED
    reviewed   <-> NEEDS_REVIEW_TRANSLATION
    final      <-> FINAL

Any other TranslationState cannot be expressed in 2.0 and is rejected on
save instead of being silently dropped.
"""

import logging
from typing import Optional
from xml.etree import ElementTree as ET

from ..enums import ApprovalState, TranslationState, XliffVersion
from ..errors import FormatError
from ..models import xliff20
from .base import XliffHandler, element_text, set_optional

logger = logging.getLogger(__name__)

STATE_TO_WIRE = {
    TranslationState.TRANSLATED: "translated",
    TranslationState.NEEDS_REVIEW_TRANSLATION: "reviewed",
    TranslationState.FINAL: "final",
}
WIRE_TO_STATE = {
    "initial": TranslationState.NEW,
    "translated": TranslationState.TRANSLATED,
    "reviewed": TranslationState.NEEDS_REVIEW_TRANSLATION,
    "final": TranslationState.FINAL,
}


def encode_state(state: TranslationState, source: str = "<document>") -> Optional[str]:
    """
    XLIFF 2.0 wire string for a segment state.

    Returns None for NEW (attribute omitted).

    Raises:
        FormatError: State has no XLIFF 2.0 equivalent
    """
    if state is TranslationState.NEW:
        return None
    try:
        return STATE_TO_WIRE[state]
    except KeyError:
        supported = ', '.join(s.name for s in [TranslationState.NEW, *STATE_TO_WIRE])
        raise FormatError(
            f"Translation state {state.name} cannot be written to XLIFF 2.0 "
            f"(supported: {supported})",
            source,
        ) from None


def decode_state(value: Optional[str], source: str = "<string>") -> TranslationState:
    """
    Segment state for an XLIFF 2.0 `state` attribute.

    Raises:
        FormatError: Value is not one of initial/translated/reviewed/final
    """
    if not value:
        return TranslationState.NEW
    state = WIRE_TO_STATE.get(value.lower())
    if state is None:
        raise FormatError(f"Unknown XLIFF 2.0 segment state: '{value}'", source)
    return state


def encode_approval(approved: ApprovalState) -> Optional[str]:
    """Wire string for approval; UNAPPROVED is the default and is omitted."""
    if approved is ApprovalState.UNAPPROVED:
        return None
    return approved.value


def decode_approval(value: Optional[str], source: str = "<string>") -> ApprovalState:
    if not value:
        return ApprovalState.UNAPPROVED
    try:
        return ApprovalState(value.lower())
    except ValueError as e:
        raise FormatError(f"Unknown approval state: '{value}'", source) from e


class Xliff20Handler(XliffHandler):
    """
    Handler for XLIFF 2.0 documents.

    Structure:
    ```xml
    <xliff version="2.0" xmlns="urn:oasis:names:tc:xliff:document:2.0" srcLang="en" trgLang="de">
      <file id="app" original="app.resx">
        <unit id="a" name="a" approved="approved">
          <notes>
            <note category="context">Greeting</note>
          </notes>
          <segment id="1" state="final">
            <source>Hello</source>
            <target>Hallo</target>
          </segment>
        </unit>
        <group id="g1">...</group>
      </file>
    </xliff>
    ```

    Unit notes are written inside <notes>; bare <note> children of a unit
    are accepted on load as well.
    """

    @property
    def version(self) -> XliffVersion:
        return XliffVersion.V2_0

    @property
    def namespace(self) -> str:
        return xliff20.NAMESPACE

    @property
    def document_type(self) -> type:
        return xliff20.Document

    # Reading

    def read_root(self, root: ET.Element, source: str) -> xliff20.Document:
        document = xliff20.Document(
            source_language=root.get('srcLang', ''),
            target_language=root.get('trgLang'),
            files=[self._read_file(elem, source) for elem in root.findall(self.q('file'))],
        )
        logger.debug("Read XLIFF 2.0 document with %d file(s) from %s", len(document.files), source)
        return document

    def _read_file(self, elem: ET.Element, source: str) -> xliff20.File:
        header_elem = elem.find(self.q('header'))
        units, groups = self._read_container(elem, source)
        return xliff20.File(
            id=elem.get('id', ''),
            original=elem.get('original'),
            header=self._read_header(header_elem) if header_elem is not None else None,
            units=units,
            groups=groups,
        )

    def _read_header(self, elem: ET.Element) -> xliff20.Header:
        header = xliff20.Header(notes=self._read_notes(elem))
        tool_elem = elem.find(self.q('tool'))
        if tool_elem is not None:
            header.tool = xliff20.Tool(
                id=tool_elem.get('id', ''),
                name=tool_elem.get('name', ''),
                version=tool_elem.get('version', ''),
            )
        return header

    def _read_container(
        self, elem: ET.Element, source: str
    ) -> tuple[list[xliff20.Unit], list[xliff20.Group]]:
        units = []
        groups = []
        for child in elem:
            if child.tag == self.q('unit'):
                units.append(self._read_unit(child, source))
            elif child.tag == self.q('group'):
                nested_units, nested_groups = self._read_container(child, source)
                groups.append(xliff20.Group(
                    id=child.get('id', ''),
                    name=child.get('name'),
                    units=nested_units,
                    groups=nested_groups,
                ))
        return units, groups

    def _read_unit(self, elem: ET.Element, source: str) -> xliff20.Unit:
        unit_id = elem.get('id')
        if unit_id is None:
            raise FormatError("<unit> without 'id' attribute", source)

        notes = self._read_notes(elem)
        notes_elem = elem.find(self.q('notes'))
        if notes_elem is not None:
            notes.extend(self._read_notes(notes_elem))

        segments = [
            self._read_segment(child, unit_id, source)
            for child in elem.findall(self.q('segment'))
        ]
        if not segments:
            raise FormatError(f"<unit id='{unit_id}'> has no <segment>", source)

        return xliff20.Unit(
            id=unit_id,
            name=elem.get('name'),
            approved=decode_approval(elem.get('approved'), source),
            notes=notes,
            segments=segments,
        )

    def _read_segment(self, elem: ET.Element, unit_id: str, source: str) -> xliff20.Segment:
        source_elem = elem.find(self.q('source'))
        if source_elem is None:
            raise FormatError(f"Segment of <unit id='{unit_id}'> has no <source>", source)
        target_elem = elem.find(self.q('target'))

        return xliff20.Segment(
            id=elem.get('id', ''),
            source=element_text(source_elem),
            target=element_text(target_elem) if target_elem is not None else None,
            state=decode_state(elem.get('state'), source),
        )

    def _read_notes(self, elem: ET.Element) -> list[xliff20.Note]:
        return [
            xliff20.Note(
                content=element_text(note),
                id=note.get('id'),
                priority=note.get('priority'),
                category=note.get('category'),
            )
            for note in elem.findall(self.q('note'))
        ]

    # Writing

    def build_root(self, document: xliff20.Document) -> ET.Element:
        root = ET.Element('xliff', {'version': xliff20.VERSION, 'xmlns': self.namespace})
        root.set('srcLang', document.source_language)
        set_optional(root, 'trgLang', document.target_language)
        for xliff_file in document.files:
            self._build_file(root, xliff_file)
        return root

    def _build_file(self, parent: ET.Element, xliff_file: xliff20.File) -> None:
        elem = ET.SubElement(parent, 'file', {'id': xliff_file.id})
        set_optional(elem, 'original', xliff_file.original)

        if xliff_file.header is not None:
            header = ET.SubElement(elem, 'header')
            if xliff_file.header.tool is not None:
                tool = xliff_file.header.tool
                ET.SubElement(header, 'tool', {
                    'id': tool.id,
                    'name': tool.name,
                    'version': tool.version,
                })
            self._build_notes(header, xliff_file.header.notes)

        self._build_container(elem, xliff_file.units, xliff_file.groups)

    def _build_container(
        self,
        parent: ET.Element,
        units: list[xliff20.Unit],
        groups: list[xliff20.Group],
    ) -> None:
        for unit in units:
            self._build_unit(parent, unit)
        for group in groups:
            elem = ET.SubElement(parent, 'group', {'id': group.id})
            set_optional(elem, 'name', group.name)
            self._build_container(elem, group.units, group.groups)

    def _build_unit(self, parent: ET.Element, unit: xliff20.Unit) -> None:
        elem = ET.SubElement(parent, 'unit', {'id': unit.id})
        set_optional(elem, 'name', unit.name)
        set_optional(elem, 'approved', encode_approval(unit.approved))

        if unit.notes:
            self._build_notes(ET.SubElement(elem, 'notes'), unit.notes)

        for segment in unit.segments:
            seg_elem = ET.SubElement(elem, 'segment', {'id': segment.id})
            set_optional(seg_elem, 'state', encode_state(segment.state, f"unit '{unit.id}'"))
            ET.SubElement(seg_elem, 'source').text = segment.source
            if segment.target is not None:
                ET.SubElement(seg_elem, 'target').text = segment.target

    def _build_notes(self, parent: ET.Element, notes: list[xliff20.Note]) -> None:
        for note in notes:
            elem = ET.SubElement(parent, 'note')
            set_optional(elem, 'id', note.id)
            set_optional(elem, 'priority', note.priority)
            set_optional(elem, 'category', note.category)
            elem.text = note.content
