#!/usr/bin/env python3
"""
XLIFF 2.0 document model.

Segment-based schema: languages are declared once on the root, and every
unit holds one or more segments, each with its own state.

```xml
<xliff version="2.0" xmlns="urn:oasis:names:tc:xliff:document:2.0"
       srcLang="en-US" trgLang="fr-FR">
  <file id="Strings" original="Strings.resx">
    <unit id="Greeting" name="Greeting">
      <segment id="1" state="translated">
        <source>Hello</source>
        <target>Bonjour</target>
      </segment>
    </unit>
  </file>
</xliff>
```
"""

from dataclasses import dataclass, field
from typing import Optional

from .. import __version__
from ..enums import ApprovalState, TranslationState

VERSION = "2.0"
NAMESPACE = "urn:oasis:names:tc:xliff:document:2.0"


@dataclass
class Note:
    content: str = ""
    id: Optional[str] = None
    priority: Optional[str] = None
    category: Optional[str] = None


@dataclass
class Tool:
    id: str = "xliffkit"
    name: str = "xliffkit"
    version: str = __version__


@dataclass
class Header:
    tool: Optional[Tool] = None
    notes: list[Note] = field(default_factory=list)


@dataclass
class Segment:
    """
    Smallest translatable span.

    Attributes:
        id: Segment identifier (empty when the attribute is absent)
        source: Source text, always present (may be empty)
        target: Translated text, None when no <target> element exists
        state: Translation state; only NEW, TRANSLATED,
            NEEDS_REVIEW_TRANSLATION and FINAL can be written to XML
    """
    id: str = ""
    source: str = ""
    target: Optional[str] = None
    state: TranslationState = TranslationState.NEW


@dataclass
class Unit:
    id: str
    name: Optional[str] = None
    approved: ApprovalState = ApprovalState.UNAPPROVED
    notes: list[Note] = field(default_factory=list)
    segments: list[Segment] = field(default_factory=list)


@dataclass
class Group:
    id: str = ""
    name: Optional[str] = None
    units: list[Unit] = field(default_factory=list)
    groups: list["Group"] = field(default_factory=list)


@dataclass
class File:
    id: str = ""
    original: Optional[str] = None
    header: Optional[Header] = None
    units: list[Unit] = field(default_factory=list)
    groups: list[Group] = field(default_factory=list)


@dataclass
class Document:
    """Root of an XLIFF 2.0 tree. The version tag is fixed."""
    source_language: str = ""
    target_language: Optional[str] = None
    files: list[File] = field(default_factory=list)
    version: str = field(default=VERSION, init=False)

    def iter_units(self):
        """Yield every Unit depth-first in document order."""
        for xliff_file in self.files:
            yield from xliff_file.units
            for group in xliff_file.groups:
                yield from _iter_group_units(group)


def _iter_group_units(group: Group):
    yield from group.units
    for nested in group.groups:
        yield from _iter_group_units(nested)
