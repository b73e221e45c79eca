#!/usr/bin/env python3
"""
XLIFF 1.2 document model.

Legacy, flat schema: a file body holds ``trans-unit`` elements and
(recursively nested) groups. Each unit carries exactly one source/target
pair.

```xml
<xliff version="1.2" xmlns="urn:oasis:names:tc:xliff:document:1.2">
  <file original="Strings.resx" source-language="en-US" datatype="resx">
    <body>
      <trans-unit id="Greeting" resname="Greeting">
        <source>Hello</source>
      </trans-unit>
    </body>
  </file>
</xliff>
```
"""

from dataclasses import dataclass, field
from typing import Optional

from .. import __version__
from ..enums import TranslationState

VERSION = "1.2"
NAMESPACE = "urn:oasis:names:tc:xliff:document:1.2"


@dataclass
class Note:
    """Free-text note attached to a header or a translation unit."""
    content: str = ""
    priority: Optional[str] = None
    from_: Optional[str] = None  # serialized as the `from` attribute


@dataclass
class Tool:
    """Tool that produced the file."""
    tool_id: str = "xliffkit"
    tool_name: str = "xliffkit"
    tool_version: str = __version__


@dataclass
class Header:
    tool: Optional[Tool] = None
    notes: list[Note] = field(default_factory=list)


@dataclass
class TransUnit:
    """
    A single translatable entry.

    Attributes:
        id: Unit identifier (uniqueness is up to the caller)
        source: Source text, always present (may be empty)
        target: Translated text, None when no <target> element exists
        resource_name: Optional `resname`, used as resource key on export
        approved: Raw `approved` attribute ("yes"/"no") if present
        state: Translation workflow state, NEW when the attribute is absent
        notes: Unit notes
    """
    id: str
    source: str = ""
    target: Optional[str] = None
    resource_name: Optional[str] = None
    approved: Optional[str] = None
    state: TranslationState = TranslationState.NEW
    notes: list[Note] = field(default_factory=list)


@dataclass
class Group:
    """Group of units; groups nest recursively."""
    id: str = ""
    resource_name: Optional[str] = None
    units: list[TransUnit] = field(default_factory=list)
    groups: list["Group"] = field(default_factory=list)


@dataclass
class Body:
    units: list[TransUnit] = field(default_factory=list)
    groups: list[Group] = field(default_factory=list)


@dataclass
class File:
    original: str = ""
    source_language: str = ""
    target_language: Optional[str] = None
    datatype: str = "xml"
    header: Optional[Header] = None
    body: Body = field(default_factory=Body)


@dataclass
class Document:
    """Root of an XLIFF 1.2 tree. The version tag is fixed."""
    files: list[File] = field(default_factory=list)
    version: str = field(default=VERSION, init=False)

    def iter_units(self):
        """Yield every TransUnit depth-first in document order."""
        for xliff_file in self.files:
            yield from xliff_file.body.units
            for group in xliff_file.body.groups:
                yield from _iter_group_units(group)


def _iter_group_units(group: Group):
    yield from group.units
    for nested in group.groups:
        yield from _iter_group_units(nested)
