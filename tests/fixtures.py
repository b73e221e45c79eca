#!/usr/bin/env python3
"""Shared XML fixtures for the test suite."""

XLIFF12_CONTENT = """<?xml version="1.0" encoding="utf-8"?>
<xliff version="1.2" xmlns="urn:oasis:names:tc:xliff:document:1.2">
  <file original="Strings.resx" source-language="en-US" target-language="fr-FR" datatype="resx">
    <header>
      <tool tool-id="xliffkit" tool-name="xliffkit" tool-version="1.0.0"/>
      <note>Header note</note>
    </header>
    <body>
      <trans-unit id="Greeting" resname="Greeting" approved="yes" state="translated">
        <source>Hello</source>
        <target>Bonjour</target>
        <note from="dev" priority="1">Shown on start</note>
      </trans-unit>
      <trans-unit id="Farewell">
        <source>Goodbye</source>
      </trans-unit>
      <group id="menu" resname="Menu">
        <trans-unit id="Open" state="needs-review-l10n">
          <source>Open</source>
          <target></target>
        </trans-unit>
        <group id="sub">
          <trans-unit id="Close" state="signed-off">
            <source>Close</source>
            <target>Fermer</target>
          </trans-unit>
        </group>
      </group>
    </body>
  </file>
</xliff>
"""

XLIFF20_CONTENT = """<?xml version="1.0" encoding="utf-8"?>
<xliff version="2.0" xmlns="urn:oasis:names:tc:xliff:document:2.0" srcLang="en-US" trgLang="de-DE">
  <file id="f1" original="Strings.resx">
    <unit id="u1" name="Greeting" approved="approved">
      <notes>
        <note category="context">Greeting on start</note>
      </notes>
      <segment id="1" state="final">
        <source>Hello</source>
        <target>Hallo</target>
      </segment>
    </unit>
    <unit id="u2">
      <segment id="1" state="translated">
        <source>Sentence one.</source>
        <target>Satz eins.</target>
      </segment>
      <segment id="2">
        <source>Sentence two.</source>
      </segment>
    </unit>
    <group id="g1" name="Menu">
      <unit id="u3">
        <segment id="s" state="reviewed">
          <source>Open</source>
          <target>Öffnen</target>
        </segment>
      </unit>
    </group>
  </file>
</xliff>
"""

RESX_CONTENT = """<?xml version="1.0" encoding="utf-8"?>
<root>
  <resheader name="resmimetype">
    <value>text/microsoft-resx</value>
  </resheader>
  <data name="Greeting" xml:space="preserve">
    <value>Hello</value>
  </data>
  <data name="Typed" type="System.String, mscorlib">
    <value>Typed text</value>
  </data>
  <data name="Icon" type="System.Drawing.Bitmap, System.Drawing" mimetype="application/x-microsoft.net.object.bytearray.base64">
    <value>AAAA</value>
  </data>
  <data name="Size" type="System.Drawing.Size, System.Drawing">
    <value>10, 20</value>
  </data>
  <data name="Empty" xml:space="preserve">
    <value />
  </data>
  <data name="NoValue" />
</root>
"""
