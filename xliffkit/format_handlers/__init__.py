#!/usr/bin/env python3
"""
Format handlers for the XLIFF schema generations.

Supported versions:
- 1.2: flat trans-unit documents
- 2.0: unit/segment documents
"""

from .base import (
    HandlerRegistry,
    XliffHandler,
    local_name,
    to_xml_string,
)
from .xliff12 import Xliff12Handler
from .xliff20 import Xliff20Handler

# Register handlers
HandlerRegistry.register(Xliff12Handler)
HandlerRegistry.register(Xliff20Handler)

__all__ = [
    'HandlerRegistry',
    'XliffHandler',
    'Xliff12Handler',
    'Xliff20Handler',
    'local_name',
    'to_xml_string',
]
