#!/usr/bin/env python3
"""
Document models for both XLIFF generations.

The two trees share no base class. Code that accepts either one takes an
XliffDocument and branches with isinstance().
"""

from typing import Union

from . import xliff12, xliff20

XliffDocument = Union[xliff12.Document, xliff20.Document]

__all__ = [
    'xliff12',
    'xliff20',
    'XliffDocument',
]
