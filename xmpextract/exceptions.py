# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Exception classes for xmpextract

A missing XMP block is not an error: extraction returns an empty
record in that case. Exceptions are reserved for bad input and
unparseable markup.

Copyright 2025 DNAi inc.
"""

from typing import Optional


class XMPExtractError(Exception):
    """
    Root of the xmpextract exception tree.
    
    Catch this to handle bad input, bad markup and timeouts alike. The
    text passed in is kept on .message.
    """
    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class InvalidInputKindError(XMPExtractError, TypeError):
    """
    Raised when the input is not a bytes-like buffer.
    
    Accepted inputs are bytes, bytearray and memoryview. Text strings,
    file objects and None are rejected.
    """
    pass


class MalformedMarkupError(XMPExtractError):
    """
    Raised when the extracted XMP slice cannot be tokenized.
    
    This exception is raised when:
    - Tags are unbalanced or mismatched
    - Markup is not well-formed XML
    - The slice declares entities or external references
    
    The tokenizer exception is chained as __cause__.
    """
    def __init__(self, message: str = "", line: Optional[int] = None, column: Optional[int] = None):
        self.line = line
        self.column = column
        super().__init__(message)


class ExtractionTimeoutError(XMPExtractError):
    """Raised when extraction exceeds the configured timeout."""
    pass
