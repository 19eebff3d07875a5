# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
SAX content handler that flattens an XMP document into a record.

Copyright 2025 DNAi inc.
"""

from typing import Any, Dict, List, Optional
from xml.sax.handler import ContentHandler

from loguru import logger

from xmpextract.xmp_keys import friendly_key, raw_key
from xmpextract.xmp_values import accumulate, coerce_value


RAW_KEY = 'raw'


def empty_record() -> Dict[str, Any]:
    """Return the record produced when a buffer carries no XMP."""
    return {RAW_KEY: {}}


class XMPContentHandler(ContentHandler):
    """
    Accumulates text nodes of an XMP document into a flat record.
    
    One handler is created per extraction. It keeps the stack of open
    tag names and the name of the most recently opened tag, which
    selects the value coercion (it is not reset when a tag closes).
    
    Expat reports character data in pieces (around entity references
    and line breaks), so characters are buffered and handled as a single
    text node when the next tag opens or closes. Comments, processing
    instructions and CDATA section boundaries also end a text node; the
    handler is registered as the lexical handler to see them.
    """
    
    def __init__(self):
        super().__init__()
        self.record: Dict[str, Any] = empty_record()
        self.path: List[str] = []
        self.current_tag: Optional[str] = None
        self._text: List[str] = []
    
    def startElement(self, name, attrs):
        self._flush_text()
        self.current_tag = name
        self.path.append(name)
    
    def endElement(self, name):
        self._flush_text()
        self.path.pop()
    
    def characters(self, content):
        self._text.append(content)
    
    def endDocument(self):
        self._flush_text()
    
    def processingInstruction(self, target, data):
        self._flush_text()
    
    # LexicalHandler
    
    def comment(self, content):
        self._flush_text()
    
    def startCDATA(self):
        self._flush_text()
    
    def endCDATA(self):
        self._flush_text()
    
    def startDTD(self, name, public_id, system_id):
        pass
    
    def endDTD(self):
        pass
    
    def _flush_text(self) -> None:
        if not self._text:
            return
        text = ''.join(self._text).strip()
        self._text = []
        if text:
            self.handle_text(text)
    
    def handle_text(self, text: str) -> None:
        """
        Record one non-blank text node under its raw and friendly keys.
        
        Args:
            text: Trimmed text content
        """
        rkey = raw_key(self.path)
        if rkey is None:
            # Text directly inside envelope tags has no key
            return
        
        value = coerce_value(self.current_tag, text)
        accumulate(self.record[RAW_KEY], rkey, value)
        
        fkey = friendly_key(self.path)
        if fkey == RAW_KEY:
            logger.debug("Skipping friendly key that collides with 'raw' for {}", rkey)
            return
        accumulate(self.record, fkey, value)
