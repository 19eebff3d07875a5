# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
XMP (Extensible Metadata Platform) extractor

This module locates the <x:xmpmeta> block inside an arbitrary byte
buffer (JPEG, TIFF, PNG, PDF, sidecar files, ...), streams it through a
SAX tokenizer and returns a flattened record:

    {
        'raw': {'dc:subject': ['cat', 'dog'], 'xmp:Rating': 5},
        'keywords': ['cat', 'dog'],
        'rating': 5,
    }

Copyright 2025 DNAi inc.
"""

import asyncio
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union
from xml.sax import SAXParseException
from xml.sax.handler import property_lexical_handler

from defusedxml import sax as defused_sax
from defusedxml.common import DefusedXmlException
from loguru import logger

from xmpextract.config import DEFAULT_CONFIG, ExtractionConfig
from xmpextract.exceptions import (
    ExtractionTimeoutError,
    InvalidInputKindError,
    MalformedMarkupError,
    XMPExtractError,
)
from xmpextract.xmp_handler import XMPContentHandler, empty_record


BytesLike = Union[bytes, bytearray, memoryview]


class XMPParser:
    """
    Extractor for the XMP block embedded in a file.
    
    Only the first <x:xmpmeta> ... </x:xmpmeta> block is read. Namespace
    prefixes are kept as written; namespace URIs are not resolved.
    """
    
    XMP_META_START = b'<x:xmpmeta'
    XMP_META_END = b'</x:xmpmeta>'
    
    def __init__(self, file_path: Optional[str] = None, file_data: Optional[BytesLike] = None,
                 config: Optional[ExtractionConfig] = None):
        """
        Initialize XMP parser.
        
        Args:
            file_path: Path to file (if reading from file)
            file_data: File data bytes (if reading from memory)
            config: Extraction settings, DEFAULT_CONFIG when omitted
            
        Raises:
            InvalidInputKindError: If file_data is not bytes-like
        """
        self.config = config or DEFAULT_CONFIG
        if file_path:
            self.file_path = Path(file_path)
            self.file_data = None
        else:
            if not isinstance(file_data, (bytes, bytearray, memoryview)):
                raise InvalidInputKindError(
                    f"Expected a bytes-like buffer, got {type(file_data).__name__}"
                )
            self.file_path = None
            self.file_data = bytes(file_data) if isinstance(file_data, memoryview) else file_data
    
    def _load(self) -> Union[bytes, bytearray]:
        if self.file_data is None:
            try:
                with open(self.file_path, 'rb') as f:
                    self.file_data = f.read()
            except OSError as e:
                raise XMPExtractError(f"Failed to read {self.file_path}: {e}") from e
        return self.file_data
    
    def locate(self) -> Optional[Tuple[int, int]]:
        """
        Find the XMP block.
        
        Returns:
            (start, end) offsets of the block, end exclusive and including
            the closing marker, or None when either marker is missing
        """
        data = self._load()
        start = data.find(self.XMP_META_START)
        if start < 0 or (start == 0 and self.config.legacy_start_offset):
            logger.debug("No XMP opening marker found (offset {})", start)
            return None
        
        search_from = start if self.config.end_marker_after_start else 0
        end = data.find(self.XMP_META_END, search_from)
        if end < 0:
            logger.debug("XMP opening marker at {} has no closing marker", start)
            return None
        if end < start:
            logger.debug("XMP closing marker at {} precedes opening marker at {}", end, start)
            return None
        
        end += len(self.XMP_META_END)
        logger.debug("XMP block found at {}..{}", start, end)
        return start, end
    
    def read(self) -> Dict[str, Any]:
        """
        Read XMP metadata.
        
        Returns:
            Flattened record; {'raw': {}} when the buffer carries no XMP
            
        Raises:
            MalformedMarkupError: If the XMP block is not well-formed
        """
        span = self.locate()
        if span is None:
            return empty_record()
        
        start, end = span
        xmp_str = self.file_data[start:end].decode('utf-8', errors=self.config.decode_errors)
        return self._parse_xmp_packet(xmp_str)
    
    def _parse_xmp_packet(self, xmp_str: str) -> Dict[str, Any]:
        """
        Tokenize an XMP packet and collect its text nodes.
        
        Args:
            xmp_str: XMP block from <x:xmpmeta through </x:xmpmeta>
            
        Returns:
            Flattened record
        """
        handler = XMPContentHandler()
        parser = defused_sax.make_parser()
        parser.setContentHandler(handler)
        parser.setProperty(property_lexical_handler, handler)
        
        try:
            parser.feed(xmp_str)
            parser.close()
        except SAXParseException as e:
            logger.debug("XMP tokenizer error: {}", e)
            raise MalformedMarkupError(
                f"Malformed XMP markup: {e.getMessage()} "
                f"(line {e.getLineNumber()}, column {e.getColumnNumber()})",
                line=e.getLineNumber(),
                column=e.getColumnNumber(),
            ) from e
        except DefusedXmlException as e:
            logger.debug("XMP rejected by hardened parser: {}", e)
            raise MalformedMarkupError(f"Malformed XMP markup: {e}") from e
        
        logger.debug("Parsed XMP block with {} raw entries", len(handler.record['raw']))
        return handler.record


def parse_xmp(buffer: BytesLike, config: Optional[ExtractionConfig] = None) -> Dict[str, Any]:
    """
    Extract and flatten the XMP block of a buffer.
    
    Args:
        buffer: File content
        config: Extraction settings
        
    Returns:
        Flattened record; {'raw': {}} when the buffer carries no XMP
        
    Raises:
        InvalidInputKindError: If buffer is not bytes-like
        MalformedMarkupError: If the XMP block is not well-formed
    """
    return XMPParser(file_data=buffer, config=config).read()


async def extract_xmp(buffer: BytesLike, config: Optional[ExtractionConfig] = None) -> Dict[str, Any]:
    """
    Asynchronously extract and flatten the XMP block of a buffer.
    
    Nothing is raised when the coroutine is created; every failure,
    including a wrong input type, is raised when it is awaited.
    
    With config.timeout set, parsing runs in the default executor and
    ExtractionTimeoutError is raised if it does not finish in time.
    
    Args:
        buffer: File content
        config: Extraction settings
        
    Returns:
        Flattened record; {'raw': {}} when the buffer carries no XMP
    """
    config = config or DEFAULT_CONFIG
    if config.timeout is None:
        return parse_xmp(buffer, config)
    
    loop = asyncio.get_running_loop()
    try:
        return await asyncio.wait_for(
            loop.run_in_executor(None, parse_xmp, buffer, config),
            timeout=config.timeout,
        )
    except asyncio.TimeoutError as e:
        raise ExtractionTimeoutError(
            f"XMP extraction did not finish within {config.timeout}s"
        ) from e
