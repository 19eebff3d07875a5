# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
xmpextract - flattened XMP metadata from raw file bytes

Locates the XMP block embedded in any file buffer (JPEG, TIFF, PNG,
PDF, video containers, .xmp sidecars) and returns it as a flat record
with both raw tag names and camelCase friendly keys.

    record = await extract_xmp(data)
    record['keywords'], record['raw']['dc:subject']

Copyright 2025 DNAi inc.
"""

__version__ = "0.1.0"
__author__ = "DNAi inc."

from loguru import logger

from xmpextract.config import DEFAULT_CONFIG, ExtractionConfig
from xmpextract.exceptions import (
    ExtractionTimeoutError,
    InvalidInputKindError,
    MalformedMarkupError,
    XMPExtractError,
)
from xmpextract.xmp_handler import empty_record
from xmpextract.xmp_parser import XMPParser, extract_xmp, parse_xmp
from xmpextract.xmp_values import XMPEntry, XMPValue

logger.disable("xmpextract")

__all__ = [
    "XMPParser",
    "extract_xmp",
    "parse_xmp",
    "empty_record",
    "ExtractionConfig",
    "DEFAULT_CONFIG",
    "XMPExtractError",
    "InvalidInputKindError",
    "MalformedMarkupError",
    "ExtractionTimeoutError",
    "XMPValue",
    "XMPEntry",
]
