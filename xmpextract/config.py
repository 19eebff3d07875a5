# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Extraction settings.

Copyright 2025 DNAi inc.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ExtractionConfig:
    """
    Configuration for a single extraction call.
    
    Attributes:
        legacy_start_offset: Treat an opening marker at offset 0 as absent.
            Older releases skipped buffers that start directly with
            '<x:xmpmeta' (e.g. bare .xmp sidecars); set this to keep that.
        end_marker_after_start: Look for the closing marker only after the
            opening one. By default the first closing marker in the buffer
            is used, and one that precedes the opening marker yields an
            empty record.
        decode_errors: Codec error handler used when decoding the XMP
            slice as UTF-8 ('replace', 'strict', 'ignore', ...)
        timeout: Seconds to wait for the parse before giving up, or None
            to wait indefinitely. Only used by extract_xmp().
    """
    legacy_start_offset: bool = False
    end_marker_after_start: bool = False
    decode_errors: str = 'replace'
    timeout: Optional[float] = None

    def __post_init__(self):
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout!r}")


DEFAULT_CONFIG = ExtractionConfig()
