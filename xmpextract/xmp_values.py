# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Value coercion and accumulation for XMP text nodes.

Numeric tags are parsed leniently: the longest numeric prefix of the
text is used and text with no numeric prefix becomes NaN instead of
failing the whole extraction.

Copyright 2025 DNAi inc.
"""

import math
import re
from typing import Any, Dict, List, Union


XMPValue = Union[str, int, float]
XMPEntry = Union[XMPValue, List[XMPValue]]

NAN = float('nan')

_INT_PREFIX = re.compile(r'\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|(\d+))')
_FLOAT_PREFIX = re.compile(r'\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))')

AREA_TAGS = frozenset({'stArea:x', 'stArea:y', 'stArea:w', 'stArea:h'})


def parse_int(text: str) -> Union[int, float]:
    """
    Parse the leading integer of a string.
    
    "5" -> 5, "4.7" -> 4, "12px" -> 12, "0x1F" -> 31, "0xg" -> NaN, "n/a" -> NaN
    """
    match = _INT_PREFIX.match(text)
    if not match:
        return NAN
    sign, hex_digits, digits = match.groups()
    if hex_digits == '':
        # "0x" with no hex digits after it
        return NAN
    value = int(hex_digits, 16) if hex_digits is not None else int(digits)
    return -value if sign == '-' else value


def parse_float(text: str) -> float:
    """
    Parse the leading floating point number of a string.
    
    "0.25" -> 0.25, "1e3x" -> 1000.0, "-.5" -> -0.5, "abc" -> NaN
    """
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return NAN
    return float(match.group(1))


def microsoft_rating(text: str) -> Union[int, float]:
    """Map a MicrosoftPhoto:Rating percentage (0-100) onto 1-5 stars."""
    percent = parse_int(text)
    if isinstance(percent, float) and math.isnan(percent):
        return NAN
    return (percent + 12) // 25 + 1


def coerce_value(tag_name: str, text: str) -> XMPValue:
    """
    Convert trimmed text according to the tag it was found in.
    
    Args:
        tag_name: Qualified name of the most recently opened tag
        text: Trimmed text content
        
    Returns:
        int/float for the rating and region-area tags, the text otherwise
    """
    if tag_name in AREA_TAGS:
        return parse_float(text)
    if tag_name == 'xmp:Rating':
        return parse_int(text)
    if tag_name == 'MicrosoftPhoto:Rating':
        return microsoft_rating(text)
    return text


def accumulate(mapping: Dict[str, Any], key: str, value: XMPValue) -> None:
    """
    Fold a value into mapping[key].
    
    The first value is stored as a scalar, the second turns the slot
    into [first, second], later values are appended.
    """
    if key not in mapping:
        mapping[key] = value
    elif isinstance(mapping[key], list):
        mapping[key].append(value)
    else:
        mapping[key] = [mapping[key], value]
