# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Key derivation for flattened XMP records.

Every text value is stored twice: under a raw key (the innermost
meaningful tag, e.g. "dc:subject") and under a friendly key built from
the whole tag path (e.g. "keywords", "regionName").

Copyright 2025 DNAi inc.
"""

from typing import Iterable, List, Optional


# Structural RDF/XMP containers; they never contribute to a key
ENVELOPE_TAGS = frozenset({
    'x:xmpmeta',
    'rdf:RDF',
    'rdf:Description',
    'rdf:Bag',
    'rdf:Alt',
    'rdf:Seq',
    'rdf:li',
    'mwg-rs:RegionList',
})

# Qualified tag name -> friendly key segment
XMP_ALIAS_MAP = {
    'mwg-rs:Regions': 'region',
    'MicrosoftPhoto:LastKeywordXMP': 'keywords',
    'MicrosoftPhoto:LastKeywordIPTC': 'keywords',
    'dc:subject': 'keywords',
    'MicrosoftPhoto:Rating': 'mRating',
    'cc:attributionName': 'attribution',
    'xmpRights:UsageTerms': 'terms',
    'dc:rights': 'terms',
}

NAMESPACE_SEPARATOR = ':'


def semantic_path(path: Iterable[str]) -> List[str]:
    """Return the tag path with envelope tags removed."""
    return [tag for tag in path if tag not in ENVELOPE_TAGS]


def raw_key(path: Iterable[str]) -> Optional[str]:
    """
    Derive the raw key for a tag path.
    
    Args:
        path: Qualified tag names from the document root inwards
        
    Returns:
        Innermost non-envelope tag name with its prefix, or None when
        the path holds only envelope tags
    """
    tags = semantic_path(path)
    return tags[-1] if tags else None


def _strip_prefix(tag: str) -> str:
    if NAMESPACE_SEPARATOR in tag:
        return tag.split(NAMESPACE_SEPARATOR, 1)[1]
    return tag


def friendly_key(path: Iterable[str]) -> Optional[str]:
    """
    Derive the camelCase friendly key for a tag path.
    
    Each non-envelope segment is aliased, stripped of its namespace
    prefix, and joined in camelCase:
    
        x:xmpmeta > rdf:RDF > rdf:Description > dc:rights       -> "terms"
        ... > mwg-rs:Regions > rdf:Bag > rdf:li > mwg-rs:Name   -> "regionName"
    
    Args:
        path: Qualified tag names from the document root inwards
        
    Returns:
        Friendly key, or None when the path holds only envelope tags
    """
    tags = semantic_path(path)
    if not tags:
        return None

    parts = []
    for index, tag in enumerate(tags):
        segment = _strip_prefix(XMP_ALIAS_MAP.get(tag, tag))
        if index == 0:
            segment = segment[:1].lower() + segment[1:]
        else:
            segment = segment[:1].upper() + segment[1:]
        parts.append(segment)
    return ''.join(parts)
