import asyncio
import time

import pytest

import xmpextract.xmp_parser as xmp_parser
from xmpextract import (
    ExtractionConfig,
    ExtractionTimeoutError,
    InvalidInputKindError,
    MalformedMarkupError,
    extract_xmp,
)


@pytest.mark.asyncio
async def test_extract_subjects(subject_buffer):
    record = await extract_xmp(subject_buffer)
    assert record['raw']['dc:subject'] == ['cat', 'dog']
    assert record['keywords'] == ['cat', 'dog']


@pytest.mark.asyncio
async def test_absent_xmp_resolves_to_empty_record():
    assert await extract_xmp(b'GIF89a no xmp') == {'raw': {}}


@pytest.mark.asyncio
@pytest.mark.parametrize("bad_input", ["text", None, 3.5])
async def test_invalid_input_is_raised_on_await(bad_input):
    pending = extract_xmp(bad_input)
    with pytest.raises(InvalidInputKindError):
        await pending


@pytest.mark.asyncio
async def test_malformed_markup_is_raised_on_await():
    with pytest.raises(MalformedMarkupError):
        await extract_xmp(b'.. <x:xmpmeta><a:b></x:xmpmeta>')


@pytest.mark.asyncio
async def test_concurrent_calls_are_independent(wrap):
    buffers = [wrap(f'<dc:title>{i}</dc:title>') for i in range(5)]
    records = await asyncio.gather(*(extract_xmp(b) for b in buffers))
    assert [r['title'] for r in records] == ['0', '1', '2', '3', '4']


@pytest.mark.asyncio
async def test_with_timeout_returns_same_record(photo_buffer):
    expected = await extract_xmp(photo_buffer)
    assert await extract_xmp(photo_buffer, ExtractionConfig(timeout=5)) == expected


@pytest.mark.asyncio
async def test_timeout_expiry(monkeypatch, subject_buffer):
    def slow_parse(buffer, config=None):
        time.sleep(0.5)
        return {'raw': {}}

    monkeypatch.setattr(xmp_parser, 'parse_xmp', slow_parse)
    with pytest.raises(ExtractionTimeoutError):
        await extract_xmp(subject_buffer, ExtractionConfig(timeout=0.05))


@pytest.mark.asyncio
async def test_errors_propagate_through_executor():
    with pytest.raises(InvalidInputKindError):
        await extract_xmp('text', ExtractionConfig(timeout=5))


def test_timeout_must_be_positive():
    with pytest.raises(ValueError):
        ExtractionConfig(timeout=0)
