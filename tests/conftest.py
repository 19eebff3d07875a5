import pytest


def wrap_xmp(body: str, prefix: bytes = b"junk bytes \xff\xd8 ", suffix: bytes = b" trailing junk") -> bytes:
    """Embed an rdf:Description body in an XMP envelope surrounded by binary noise."""
    xmp = (
        '<x:xmpmeta xmlns:x="adobe:ns:meta/">'
        '<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#">'
        '<rdf:Description>'
        f'{body}'
        '</rdf:Description>'
        '</rdf:RDF>'
        '</x:xmpmeta>'
    )
    return prefix + xmp.encode('utf-8') + suffix


@pytest.fixture
def subject_buffer():
    return wrap_xmp('<dc:subject>cat</dc:subject><dc:subject>dog</dc:subject>')


@pytest.fixture
def photo_buffer():
    """A Windows Photo Gallery style packet with keywords, ratings and face regions."""
    body = """
        <xmp:Rating>5</xmp:Rating>
        <MicrosoftPhoto:Rating>88</MicrosoftPhoto:Rating>
        <dc:rights>
          <rdf:Alt><rdf:li xml:lang="x-default">All rights reserved</rdf:li></rdf:Alt>
        </dc:rights>
        <dc:subject>
          <rdf:Bag>
            <rdf:li>beach</rdf:li>
            <rdf:li>sunset</rdf:li>
            <rdf:li>family</rdf:li>
          </rdf:Bag>
        </dc:subject>
        <mwg-rs:Regions>
          <mwg-rs:RegionList>
            <rdf:Bag>
              <rdf:li>
                <mwg-rs:Name>Alice</mwg-rs:Name>
                <mwg-rs:Area>
                  <stArea:x>0.25</stArea:x>
                  <stArea:y>0.5</stArea:y>
                  <stArea:w>0.1</stArea:w>
                  <stArea:h>0.2</stArea:h>
                </mwg-rs:Area>
              </rdf:li>
              <rdf:li>
                <mwg-rs:Name>Bob</mwg-rs:Name>
              </rdf:li>
            </rdf:Bag>
          </mwg-rs:RegionList>
        </mwg-rs:Regions>
    """
    return wrap_xmp(body)


@pytest.fixture
def wrap():
    return wrap_xmp
