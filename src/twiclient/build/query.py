"""
Query/body string encoding.
"""

from urllib.parse import quote_plus

from twiclient.descriptors import Descriptor


def encode_query(descriptor: Descriptor) -> str:
    """Encode the descriptor's query parameters as ``Name=value&...``.

    Parameters come out in field declaration order; repeated fields emit one
    pair per element; empty values are skipped. Names are written as
    declared (``DateSent<`` becomes ``DateSent<=...``), values are
    form-escaped.
    """
    pairs: list[str] = []
    for name, value in descriptor.query_fields():
        if isinstance(value, str):
            if value:
                pairs.append(f"{name}={quote_plus(value)}")
            continue
        for item in value:
            pairs.append(f"{name}={quote_plus(item)}")
    return "&".join(pairs)
