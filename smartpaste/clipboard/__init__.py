from smartpaste.clipboard.snapshot import (
    ClipboardSnapshot,
    ImageBundle,
    Representation,
    StaticSnapshot,
    load_image,
    parse_uri_list,
)
from smartpaste.clipboard.factory import get_snapshot

__all__ = [
    'ClipboardSnapshot',
    'ImageBundle',
    'Representation',
    'StaticSnapshot',
    'load_image',
    'parse_uri_list',
    'get_snapshot',
]
