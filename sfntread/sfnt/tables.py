"""
sfntread.sfnt.tables - table kinds and dispatch on tag

(c) 2024 sfntread contributors
licence: https://opensource.org/licenses/MIT
"""

import logging

from .tags import Tag


# tag -> table class
_TABLE_TYPES = {}


def register_table(tag):
    """Decorator to register a table class that decodes tables with the given tag."""
    tag = Tag(tag)

    def decorator(table_cls):
        if tag in _TABLE_TYPES:
            logging.warning("Redefining table decoder for '%s'", tag)
        _TABLE_TYPES[tag] = table_cls
        table_cls.tag = tag
        return table_cls

    return decorator


def is_supported(tag):
    """Check if a decoder is registered for the tag."""
    return tag in _TABLE_TYPES


def get_supported_tags():
    """Tags with a registered decoder."""
    return tuple(_TABLE_TYPES)


class UnsupportedTable:
    """Outcome for a table whose tag has no registered decoder."""

    def __init__(self, tag, payload=b''):
        self.tag = Tag(tag)
        self.payload = payload

    def __eq__(self, other):
        return (
            isinstance(other, UnsupportedTable)
            and (self.tag, self.payload) == (other.tag, other.payload)
        )

    def __repr__(self):
        return f'{type(self).__name__}(tag={self.tag!r}, payload={self.payload!r})'


def decode_table(tag, stream):
    """Decode the table body at the current position, dispatching on tag."""
    try:
        table_cls = _TABLE_TYPES[tag]
    except KeyError:
        logging.debug("No decoder for '%s' table.", tag)
        return UnsupportedTable(tag)
    return table_cls.read_from(stream)
