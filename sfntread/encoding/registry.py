"""
sfntread.encoding.registry - character set registry

(c) 2024 sfntread contributors
licence: https://opensource.org/licenses/MIT
"""

import logging

from .base import EncodingName, NotFoundError


class EncodingRegistry:
    """Register and retrieve character sets by name."""

    def __init__(self):
        self._index = {}
        self._charsets = []

    def __setitem__(self, names, charset):
        """Register a character set to one or more aliases."""
        if isinstance(names, str):
            aliases = (names,)
        else:
            aliases = names
        for name in aliases:
            normname = EncodingName(name)
            if normname in self._index:
                logging.warning(f"Redefining character set '{name}'~'{normname}'")
            self._index[normname] = len(self._charsets)
        self._charsets.append(charset)

    def __getitem__(self, name):
        """Get character set from registry by name; raise NotFoundError if not found."""
        try:
            index = self._index[EncodingName(name)]
        except KeyError as exc:
            raise NotFoundError(
                f"No registered character set matches '{name}'."
            ) from exc
        return self._charsets[index]

    def __contains__(self, name):
        return EncodingName(name) in self._index

    def __iter__(self):
        """Iterate over names of registered character sets."""
        return iter(self._index.keys())
