"""
sfntread.sfnt.dsig - digital signature table

(c) 2024 sfntread contributors
licence: https://opensource.org/licenses/MIT
"""

import logging

from ..struct import big_endian as be, counted, Structure
from .tables import register_table


DSIG_VERSION = 0x00000001

# permission flags
# bit 0: cannot be resigned; other bits reserved
FLAG_CANNOT_RESIGN = 0x0001


class SignatureRecord(Structure):
    """Location of a signature block."""

    _struct = be.Struct(
        format='uint32',
        # in bytes
        length='uint32',
        # from start of DSIG table
        signature_block_offset='uint32',
    )


@register_table('DSIG')
class DSIGTable(Structure):
    """Digital signature table."""

    _struct = be.Struct(
        version='uint32',
        num_signatures='uint16',
        flags='uint16',
        signature_records=counted(SignatureRecord, 'num_signatures'),
    )

    @classmethod
    def read_from(cls, stream, offset=None):
        """Read DSIG table from stream."""
        table = super().read_from(stream, offset)
        if table.version != DSIG_VERSION:
            logging.warning('Unexpected DSIG table version 0x%08x', table.version)
        if table.flags & ~FLAG_CANNOT_RESIGN:
            logging.debug('Reserved DSIG flags set: 0x%04x', table.flags)
        return table

    @property
    def cannot_resign(self):
        """Signature may not be replaced."""
        return bool(self.flags & FLAG_CANNOT_RESIGN)
