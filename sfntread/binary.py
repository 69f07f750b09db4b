"""
sfntread.binary - binary utilities

(c) 2024 sfntread contributors
licence: https://opensource.org/licenses/MIT
"""


def ceildiv(num, den):
    """Integer division, rounding up."""
    return -(-num // den)


def bytes_to_int(in_bytes, byteorder='big'):
    """Convert bytes to unsigned integer."""
    return int.from_bytes(bytes(in_bytes), byteorder)


def int_to_bytes(in_int, length, byteorder='big'):
    """Convert unsigned integer to bytes of given length."""
    return in_int.to_bytes(length, byteorder)
