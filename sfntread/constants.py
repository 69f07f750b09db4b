"""
sfntread.constants - package-wide constants

(c) 2024 sfntread contributors
licence: https://opensource.org/licenses/MIT
"""

VERSION = '0.3'
