"""
sfntread.encoding.tables - charmap files

(c) 2024 sfntread contributors
licence: https://opensource.org/licenses/MIT
"""
