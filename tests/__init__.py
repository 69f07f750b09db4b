"""
sfntread test suite
"""
