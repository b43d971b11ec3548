"""Typed input records and the parsers that build them."""
