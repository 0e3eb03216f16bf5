"""
doctext - plain text extraction from uploaded documents.

This package turns PDF, Word, Excel, PowerPoint and plain text uploads
into normalized text with an approximate page count, ready for
indexing or embedding.
"""

__version__ = "1.0.0"
__author__ = "doctext Team"
