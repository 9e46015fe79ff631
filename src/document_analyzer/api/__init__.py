"""HTTP surface of the document analysis service."""
