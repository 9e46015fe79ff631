"""Pure functions that interpret the Textract block graph."""

from document_analyzer.parsing.block_index import build_block_index
from document_analyzer.parsing.key_value import parse_form_key_values
from document_analyzer.parsing.raw_text import parse_raw_text
from document_analyzer.parsing.schemas import Block, Relationship

__all__ = ["Block", "Relationship", "build_block_index", "parse_form_key_values", "parse_raw_text"]
