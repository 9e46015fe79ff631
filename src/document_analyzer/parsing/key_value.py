"""Form key/value reconstruction from KEY_VALUE_SET blocks."""

import logging
from typing import Dict, Mapping, Optional, Sequence

from document_analyzer.parsing.block_index import build_block_index
from document_analyzer.parsing.schemas import CHILD, VALUE, Block

logger = logging.getLogger(__name__)


def _segment_text(block: Optional[Block]) -> str:
    """Renders one child block as text, or as its bracketed selection state."""
    if block is None:
        return ""
    if block.text:
        return block.text
    if block.selection_status:
        return f"[{block.selection_status}]"
    return ""


def get_child_text(block: Optional[Block], block_index: Mapping[str, Block]) -> str:
    """Reconstructs a block's text from its CHILD relationship.

    Args:
        block (Optional[Block]): The KEY or VALUE block. None renders as an empty string.
        block_index (Mapping[str, Block]): Lookup of block id to block.

    Returns:
        str: The child segments joined by single spaces and stripped. Children missing from the
            index contribute an empty segment.
    """
    if block is None:
        return ""
    child_ids = block.get_relationship_ids(CHILD)
    return " ".join(_segment_text(block_index.get(child_id)) for child_id in child_ids).strip()


def find_value_block(key_block: Block, block_index: Mapping[str, Block]) -> Optional[Block]:
    """Resolves the VALUE block paired with a KEY block, or None if it cannot be found."""
    value_ids = key_block.get_relationship_ids(VALUE)
    if not value_ids:
        return None
    return block_index.get(value_ids[0])


def clean_key(key_text: str) -> str:
    """Removes every colon from a key label and strips surrounding whitespace."""
    return key_text.replace(":", "").strip()


def parse_form_key_values(
    blocks: Sequence[Block], block_index: Optional[Mapping[str, Block]] = None
) -> Dict[str, str]:
    """Extracts form fields as a mapping of cleaned key to value text.

    Keys are visited in input order. Keys that clean to an empty string are dropped, and a later
    key with the same cleaned text overwrites an earlier one.

    Args:
        blocks (Sequence[Block]): All blocks of the analyzed document.
        block_index (Optional[Mapping[str, Block]]): Prebuilt index over ``blocks``. Built here
            when not supplied.

    Returns:
        Dict[str, str]: The extracted key/value pairs.
    """
    if block_index is None:
        block_index = build_block_index(blocks)

    extracted: Dict[str, str] = {}
    for key_block in (block for block in blocks if block.is_key):
        key = clean_key(get_child_text(key_block, block_index))
        if not key:
            logger.debug(f"Skipping key block {key_block.id} with empty label")
            continue
        if key in extracted:
            logger.debug(f"Key '{key}' from block {key_block.id} overwrites an earlier value")
        extracted[key] = get_child_text(find_value_block(key_block, block_index), block_index)
    return extracted
