"""Block index construction."""

from typing import Dict, Iterable

from document_analyzer.parsing.schemas import Block


def build_block_index(blocks: Iterable[Block]) -> Dict[str, Block]:
    """Maps every block id to its block. A repeated id keeps the later block."""
    return {block.id: block for block in blocks}
