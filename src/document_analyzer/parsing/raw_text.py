"""Raw text reconstruction from LINE blocks."""

from typing import Iterable

from document_analyzer.parsing.schemas import LINE, Block


def parse_raw_text(blocks: Iterable[Block]) -> str:
    """Joins the text of every LINE block with newlines, in input order.

    A LINE block without text contributes an empty line, so the result always has one line per
    LINE block.
    """
    return "\n".join(block.text or "" for block in blocks if block.block_type == LINE)
