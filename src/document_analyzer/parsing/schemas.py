"""Pydantic schemas for the Textract blocks consumed by the parsers."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

KEY_VALUE_SET = "KEY_VALUE_SET"
LINE = "LINE"

CHILD = "CHILD"
VALUE = "VALUE"

KEY_ENTITY = "KEY"


class Relationship(BaseModel):
    """A typed edge from a block to an ordered list of other block ids."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    type: str = Field(alias="Type")
    ids: List[str] = Field(default_factory=list, alias="Ids")


class Block(BaseModel):
    """Immutable view of a single Textract block.

    Blocks reference each other by id only; relationships are resolved through a block index
    rather than held as object references.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(alias="Id")
    block_type: str = Field(alias="BlockType")
    text: Optional[str] = Field(default=None, alias="Text")
    selection_status: Optional[str] = Field(default=None, alias="SelectionStatus")
    relationships: List[Relationship] = Field(default_factory=list, alias="Relationships")
    entity_types: List[str] = Field(default_factory=list, alias="EntityTypes")
    confidence: Optional[float] = Field(default=None, alias="Confidence")
    page: Optional[int] = Field(default=None, alias="Page")

    def get_relationship_ids(self, relationship_type: str) -> List[str]:
        """Returns the ids of the first relationship of the given type.

        Args:
            relationship_type (str): Relationship type, e.g. "CHILD" or "VALUE".

        Returns:
            List[str]: The referenced block ids, or an empty list if there is no such relationship.
        """
        for relationship in self.relationships:
            if relationship.type == relationship_type:
                return relationship.ids
        return []

    @property
    def is_key(self) -> bool:
        """True for KEY_VALUE_SET blocks tagged as a form key."""
        return self.block_type == KEY_VALUE_SET and KEY_ENTITY in self.entity_types
