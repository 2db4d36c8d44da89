"""Core data models for Structify"""

from pydantic import BaseModel, Field
from typing import Optional, Any
from .enums import FieldType


# Two-dimensional range as handed over by the host: rows of cells
Table = list[list[Any]]

# [identifier, value_1, ..., value_n] in schema order
OutputRow = list[Any]


class InputRow(BaseModel):
    """One (identifier, free text) pair from the input table"""
    identifier: Any
    text: str

    @classmethod
    def from_cells(cls, cells: list[Any]) -> "InputRow":
        identifier, text = cells
        return cls(identifier=identifier, text="" if text is None else str(text))


class FieldDescriptor(BaseModel):
    """A single schema field; schema order is output column order"""
    key: str
    description: str = ""
    type: Optional[FieldType] = None


class SchemaItem(BaseModel):
    """A field as returned by the schema generation call"""
    key: str = Field(min_length=1)
    description: str = Field(min_length=1)
    type: FieldType

    def to_descriptor(self) -> FieldDescriptor:
        return FieldDescriptor(key=self.key, description=self.description, type=self.type)
