"""
Objects that populate themselves from a tokenizer.

A CSVParsable reads exactly one record by calling the tokenizer's typed
accessors in the column order of its schema. No schema validation is done;
the implementation is trusted to request the right fields in the right
order. Tokenizer errors propagate to the caller unchanged.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, Field

from .models import FieldType

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence

    from .cursor import Tokenizer

P = TypeVar("P", bound="CSVParsable")


class CSVParsable(ABC):
    """Base class for types that can be parsed from a tokenizer."""

    @abstractmethod
    def parse(self, tokenizer: Tokenizer) -> None:
        """
        Populate this object from the next record.

        Raises:
            TokenizerError: If a field is missing or malformed
        """
        pass


class TypedRecord(CSVParsable):
    """A record whose fields are read according to a list of field types."""

    def __init__(self, types: Sequence[FieldType]) -> None:
        self.types = list(types)
        self.values: list[Any] = []
        self.row: int | None = None

    def parse(self, tokenizer: Tokenizer) -> None:
        self.values = []
        self.row = None
        for field_type in self.types:
            self.values.append(tokenizer.get(field_type))
        self.row = tokenizer.row

    def to_model(self) -> RecordValues:
        """
        Snapshot the parsed values.

        Raises:
            ValueError: If parse() has not completed
        """
        if self.row is None:
            raise ValueError("Record has not been parsed")

        return RecordValues(
            row=self.row,
            types=[t.value for t in self.types],
            values=list(self.values),
        )


class RecordValues(BaseModel, frozen=True):
    """Serializable view of a parsed TypedRecord."""

    row: int = Field(ge=1)
    types: list[str]
    values: list[Any]


def parse_all(tokenizer: Tokenizer, factory: Callable[[], P]) -> Iterator[P]:
    """
    Parse records until only whitespace is left.

    Args:
        tokenizer: Source tokenizer, positioned at a record start
        factory: Creates an empty CSVParsable for each record

    Yields:
        One populated object per record
    """
    while tokenizer.has_more():
        obj = factory()
        obj.parse(tokenizer)
        yield obj
