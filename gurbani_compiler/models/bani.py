"""Bani records and their compiled line ranges."""

from pydantic import BaseModel

from gurbani_compiler.models.base import Record


class Bani(Record):
    """A named grouping over an arbitrary subset of lines."""

    id: int
    name_gurmukhi: str = ""
    name_english: str = ""


class BaniLine(BaseModel):
    """A bani membership row, joined with its line's order."""

    order_id: int
    line_id: str
    line_group: int


class LineRange(BaseModel):
    """A contiguous run of a bani, by its boundary line ids."""

    line_group: int
    start_line: str
    end_line: str
