"""
Answer payload models.
"""

from pydantic import ConfigDict, Field, model_validator

from ..schema import CamelModel


class AnswerTable(CamelModel):
    """Tabular part of an answer. Every row holds exactly one cell per column."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    columns: list[str] = Field(default_factory=list, description="Ordered column headers")
    rows: list[list[str]] = Field(default_factory=list, description="Ordered rows of cell strings")

    @model_validator(mode="after")
    def check_row_lengths(self) -> "AnswerTable":
        width = len(self.columns)
        for index, row in enumerate(self.rows):
            if len(row) != width:
                raise ValueError(f"Row {index} has {len(row)} cells, expected {width}")
        return self


class AnswerPayload(CamelModel):
    """Canned answer returned for every question."""

    answer_text: str = Field(default="", description="Free-text answer")
    table: AnswerTable = Field(default_factory=AnswerTable, description="Tabular answer")
    description: str = Field(default="", description="Explanation shown under the table")
