from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ColumnType(str, Enum):
    BOOLEAN = "BOOLEAN"
    INTEGER = "INTEGER"
    DECIMAL = "DECIMAL"
    STRING = "STRING"

    @property
    def is_numeric(self) -> bool:
        return self in (ColumnType.INTEGER, ColumnType.DECIMAL)


class _Record(BaseModel):
    """Immutable value with camelCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ColumnStatistics(_Record):
    column_name: str
    null_count: int
    unique_count: int
    inferred_type: ColumnType
    mean: float | None = None
    median: float | None = None
    standard_deviation: float | None = None


class Analysis(_Record):
    id: int | None = None
    name: str | None = None
    original_data: str
    number_of_rows: int
    number_of_columns: int
    total_characters: int
    csv_token_count: int
    markdown_token_count: int
    column_statistics: tuple[ColumnStatistics, ...] = ()
    created_at: datetime


# ── API models ──


class AnalysisResponse(_Record):
    id: int
    name: str | None = None
    number_of_rows: int
    number_of_columns: int
    total_characters: int
    csv_token_count: int
    markdown_token_count: int
    column_statistics: list[ColumnStatistics] = []
    created_at: datetime

    @classmethod
    def from_analysis(cls, analysis: Analysis) -> "AnalysisResponse":
        return cls.model_validate(analysis.model_dump(exclude={"original_data"}))
