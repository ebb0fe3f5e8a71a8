"""Errors raised while ingesting and looking up analyses."""


class CsvScopeError(Exception):
    """Base class for per-request failures."""


class MalformedInputError(CsvScopeError, ValueError):
    """Raw CSV text that cannot be parsed into a consistent table.

    For column-count mismatches ``row`` is the 1-based data row index and
    ``expected``/``actual`` are the header and row cell counts.
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        expected: int | None = None,
        actual: int | None = None,
    ):
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(message)

    @classmethod
    def column_mismatch(cls, row: int, actual: int, expected: int) -> "MalformedInputError":
        return cls(
            f"Invalid CSV format: row {row} has {actual} columns, expected {expected}",
            row=row,
            expected=expected,
            actual=actual,
        )


class RejectedInputError(CsvScopeError, ValueError):
    """Request body refused before analysis (empty or disallowed content)."""


class AnalysisNotFoundError(CsvScopeError, LookupError):
    def __init__(self, analysis_id: int):
        self.analysis_id = analysis_id
        super().__init__(f"Analysis not found with id: {analysis_id}")
