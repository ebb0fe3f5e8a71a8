"""Analysis orchestration: engine calls plus persistence."""

import logging
from datetime import datetime, timezone

from csvscope.engine import TokenEstimator, analyze_column, parse, render_markdown
from csvscope.errors import AnalysisNotFoundError
from csvscope.models import Analysis
from csvscope.store import AnalysisStore

log = logging.getLogger(__name__)


class AnalysisService:
    def __init__(self, store: AnalysisStore, tokens: TokenEstimator):
        self.store = store
        self.tokens = tokens

    def analyze(self, data: str, name: str | None = None) -> Analysis:
        """Parse, profile and persist one CSV document.

        Parsing happens first so malformed input is rejected before any
        statistics are computed or anything is stored.
        """
        table = parse(data)

        column_statistics = tuple(
            analyze_column(header, table.column(i)) for i, header in enumerate(table.headers)
        )
        markdown = render_markdown(table.headers, table.rows)

        analysis = Analysis(
            name=name,
            original_data=data,
            number_of_rows=table.number_of_rows,
            number_of_columns=table.number_of_columns,
            total_characters=len(data),
            csv_token_count=self.tokens.count(data),
            markdown_token_count=self.tokens.count(markdown),
            column_statistics=column_statistics,
            created_at=datetime.now(timezone.utc),
        )
        stored = self.store.save(analysis)
        log.info(
            "Analysis %d: %d rows x %d columns, %d csv tokens, %d markdown tokens",
            stored.id,
            stored.number_of_rows,
            stored.number_of_columns,
            stored.csv_token_count,
            stored.markdown_token_count,
        )
        return stored

    def get(self, analysis_id: int) -> Analysis:
        analysis = self.store.find_by_id(analysis_id)
        if analysis is None:
            raise AnalysisNotFoundError(analysis_id)
        return analysis

    def list_all(self) -> list[Analysis]:
        return self.store.find_all()

    def delete(self, analysis_id: int) -> None:
        if not self.store.delete(analysis_id):
            raise AnalysisNotFoundError(analysis_id)

    def markdown(self, analysis_id: int) -> str:
        """Markdown table of the stored CSV, identical to the one token-counted at ingest."""
        data = self.get(analysis_id).original_data
        if not data.strip():
            return ""
        table = parse(data)
        return render_markdown(table.headers, table.rows)
