from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

from supabase import ClientOptions, create_client

from .config import default_table, normalize_row_format
from .errors import CollaboratorError
from .models import ROW_FORMATS, SubmissionRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SinkReceipt:
    record_id: Optional[str]
    row: Dict[str, Any] = field(default_factory=dict, compare=False)


class SubmissionSink(Protocol):
    def submit(self, record: SubmissionRecord) -> SinkReceipt:
        ...


class SupabaseSubmissionSink:
    """Stores each submission as one row in a Supabase table."""

    def __init__(self, client, table: str = "assessment_submissions", row_format: str = "detailed") -> None:
        if row_format not in ROW_FORMATS:
            raise ValueError(f"Unknown row format {row_format!r}; expected one of {ROW_FORMATS}")
        self.client = client
        self.table = table
        self.row_format = row_format

    @classmethod
    def from_credentials(
        cls,
        url: str,
        key: str,
        table: str = "assessment_submissions",
        row_format: str = "detailed",
        timeout: float = 5.0,
    ) -> "SupabaseSubmissionSink":
        client = create_client(url, key, options=ClientOptions(postgrest_client_timeout=timeout))
        return cls(client, table=table, row_format=row_format)

    def submit(self, record: SubmissionRecord) -> SinkReceipt:
        row = record.to_row(self.row_format)
        try:
            response = self.client.table(self.table).insert(row).execute()
        except Exception as exc:
            raise CollaboratorError(f"Supabase insert into {self.table} failed: {exc}") from exc

        inserted = getattr(response, "data", None) or []
        record_id = inserted[0].get("id") if inserted and isinstance(inserted[0], dict) else None
        logger.info("Stored submission in %s (id=%s)", self.table, record_id)
        return SinkReceipt(record_id=None if record_id is None else str(record_id), row=row)


class InMemorySubmissionSink:
    """Keeps submissions in a list; used when no database is configured and in tests."""

    def __init__(self, row_format: str = "detailed") -> None:
        self.row_format = row_format
        self.records: List[SubmissionRecord] = []
        self.rows: List[Dict[str, Any]] = []

    def submit(self, record: SubmissionRecord) -> SinkReceipt:
        row = record.to_row(self.row_format)
        self.records.append(record)
        self.rows.append(row)
        record_id = str(len(self.records))
        logger.info("Kept submission in memory (id=%s)", record_id)
        return SinkReceipt(record_id=record_id, row=row)


def resolve_row_format(value) -> str:
    row_format = normalize_row_format(value or "detailed")
    if row_format not in ROW_FORMATS:
        logger.warning("Unknown row format %r; storing detailed rows instead", value)
        return "detailed"
    return row_format


def build_submission_sink(config) -> SubmissionSink:
    get = config.get if isinstance(config, dict) else lambda name: getattr(config, name, None)
    url = get("SUPABASE_URL")
    key = get("SUPABASE_KEY")
    row_format = resolve_row_format(get("SUPABASE_ROW_FORMAT"))
    if url and key:
        table = get("SUPABASE_TABLE") or default_table(row_format)
        logger.info("Submissions go to Supabase table %s (%s rows)", table, row_format)
        return SupabaseSubmissionSink.from_credentials(
            url,
            key,
            table=table,
            row_format=row_format,
            timeout=get("SUBMISSION_TIMEOUT") or 5.0,
        )
    logger.warning("Supabase is not configured; submissions are kept in memory only")
    return InMemorySubmissionSink(row_format=row_format)
