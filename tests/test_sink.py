import logging
from types import SimpleNamespace
from unittest.mock import Mock, patch

import pytest

from anandak.errors import CollaboratorError
from anandak.sink import InMemorySubmissionSink, SupabaseSubmissionSink, build_submission_sink


def _client(data=None, error=None):
    client = Mock()
    execute = client.table.return_value.insert.return_value.execute
    if error is not None:
        execute.side_effect = error
    else:
        execute.return_value = SimpleNamespace(data=data)
    return client


def test_supabase_sink_inserts_detailed_row(completed_wizard):
    client = _client(data=[{"id": 42}])
    sink = SupabaseSubmissionSink(client)

    receipt = sink.submit(completed_wizard.submission)

    client.table.assert_called_once_with("assessment_submissions")
    row = client.table.return_value.insert.call_args.args[0]
    assert row["total_score"] == 14
    assert row["courage_score"] == 3
    assert receipt.record_id == "42"


def test_supabase_sink_legacy_table(completed_wizard):
    client = _client(data=[])
    sink = SupabaseSubmissionSink(client, table="assessment_submissions_legacy", row_format="legacy")

    receipt = sink.submit(completed_wizard.submission)

    client.table.assert_called_once_with("assessment_submissions_legacy")
    assert "final_assessment_text" in receipt.row
    assert receipt.record_id is None


def test_supabase_errors_become_collaborator_errors(completed_wizard):
    sink = SupabaseSubmissionSink(_client(error=RuntimeError("connection refused")))
    with pytest.raises(CollaboratorError, match="connection refused"):
        sink.submit(completed_wizard.submission)


def test_unknown_row_format_is_rejected():
    with pytest.raises(ValueError):
        SupabaseSubmissionSink(Mock(), row_format="flat")


def test_in_memory_sink_numbers_records(completed_wizard):
    sink = InMemorySubmissionSink(row_format="legacy")
    first = sink.submit(completed_wizard.submission)
    second = sink.submit(completed_wizard.submission)
    assert (first.record_id, second.record_id) == ("1", "2")
    assert sink.rows[0]["date"] == "October 17, 2026"


def test_build_sink_without_credentials_keeps_rows_in_memory():
    assert isinstance(build_submission_sink({}), InMemorySubmissionSink)


def test_build_sink_with_credentials_uses_supabase():
    config = {
        "SUPABASE_URL": "https://project.supabase.co",
        "SUPABASE_KEY": "secret-key",
        "SUPABASE_TABLE": "assessment_submissions_legacy",
        "SUPABASE_ROW_FORMAT": "legacy",
        "SUBMISSION_TIMEOUT": 2.5,
    }
    with patch("anandak.sink.create_client") as create_client:
        sink = build_submission_sink(config)

    assert isinstance(sink, SupabaseSubmissionSink)
    assert sink.table == "assessment_submissions_legacy"
    assert sink.row_format == "legacy"
    args, kwargs = create_client.call_args
    assert args == ("https://project.supabase.co", "secret-key")
    assert kwargs["options"].postgrest_client_timeout == 2.5


def test_build_sink_defaults_table_from_row_format():
    config = {
        "SUPABASE_URL": "https://project.supabase.co",
        "SUPABASE_KEY": "aaa.bbb.ccc",
        "SUPABASE_ROW_FORMAT": "Legacy",
    }
    with patch("anandak.sink.create_client"):
        sink = build_submission_sink(config)

    assert sink.row_format == "legacy"
    assert sink.table == "assessment_submissions_legacy"


def test_build_sink_with_unknown_row_format_still_starts(caplog):
    caplog.set_level(logging.WARNING, logger="anandak.sink")
    config = {
        "SUPABASE_URL": "https://project.supabase.co",
        "SUPABASE_KEY": "aaa.bbb.ccc",
        "SUPABASE_ROW_FORMAT": "csv",
    }
    with patch("anandak.sink.create_client"):
        sink = build_submission_sink(config)

    assert sink.row_format == "detailed"
    assert sink.table == "assessment_submissions"
    assert "Unknown row format 'csv'" in caplog.text


def test_in_memory_sink_normalises_row_format():
    assert build_submission_sink({"SUPABASE_ROW_FORMAT": " LEGACY"}).row_format == "legacy"
