"""Tests for upload result and sync report models."""
import dataclasses

import pytest

from lessonsync.models import SyncReport, UploadResult, UploadStatus


def _report():
    return SyncReport.from_results([
        UploadResult("manifests/global_manifest.json", UploadStatus.SUCCEEDED),
        UploadResult("lessons/01.json", UploadStatus.FAILED_VALIDATION, message="line 1 column 9: Expecting value"),
        UploadResult("lessons/02.json", UploadStatus.FAILED_TRANSPORT, message="timeout"),
        UploadResult("lessons/03.json", UploadStatus.SUCCEEDED),
    ], public_base_url="https://x.supabase.co/storage/v1/object/public/content/")


def test_counts():
    report = _report()
    assert report.total == 4
    assert report.succeeded == 2
    assert report.failed == 2
    assert report.skipped == 0
    assert report.exit_code == 1


def test_failure_statuses():
    assert UploadStatus.FAILED_READ.is_failure
    assert UploadStatus.FAILED_VALIDATION.is_failure
    assert not UploadStatus.SKIPPED.is_failure
    assert not UploadStatus.CANCELLED.is_failure


def test_cancelled_results_make_the_run_unsuccessful():
    report = SyncReport.from_results([UploadResult("a.json", UploadStatus.CANCELLED)])
    assert report.failed == 0
    assert report.ok is False


def test_report_is_immutable():
    report = _report()
    with pytest.raises(dataclasses.FrozenInstanceError):
        report.public_base_url = "elsewhere"
    assert isinstance(report.results, tuple)


def test_to_dict_serializes_results():
    data = _report().to_dict()

    assert data["succeeded"] == 2
    assert data["results"][1]["status"] == "failed_validation"
    assert data["results"][2]["message"] == "timeout"


def test_only_succeeded_results_are_ok():
    assert UploadResult("a.json", UploadStatus.SUCCEEDED).ok
    assert not UploadResult("a.json", UploadStatus.SKIPPED).ok
    assert not UploadResult("a.json", UploadStatus.FAILED_TRANSPORT, message="timeout").ok
