"""End-to-end tests for the lessonsync command line."""
import json

import pytest

from lessonsync import cli
from lessonsync.services.storage import SupabaseStorage

from conftest import FakeStorage, write_json


@pytest.fixture
def storage(monkeypatch, isolated_config):
    """Replace the Supabase backend with an in-memory bucket."""
    fake = FakeStorage(base_url="https://jnimcsiushnsonyvfrtt.supabase.co/storage/v1/object/public/content/")
    monkeypatch.setattr(SupabaseStorage, "from_sync_config", classmethod(lambda cls, cfg, client=None: fake))
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "service-role-key")
    return fake


def test_push_all_valid_exits_zero_and_prints_base_url(content_root, storage, capsys):
    exit_code = cli.main(["push", "--root", str(content_root)])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Success: 4" in out
    assert "Failed: 0" in out
    assert "Total: 4" in out
    assert "Public URL base: https://jnimcsiushnsonyvfrtt.supabase.co/storage/v1/object/public/content/" in out
    assert len(storage.objects) == 4


def test_push_with_invalid_file_exits_non_zero(tmp_path, storage, capsys):
    write_json(tmp_path, "manifests/global_manifest.json", {"tracks": []})
    write_json(tmp_path, "lessons/01.json", '{"title": ')

    exit_code = cli.main(["push", "--root", str(tmp_path)])

    out = capsys.readouterr().out
    assert exit_code != 0
    assert "Success: 1" in out
    assert "Failed: 1" in out
    assert "lessons/01.json" in out
    assert "failed validation" in out
    assert "Public URL base" not in out


def test_push_transport_failure_exits_non_zero(content_root, storage, capsys):
    storage.fail_keys.add("lessons/basics/02.json")

    exit_code = cli.main(["push", "--root", str(content_root)])

    out = capsys.readouterr().out
    assert exit_code != 0
    assert "Success: 3" in out
    assert "failed transport" in out


def test_missing_root_aborts_without_report(tmp_path, storage, capsys):
    exit_code = cli.main(["push", "--root", str(tmp_path / "nowhere")])

    out = capsys.readouterr().out
    assert exit_code != 0
    assert "Content directory not found" in out
    assert "Upload Summary" not in out
    assert storage.calls == []


def test_missing_credential_aborts(content_root, isolated_config, monkeypatch, capsys):
    monkeypatch.delenv("SUPABASE_SERVICE_ROLE_KEY", raising=False)

    exit_code = cli.main(["push", "--root", str(content_root)])

    out = capsys.readouterr().out
    assert exit_code == 1
    assert "SUPABASE_SERVICE_ROLE_KEY" in out


def test_dry_run_needs_no_credentials(content_root, isolated_config, monkeypatch, capsys):
    monkeypatch.delenv("SUPABASE_SERVICE_ROLE_KEY", raising=False)

    exit_code = cli.main(["push", "--root", str(content_root), "--dry-run"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Skipped (dry run): 4" in out


def test_report_file_is_written(content_root, storage, tmp_path):
    report_path = tmp_path / "out" / "report.json"

    cli.main(["push", "--root", str(content_root), "--workers", "3", "--report", str(report_path)])

    data = json.loads(report_path.read_text(encoding="utf-8"))
    assert data["total"] == 4
    assert data["succeeded"] == 4
    assert {r["storage_key"] for r in data["results"]} == set(storage.objects)


def test_list_prints_storage_keys(content_root, isolated_config, capsys):
    exit_code = cli.main(["list", "--root", str(content_root)])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "manifests/global_manifest.json" in out
    assert "lessons/basics/02.json" in out
    assert "notes.txt" not in out


def test_config_update_flag(isolated_config):
    assert cli.main(["--config", '{"bucket": "lessons-v2"}']) == 0
    assert json.loads(isolated_config.read_text())["bucket"] == "lessons-v2"


def test_dashboard_without_command(isolated_config, capsys):
    assert cli.main([]) == 0
    assert "lessonsync push" in capsys.readouterr().out
