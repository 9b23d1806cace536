"""Shared fixtures: a temporary content tree and an in-memory storage backend."""
import json
import threading

import pytest

from lessonsync.exceptions import TransportError
from lessonsync.services.storage.base import ObjectStorage
from lessonsync.utils.config_loader import SyncConfig


class FakeStorage(ObjectStorage):
    """In-memory bucket. Keys listed in ``fail_keys`` raise TransportError."""

    def __init__(self, fail_keys=(), base_url="https://example.supabase.co/storage/v1/object/public/content/"):
        self.objects = {}
        self.calls = []
        self.fail_keys = set(fail_keys)
        self.base_url = base_url
        self._lock = threading.Lock()

    def upload(self, key, data, content_type="application/json"):
        with self._lock:
            self.calls.append((key, content_type))
        if key in self.fail_keys:
            raise TransportError(f"simulated network failure for {key}")
        with self._lock:
            self.objects[key] = data

    def public_url(self, key=""):
        return f"{self.base_url}{key}"


def write_json(root, relpath, payload):
    path = root.joinpath(*relpath.split('/'))
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(payload, (bytes, str)):
        data = payload.encode('utf-8') if isinstance(payload, str) else payload
        path.write_bytes(data)
    else:
        path.write_text(json.dumps(payload, ensure_ascii=False), encoding='utf-8')
    return path


@pytest.fixture
def content_root(tmp_path):
    """A content tree with two manifests and two lessons, all valid."""
    root = tmp_path / "supabase_content"
    write_json(root, "manifests/global_manifest.json", {"version": 3, "tracks": ["basics"]})
    write_json(root, "manifests/basics.json", {"lessons": ["01", "02"]})
    write_json(root, "lessons/basics/01.json", {"title": "المتغيرات", "blocks": []})
    write_json(root, "lessons/basics/02.json", [{"type": "code", "body": "print('مرحبا')"}])
    write_json(root, "lessons/basics/notes.txt", "not content")
    return root


@pytest.fixture
def make_config(tmp_path):
    def _make(root=None, **kwargs):
        values = {
            "content_root": str(root or tmp_path / "supabase_content"),
            "supabase_url": "https://example.supabase.co",
            "bucket": "content",
            "service_key": "service-role-key",
        }
        values.update(kwargs)
        return SyncConfig(**values)
    return _make


@pytest.fixture
def fake_storage():
    return FakeStorage()


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the config loader at a throwaway config.json."""
    config_path = tmp_path / "config" / "config.json"
    monkeypatch.setenv("LESSONSYNC_CONFIG", str(config_path))
    return config_path
