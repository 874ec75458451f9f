import json
import os
import sys

import pytest

from versync import manifests
from versync.util import file_util
from versync.manifests import SyncStatus
from versync.version import Version


def read_json(path):
    with open(path, encoding="utf8") as f:
        return json.load(f)


def test_update_one_sets_version_and_preserves_other_keys(project):
    path = project / "backend" / "package.json"
    result = manifests.update_one(path, Version(2, 0, 0))

    assert result.status is SyncStatus.UPDATED
    assert result.ok
    data = read_json(path)
    assert data == {"name": "backend", "version": "2.0.0", "private": True,
                    "scripts": {"start": "node server.js"}}
    assert list(data.keys()) == ["name", "version", "private", "scripts"]


def test_update_one_writes_two_space_indent_and_trailing_newline(project):
    path = project / "frontend" / "package.json"
    manifests.update_one(path, Version(1, 1, 0))
    assert path.read_text(encoding="utf8") == (
        '{\n'
        '  "name": "frontend",\n'
        '  "version": "1.1.0",\n'
        '  "dependencies": {\n'
        '    "react": "^18.2.0"\n'
        '  }\n'
        '}\n'
    )


def test_update_one_adds_missing_version_key_at_the_end(tmp_path):
    path = tmp_path / "package.json"
    path.write_text('{"name": "app"}')
    manifests.update_one(path, Version(0, 2, 0))
    assert list(read_json(path).items()) == [("name", "app"), ("version", "0.2.0")]


def test_update_one_keeps_non_ascii(tmp_path):
    path = tmp_path / "package.json"
    path.write_text(json.dumps({"description": "Café ☃", "version": "0.0.1"}), encoding="utf8")
    manifests.update_one(path, Version(0, 0, 2))
    assert "Café ☃" in path.read_text(encoding="utf8")


def test_update_one_missing_file(tmp_path):
    path = tmp_path / "package.json"
    result = manifests.update_one(path, Version(1, 0, 0))
    assert result.status is SyncStatus.MISSING
    assert result.ok
    assert not path.exists()


def test_update_one_malformed_json(tmp_path):
    path = tmp_path / "package.json"
    path.write_text('{"version": ')
    result = manifests.update_one(path, Version(1, 0, 0))
    assert result.status is SyncStatus.FAILED
    assert not result.ok
    assert path.read_text() == '{"version": '


def test_update_one_rejects_non_object(tmp_path):
    path = tmp_path / "package.json"
    path.write_text('["1.0.0"]')
    result = manifests.update_one(path, Version(1, 0, 0))
    assert result.status is SyncStatus.FAILED
    assert "JSON object" in result.message
    assert path.read_text() == '["1.0.0"]'


def test_update_one_unreadable_path(tmp_path):
    path = tmp_path / "package.json"
    path.mkdir()
    result = manifests.update_one(path, Version(1, 0, 0))
    assert result.status is SyncStatus.FAILED


def test_sync_all_continues_past_failures(tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text("nope")
    missing = tmp_path / "missing.json"
    good = tmp_path / "good.json"
    good.write_text('{"version": "0.0.0"}')

    results = manifests.sync_all([broken, missing, good], Version(3, 2, 1))

    assert [r.status for r in results] == [SyncStatus.FAILED, SyncStatus.MISSING, SyncStatus.UPDATED]
    assert [r.path for r in results] == [str(broken), str(missing), str(good)]
    assert read_json(good) == {"version": "3.2.1"}


def test_sync_all_with_no_manifests():
    assert manifests.sync_all([], Version(1, 0, 0)) == []


def test_update_one_write_failure_leaves_manifest_alone(tmp_path, monkeypatch):
    path = tmp_path / "package.json"
    path.write_text('{"version": "1.0.0"}')

    def deny(filename, data):
        raise PermissionError(13, "Permission denied", str(filename))

    monkeypatch.setattr(file_util, "write_json", deny)
    result = manifests.update_one(path, Version(1, 0, 1))

    assert result.status is SyncStatus.FAILED
    assert "Permission denied" in result.message
    assert path.read_text() == '{"version": "1.0.0"}'


@pytest.mark.skipif(
    sys.platform == "win32" or os.geteuid() == 0,
    reason="file permissions are not enforced for root or on Windows",
)
def test_update_one_read_only_manifest(tmp_path):
    path = tmp_path / "package.json"
    path.write_text('{"version": "1.0.0"}')
    path.chmod(0o444)
    try:
        result = manifests.update_one(path, Version(1, 0, 1))
        assert result.status is SyncStatus.FAILED
        assert path.read_text() == '{"version": "1.0.0"}'
    finally:
        path.chmod(0o644)
