import io

import pytest

from statsapi import config
from statsapi.api.upload import copy_to_disk
from statsapi.errors import UploadTooLargeError

CSV = b"city,temp,rain\nOslo,4.5,120\nRome,18,n/a\nCairo,27.25,2\n"

def upload(client, content, **params):
    return client.post(
        "/api/upload-csv",
        params=params,
        files={"file": ("data.csv", content, "text/csv")},
    )

def test_upload_csv(client, upload_dir):
    r = upload(client, CSV)
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["columns"] == ["city", "temp", "rain"]
    assert body["rowCount"] == 3
    assert set(body["statistics"]) == {"temp", "rain"}
    assert body["statistics"]["temp"]["median"] == 18
    assert body["statistics"]["rain"]["count"] == 2
    assert body["data"][1] == {"city": "Rome", "temp": "18", "rain": "n/a"}
    # The uploaded copy never outlives the request
    assert list(upload_dir.iterdir()) == []

def test_upload_csv_delimiter(client):
    r = upload(client, b"a;b\n1;2\n3;4\n", delimiter=";")
    assert r.status_code == 200
    assert r.json()["statistics"]["b"]["mean"] == 3

def test_upload_empty_csv(client, upload_dir):
    r = upload(client, b"a,b\n")
    assert r.status_code == 400
    assert r.json() == {"error": "Empty CSV file"}
    assert list(upload_dir.iterdir()) == []

def test_upload_missing_file(client):
    r = client.post("/api/upload-csv")
    assert r.status_code == 400

def test_upload_unparseable(client, upload_dir):
    r = upload(client, b"a\n" + b"x" * 200_000 + b"\n")
    assert r.status_code == 500
    assert r.json()["error"].startswith("Error parsing CSV file")
    assert list(upload_dir.iterdir()) == []

def test_upload_too_large(client, upload_dir, monkeypatch):
    monkeypatch.setattr(config, "MAX_UPLOAD_BYTES", 8)
    r = upload(client, CSV)
    assert r.status_code == 413
    assert list(upload_dir.iterdir()) == []

def test_copy_to_disk(tmp_path):
    path = copy_to_disk(io.BytesIO(b"a,b\n1,2\n"), tmp_path / "up", limit=100)
    assert path.parent == tmp_path / "up"
    assert path.read_bytes() == b"a,b\n1,2\n"

def test_copy_to_disk_over_limit_leaves_nothing(tmp_path):
    with pytest.raises(UploadTooLargeError):
        copy_to_disk(io.BytesIO(b"x" * 100), tmp_path, limit=10)
    assert list(tmp_path.iterdir()) == []
