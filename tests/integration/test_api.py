import os

import pytest
import requests

BASE_URL = os.environ.get("BASE_URL")

# These run against a deployed service, e.g. BASE_URL=http://localhost:5000
pytestmark = pytest.mark.skipif(not BASE_URL, reason="BASE_URL not set")

def test_health():
    r = requests.get(f"{BASE_URL}/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"

def test_ready():
    r = requests.get(f"{BASE_URL}/ready")
    assert r.status_code == 200
    assert r.json()["status"] == "ready"

def test_api_health():
    r = requests.get(f"{BASE_URL}/api/health")
    assert r.status_code == 200
    assert r.json()["message"] == "Statistics API is running"

def test_calculate():
    r = requests.post(f"{BASE_URL}/api/calculate", json={"data": [1, 2, 3, 4, 5]})
    assert r.status_code == 200
    stats = r.json()["statistics"]
    assert stats["min"] == 1
    assert stats["max"] == 5
    assert stats["variance"] == 2

def test_calculate_bad_request():
    r = requests.post(f"{BASE_URL}/api/calculate", json={"data": []})
    assert r.status_code == 400
    assert "error" in r.json()

def test_histogram():
    r = requests.post(f"{BASE_URL}/api/histogram", json={"data": [1, 2, 3, 4], "bins": 2})
    assert r.status_code == 200
    assert [b["count"] for b in r.json()["histogram"]] == [2, 2]

def test_upload_csv():
    files = {"file": ("data.csv", b"x,y\n1,2\n3,4\n", "text/csv")}
    r = requests.post(f"{BASE_URL}/api/upload-csv", files=files)
    assert r.status_code == 200
    assert r.json()["statistics"]["y"]["mean"] == 3

def test_metrics():
    r = requests.get(f"{BASE_URL}/metrics")
    assert r.status_code == 200
    assert "stats_api_request_total" in r.text
