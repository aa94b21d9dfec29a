"""Tests for the HTTP tool server."""

import pytest
from fastapi.testclient import TestClient

from file_manager import api


@pytest.fixture
def client(tools):
    api.set_tools(tools)
    yield TestClient(api.app)
    api.set_tools(None)


class TestToolEndpoints:
    """Tests for /v1/tools."""

    def test_list_tools(self, client):
        response = client.get("/v1/tools")

        assert response.status_code == 200
        names = [tool["name"] for tool in response.json()["tools"]]
        assert "unzip_and_move_svgs" in names
        assert "inputSchema" in response.json()["tools"][0]

    def test_call_tool(self, client, roots):
        response = client.post(
            "/v1/tools/create_directory",
            json={"arguments": {"name": "Projects"}},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["isError"] is False
        assert body["content"][0]["type"] == "text"
        assert (roots.documents / "Projects").is_dir()

    def test_numeric_argument(self, client, roots, make_file):
        for i in range(3):
            make_file(roots.downloads / f"f{i}.txt", mtime=1_000_000 + i)

        response = client.post("/v1/tools/list_files", json={"arguments": {"limit": 2}})

        assert "2 of 3" in response.json()["content"][0]["text"]

    def test_tool_error_is_a_result(self, client):
        response = client.post("/v1/tools/move_file", json={"arguments": {}})

        assert response.status_code == 200
        body = response.json()
        assert body["isError"] is True
        assert body["content"][0]["text"] == "Error: filename is required"

    def test_call_without_body(self, client):
        response = client.post("/v1/tools/list_svg_files")

        assert response.status_code == 200
        assert response.json()["isError"] is False

    def test_unknown_tool(self, client):
        response = client.post("/v1/tools/nope", json={"arguments": {}})

        assert response.status_code == 404
        assert response.json()["isError"] is True


class TestInfoEndpoints:
    """Tests for / and /health."""

    def test_root(self, client):
        assert client.get("/").json()["status"] == "running"

    def test_health_ok(self, client, roots):
        body = client.get("/health").json()

        assert body["status"] == "ok"
        assert body["downloads"] == str(roots.downloads)

    def test_health_degraded(self, client, roots):
        roots.documents.rmdir()

        body = client.get("/health").json()

        assert body["status"] == "degraded"
        assert body["documents"].startswith("missing")
