"""
KB Notes Backend — API Endpoint Tests
======================================

What:  End-to-end tests of the HTTP surface through HTTPX + ASGITransport.
Why:   The envelopes, status codes and messages are the client contract.

What we test:
    ✅ GET /folders with the seed and with an empty catalog
    ✅ GET /folders/{id} and /folders/{name} return the same folder
    ✅ Notes listing and single-note lookup, including every 404 message
    ✅ Unknown routes and wrong methods use the error envelope
    ✅ Pretty-printed JSON, request ID header, /health
"""

import logging
from unittest.mock import AsyncMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

HOSTNAME_NOTE_B64 = "IyMgR2V0IHRoZSBob3N0bmFtZQoKYGBgCmhvc3RuYW1lCmBgYAo="
RASPBERRY_PI = {"id": 1, "name": "Raspberry_Pi", "dbase": "pi_kb"}


def assert_not_found(response, message):
    assert response.status_code == 404
    assert response.json() == {"error": {"code": 404, "message": message}}


class TestFolderEndpoints:

    @pytest.mark.asyncio
    async def test_list_folders(self, test_client):
        response = await test_client.get("/folders")
        assert response.status_code == 200
        assert response.json() == {"data": [RASPBERRY_PI]}

    @pytest.mark.asyncio
    async def test_list_folders_empty(self, make_client, empty_catalog):
        async with make_client(empty_catalog) as client:
            response = await client.get("/folders")
        assert_not_found(response, "No folders")

    @pytest.mark.asyncio
    async def test_folder_by_id_and_name_match(self, test_client):
        by_id = await test_client.get("/folders/1")
        by_name = await test_client.get("/folders/Raspberry_Pi")

        assert by_id.status_code == 200
        assert by_name.status_code == 200
        assert by_id.json() == by_name.json() == {"data": RASPBERRY_PI}

    @pytest.mark.asyncio
    async def test_folder_id_not_found(self, test_client):
        response = await test_client.get("/folders/999")
        assert_not_found(response, "Folder ID 999 not found")

    @pytest.mark.asyncio
    async def test_folder_name_not_found(self, test_client):
        response = await test_client.get("/folders/Arduino")
        assert_not_found(response, "Folder Arduino not found")


class TestNoteEndpoints:

    @pytest.mark.asyncio
    async def test_list_notes(self, test_client):
        response = await test_client.get("/folders/1/notes")
        assert response.status_code == 200
        assert response.json() == {
            "data": [{"id": 1, "title": "Bash", "data": HOSTNAME_NOTE_B64}],
        }

    @pytest.mark.asyncio
    async def test_list_notes_by_name(self, test_client):
        by_name = await test_client.get("/folders/Raspberry_Pi/notes")
        by_id = await test_client.get("/folders/1/notes")
        assert by_name.json() == by_id.json()

    @pytest.mark.asyncio
    async def test_list_notes_missing_folder(self, test_client):
        response = await test_client.get("/folders/999/notes")
        assert_not_found(response, "Folder ID 999 not found")

    @pytest.mark.asyncio
    async def test_list_notes_folder_without_collection(self, make_client, sample_catalog):
        async with make_client(sample_catalog) as client:
            response = await client.get("/folders/2/notes")
        assert_not_found(response, "Folder ID 2 not found")

    @pytest.mark.asyncio
    async def test_empty_notes_collection_is_success(self, make_client, sample_catalog):
        async with make_client(sample_catalog) as client:
            response = await client.get("/folders/Empty/notes")
        assert response.status_code == 200
        assert response.json() == {"data": []}

    @pytest.mark.asyncio
    async def test_get_note(self, test_client):
        response = await test_client.get("/folders/1/notes/1")
        assert response.status_code == 200
        assert response.json() == {"data": {"id": 1, "title": "Bash", "data": HOSTNAME_NOTE_B64}}

    @pytest.mark.asyncio
    async def test_get_note_not_found(self, test_client):
        response = await test_client.get("/folders/1/notes/2")
        assert_not_found(response, "Note ID 2 not found")

    @pytest.mark.asyncio
    async def test_get_note_in_missing_folder(self, test_client):
        response = await test_client.get("/folders/999/notes/1")
        assert_not_found(response, "Folder ID 999 not found")

    @pytest.mark.asyncio
    async def test_get_note_by_folder_name(self, test_client):
        response = await test_client.get("/folders/Raspberry_Pi/notes/1")
        assert response.status_code == 200
        assert response.json()["data"]["title"] == "Bash"


class TestResponseShape:

    @pytest.mark.asyncio
    async def test_json_is_indented(self, test_client):
        response = await test_client.get("/folders/1")
        assert response.text.startswith('{\n    "data": {\n        "id": 1,')
        assert response.headers["content-type"] == "application/json"

    @pytest.mark.asyncio
    async def test_errors_are_indented(self, test_client):
        response = await test_client.get("/folders/999")
        assert '\n    "error": {\n        "code": 404,' in response.text

    @pytest.mark.asyncio
    async def test_unknown_route_uses_error_envelope(self, test_client):
        response = await test_client.get("/nothing-here")
        assert_not_found(response, "Not Found")

    @pytest.mark.asyncio
    async def test_wrong_method_uses_error_envelope(self, test_client):
        response = await test_client.post("/folders")
        assert response.status_code == 405
        assert response.json()["error"]["code"] == 405

    @pytest.mark.asyncio
    async def test_request_id_generated(self, test_client):
        response = await test_client.get("/folders")
        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/folders", headers={"X-Request-ID": "trace-123"})
        assert response.headers["X-Request-ID"] == "trace-123"


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy(self, test_client):
        response = await test_client.get("/health")
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "healthy"
        assert data["database"] == "connected"
        assert data["folders"] == 1

    @pytest.mark.asyncio
    async def test_degraded_when_database_unreachable(self, test_client):
        with patch("kbnotes.routes.health.ping_database", AsyncMock(return_value=False)):
            response = await test_client.get("/health")
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "degraded"
        assert response.json()["data"]["database"] == "disconnected"

    @pytest.mark.asyncio
    async def test_degraded_is_logged(self, test_client, caplog):
        caplog.set_level(logging.WARNING, logger="kbnotes.routes.health")
        with patch("kbnotes.routes.health.ping_database", AsyncMock(return_value=False)):
            await test_client.get("/health")
        assert "database unreachable" in caplog.text


class TestUnexpectedErrors:

    @pytest.mark.asyncio
    async def test_500_uses_error_envelope_and_request_id(self, seed_catalog):
        from kbnotes.main import create_app

        app = create_app(catalog=seed_catalog)
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        with patch(
            "kbnotes.services.catalog.NoteCatalog.list_folders",
            side_effect=RuntimeError("boom"),
        ):
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                response = await client.get("/folders", headers={"X-Request-ID": "err-1"})

        assert response.status_code == 500
        assert response.json() == {
            "error": {"code": 500, "message": "An unexpected error occurred."},
        }
        assert response.headers["X-Request-ID"] == "err-1"
