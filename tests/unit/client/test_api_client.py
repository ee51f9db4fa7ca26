"""Unit tests for the projects HTTP client

Tests status mapping and error message derivation with mocked HTTP responses.
"""
import pytest
from datetime import date
from unittest.mock import AsyncMock, MagicMock, patch
import httpx
from src.client.api_client import (
    BackendUnreachableError,
    ProjectsApiClient,
    ProjectsApiError,
)
from src.client.models import ProjectForm

PROJECT_JSON = {
    "id": "4f1c",
    "name": "Alpha",
    "description": "d",
    "status": "active",
    "startDate": "2024-01-01",
    "endDate": "2024-02-01",
    "createdAt": "2024-01-01T10:00:00",
    "updatedAt": "2024-01-01T10:00:00",
}


@pytest.fixture
def api_client():
    """Create projects client for testing"""
    return ProjectsApiClient(base_url="http://projects-test:8000/")


@pytest.fixture
def mock_response():
    """Create mock HTTP response"""
    response = MagicMock(spec=httpx.Response)
    response.status_code = 200
    return response


def _form():
    return ProjectForm(
        name="Alpha",
        description="d",
        status="on-hold",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 2, 1),
    )


class TestProjectsApiClient:
    """Unit tests for ProjectsApiClient"""

    @pytest.mark.asyncio
    async def test_list_projects_parses_records(self, api_client, mock_response):
        mock_response.json.return_value = [PROJECT_JSON]

        with patch.object(api_client, "_send", new_callable=AsyncMock) as mock_send:
            mock_send.return_value = mock_response

            projects = await api_client.list_projects()

            assert len(projects) == 1
            assert projects[0].id == "4f1c"
            assert projects[0].start_date == date(2024, 1, 1)
            mock_send.assert_called_once_with("GET", "http://projects-test:8000/projects")

    @pytest.mark.asyncio
    async def test_create_project_sends_wire_payload(self, api_client, mock_response):
        mock_response.status_code = 201
        mock_response.json.return_value = PROJECT_JSON

        with patch.object(api_client, "_send", new_callable=AsyncMock) as mock_send:
            mock_send.return_value = mock_response

            project = await api_client.create_project(_form())

            assert project.name == "Alpha"
            mock_send.assert_called_once_with(
                "POST",
                "http://projects-test:8000/projects",
                json={
                    "name": "Alpha",
                    "description": "d",
                    "status": "on-hold",
                    "startDate": "2024-01-01",
                    "endDate": "2024-02-01",
                },
            )

    @pytest.mark.asyncio
    async def test_api_prefix_is_applied(self, mock_response):
        api_client = ProjectsApiClient(base_url="http://projects-test:8000", api_prefix="/api")
        mock_response.json.return_value = {"success": True, "id": "4f1c"}

        with patch.object(api_client, "_send", new_callable=AsyncMock) as mock_send:
            mock_send.return_value = mock_response

            deleted_id = await api_client.delete_project("4f1c")

            assert deleted_id == "4f1c"
            mock_send.assert_called_once_with(
                "DELETE", "http://projects-test:8000/api/projects/4f1c"
            )

    @pytest.mark.asyncio
    async def test_error_message_taken_from_body(self, api_client, mock_response):
        mock_response.status_code = 400
        mock_response.json.return_value = {
            "error": "Invalid status",
            "code": "INVALID_STATUS",
            "validStatuses": ["active", "completed", "on-hold"],
        }

        with patch.object(api_client, "_send", new_callable=AsyncMock) as mock_send:
            mock_send.return_value = mock_response

            with pytest.raises(ProjectsApiError) as exc_info:
                await api_client.update_project("4f1c", _form())

            assert exc_info.value.message == "Invalid status"
            assert exc_info.value.status_code == 400
            assert exc_info.value.body["validStatuses"] == ["active", "completed", "on-hold"]

    @pytest.mark.asyncio
    async def test_error_message_falls_back_to_status(self, api_client, mock_response):
        mock_response.status_code = 502
        mock_response.json.side_effect = ValueError("not json")

        with patch.object(api_client, "_send", new_callable=AsyncMock) as mock_send:
            mock_send.return_value = mock_response

            with pytest.raises(ProjectsApiError) as exc_info:
                await api_client.get_project("4f1c")

            assert exc_info.value.message == "HTTP error! status: 502"
            assert exc_info.value.body == {}

    @pytest.mark.asyncio
    async def test_error_body_without_error_field(self, api_client, mock_response):
        mock_response.status_code = 404
        mock_response.json.return_value = {"detail": "Not Found"}

        with patch.object(api_client, "_send", new_callable=AsyncMock) as mock_send:
            mock_send.return_value = mock_response

            with pytest.raises(ProjectsApiError) as exc_info:
                await api_client.get_project("4f1c")

            assert exc_info.value.message == "HTTP error! status: 404"

    @pytest.mark.asyncio
    async def test_connection_refused_is_backend_unreachable(self):
        def refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)

        api_client = ProjectsApiClient(
            base_url="http://projects-test:8000",
            client=httpx.AsyncClient(transport=httpx.MockTransport(refuse)),
        )

        with pytest.raises(BackendUnreachableError) as exc_info:
            await api_client.list_projects()

        assert exc_info.value.status_code is None
        assert "http://projects-test:8000" in exc_info.value.message
        await api_client.aclose()

    @pytest.mark.asyncio
    async def test_real_transport_round_trip(self):
        def handler(request):
            assert request.url.path == "/projects/4f1c"
            return httpx.Response(200, json=PROJECT_JSON)

        api_client = ProjectsApiClient(
            base_url="http://projects-test:8000",
            client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )

        project = await api_client.get_project("4f1c")

        assert project.status == "active"
        await api_client.aclose()

    def test_from_config(self):
        class Config:
            CLIENT_API_URL = "http://tracker:9000"
            API_PREFIX = "/api"
            CLIENT_TIMEOUT = 3.0

        api_client = ProjectsApiClient.from_config(Config)

        assert api_client.base_url == "http://tracker:9000"
        assert api_client.api_prefix == "/api"
        assert api_client.timeout == 3.0


class TestResponseBodies:
    """Success responses whose body cannot be read, and the health call"""

    @staticmethod
    def _client(handler):
        return ProjectsApiClient(
            base_url="http://projects-test:8000",
            client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )

    @pytest.mark.asyncio
    async def test_non_json_success_body(self):
        api_client = self._client(lambda request: httpx.Response(200, text="<html>proxy</html>"))

        with pytest.raises(ProjectsApiError) as exc_info:
            await api_client.list_projects()

        assert exc_info.value.message == "Invalid response body (status 200)"
        assert exc_info.value.status_code == 200
        assert isinstance(exc_info.value.__cause__, ValueError)
        await api_client.aclose()

    @pytest.mark.asyncio
    async def test_record_missing_fields(self):
        api_client = self._client(lambda request: httpx.Response(200, json={"id": "4f1c"}))

        with pytest.raises(ProjectsApiError) as exc_info:
            await api_client.get_project("4f1c")

        assert exc_info.value.message == "Invalid response body (status 200)"
        await api_client.aclose()

    @pytest.mark.asyncio
    async def test_delete_with_non_object_body(self):
        api_client = self._client(lambda request: httpx.Response(200, json=["4f1c"]))

        with pytest.raises(ProjectsApiError):
            await api_client.delete_project("4f1c")

        await api_client.aclose()

    @pytest.mark.asyncio
    async def test_health_returns_body(self):
        def handler(request):
            assert request.url.path == "/health"
            return httpx.Response(
                200, json={"status": "Healthy", "timestamp": "2024-06-01T12:00:00"}
            )

        api_client = self._client(handler)

        body = await api_client.health()

        assert body["status"] == "Healthy"
        await api_client.aclose()

    @pytest.mark.asyncio
    async def test_health_store_unreachable(self):
        api_client = self._client(
            lambda request: httpx.Response(
                500,
                json={
                    "error": "Database connection failed",
                    "code": "STORE_UNREACHABLE",
                    "message": "connection refused",
                },
            )
        )

        with pytest.raises(ProjectsApiError) as exc_info:
            await api_client.health()

        assert exc_info.value.message == "Database connection failed"
        assert exc_info.value.status_code == 500
        await api_client.aclose()
