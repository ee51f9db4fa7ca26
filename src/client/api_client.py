"""HTTP client for the projects API

Thin httpx wrapper used by ProjectStore. Every call is attempted once; a failed
call is reported through the exceptions below and retried only when the user
asks for it.
"""
import logging
import httpx
from typing import Any, Callable, Dict, List, Optional, TypeVar
from pydantic import ValidationError
from .models import ProjectForm, ProjectRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ProjectsClientError(Exception):
    """Base exception for all client-side failures"""
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class BackendUnreachableError(ProjectsClientError):
    """Raised when no response was received (connection refused, DNS, timeout)"""
    def __init__(self, message: str):
        super().__init__(message, status_code=None)


class ProjectsApiError(ProjectsClientError):
    """Raised when the server answered with a non-2xx status"""
    def __init__(self, message: str, status_code: int, body: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=status_code)
        self.body = body or {}


class ProjectsApiClient:
    """
    Async client for the five project routes and the health route.

    Args:
        base_url: Server root, e.g. "http://localhost:8000"
        api_prefix: Prefix the project routes are mounted under (API_PREFIX)
        timeout: Request timeout in seconds
        client: Pre-built httpx.AsyncClient, mainly for tests
    """

    def __init__(
        self,
        base_url: str,
        api_prefix: str = "",
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_prefix = api_prefix.rstrip("/")
        self.timeout = timeout
        self.client = client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_config(cls, config) -> "ProjectsApiClient":
        return cls(
            base_url=config.CLIENT_API_URL,
            api_prefix=config.API_PREFIX,
            timeout=config.CLIENT_TIMEOUT,
        )

    @property
    def unreachable_message(self) -> str:
        return (
            "Cannot connect to backend server. "
            f"Please make sure the backend is running on {self.base_url}"
        )

    async def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        """Perform one HTTP request, mapping transport failures to BackendUnreachableError"""
        try:
            return await self.client.request(method, url, **kwargs)
        except httpx.TransportError as e:
            logger.error(f"Projects API unreachable ({method} {url}): {e}")
            raise BackendUnreachableError(self.unreachable_message) from e

    def _raise_for_status(self, response: httpx.Response) -> None:
        if 200 <= response.status_code < 300:
            return

        try:
            body = response.json()
        except ValueError:
            body = {}

        message = body.get("error") if isinstance(body, dict) else None
        if not isinstance(message, str) or not message:
            message = f"HTTP error! status: {response.status_code}"

        logger.warning(f"Projects API error {response.status_code}: {message}")
        raise ProjectsApiError(
            message, response.status_code, body if isinstance(body, dict) else None
        )

    def _parse_body(self, response: httpx.Response, parse: Callable[[Any], T]) -> T:
        """Check the status, then decode and validate a success body"""
        self._raise_for_status(response)
        try:
            return parse(response.json())
        except (ValueError, TypeError, AttributeError, ValidationError) as e:
            logger.error(f"Invalid body from projects API ({response.status_code}): {e}")
            raise ProjectsApiError(
                f"Invalid response body (status {response.status_code})", response.status_code
            ) from e

    def _projects_url(self, project_id: Optional[str] = None) -> str:
        url = f"{self.base_url}{self.api_prefix}/projects"
        if project_id is not None:
            url = f"{url}/{project_id}"
        return url

    async def list_projects(self) -> List[ProjectRecord]:
        response = await self._send("GET", self._projects_url())
        return self._parse_body(
            response, lambda body: [ProjectRecord.model_validate(item) for item in body]
        )

    async def get_project(self, project_id: str) -> ProjectRecord:
        response = await self._send("GET", self._projects_url(project_id))
        return self._parse_body(response, ProjectRecord.model_validate)

    async def create_project(self, form: ProjectForm) -> ProjectRecord:
        response = await self._send("POST", self._projects_url(), json=form.to_payload())
        return self._parse_body(response, ProjectRecord.model_validate)

    async def update_project(self, project_id: str, form: ProjectForm) -> ProjectRecord:
        response = await self._send(
            "PUT", self._projects_url(project_id), json=form.to_payload()
        )
        return self._parse_body(response, ProjectRecord.model_validate)

    async def delete_project(self, project_id: str) -> str:
        """Delete a project, returning the id the server confirmed"""
        response = await self._send("DELETE", self._projects_url(project_id))
        return self._parse_body(response, lambda body: str(body.get("id", project_id)))

    async def health(self) -> Dict[str, Any]:
        response = await self._send("GET", f"{self.base_url}/health")
        return self._parse_body(response, dict)

    async def aclose(self) -> None:
        await self.client.aclose()
