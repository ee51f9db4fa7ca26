from src.client.api_client import (
    ProjectsApiClient,
    ProjectsClientError,
    ProjectsApiError,
    BackendUnreachableError,
)
from src.client.models import ProjectForm, ProjectRecord
from src.client.project_store import ProjectStore, ERROR_NETWORK, ERROR_SERVER
from src.client.projection import (
    STATUS_FILTERS,
    SORT_KEYS,
    filter_projects,
    sort_projects,
    project_view,
)

__all__ = [
    "ProjectsApiClient",
    "ProjectsClientError",
    "ProjectsApiError",
    "BackendUnreachableError",
    "ProjectForm",
    "ProjectRecord",
    "ProjectStore",
    "ERROR_NETWORK",
    "ERROR_SERVER",
    "STATUS_FILTERS",
    "SORT_KEYS",
    "filter_projects",
    "sort_projects",
    "project_view",
]
