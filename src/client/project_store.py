import logging
from typing import Dict, List, Optional, Tuple
from .api_client import BackendUnreachableError, ProjectsApiClient, ProjectsClientError
from .models import ProjectForm, ProjectRecord
from .projection import (
    SORT_DATE_DESC,
    SORT_KEYS,
    STATUS_ALL,
    STATUS_FILTERS,
    project_view,
)

logger = logging.getLogger(__name__)

ERROR_NETWORK = "network"
ERROR_SERVER = "server"


class ProjectStore:
    """
    Client-held mirror of the project list plus the user's view settings.

    The cache only changes through refresh/create/update/delete, and only after
    the server confirmed the call. A failed mutation leaves the cache as it was,
    records the error message and re-raises the client error. A failed refresh
    empties the cache so no stale data is displayed next to the error.

    The display list is read through ``visible_projects``; it is derived on each
    access from the cache and the current search term, status filter and sort key.
    """

    def __init__(self, api: ProjectsApiClient):
        self._api = api
        self._projects: List[ProjectRecord] = []
        # Nothing has been fetched yet
        self.loading = True
        self.error: Optional[str] = None
        self.error_kind: Optional[str] = None
        self.search_term = ""
        self.status_filter = STATUS_ALL
        self.sort_by = SORT_DATE_DESC

    @property
    def projects(self) -> Tuple[ProjectRecord, ...]:
        return tuple(self._projects)

    @property
    def visible_projects(self) -> List[ProjectRecord]:
        return project_view(self._projects, self.search_term, self.status_filter, self.sort_by)

    @property
    def status_counts(self) -> Dict[str, int]:
        counts = {status: 0 for status in STATUS_FILTERS}
        counts[STATUS_ALL] = len(self._projects)
        for project in self._projects:
            if project.status in counts:
                counts[project.status] += 1
        return counts

    def set_search_term(self, search_term: str) -> None:
        self.search_term = search_term or ""

    def set_status_filter(self, status_filter: str) -> None:
        if status_filter not in STATUS_FILTERS:
            raise ValueError(f"Unknown status filter: {status_filter!r}")
        self.status_filter = status_filter

    def set_sort(self, sort_by: str) -> None:
        if sort_by not in SORT_KEYS:
            raise ValueError(f"Unknown sort key: {sort_by!r}")
        self.sort_by = sort_by

    def _record_error(self, exc: ProjectsClientError) -> None:
        self.error = exc.message
        self.error_kind = ERROR_NETWORK if isinstance(exc, BackendUnreachableError) else ERROR_SERVER

    def _clear_error(self) -> None:
        self.error = None
        self.error_kind = None

    async def refresh(self) -> None:
        """Fetch the full list; on failure the error state is set instead of raising"""
        self.loading = True
        self._clear_error()
        try:
            self._projects = await self._api.list_projects()
        except ProjectsClientError as e:
            logger.error(f"Error fetching projects: {e.message}")
            self._projects = []
            self._record_error(e)
        finally:
            self.loading = False

    async def create(self, form: ProjectForm) -> ProjectRecord:
        self._clear_error()
        try:
            created = await self._api.create_project(form)
        except ProjectsClientError as e:
            logger.error(f"Error creating project: {e.message}")
            self._record_error(e)
            raise

        self._projects = self._projects + [created]
        return created

    async def update(self, project_id: str, form: ProjectForm) -> ProjectRecord:
        self._clear_error()
        try:
            updated = await self._api.update_project(project_id, form)
        except ProjectsClientError as e:
            logger.error(f"Error updating project {project_id}: {e.message}")
            self._record_error(e)
            raise

        self._projects = [
            updated if project.id == project_id else project for project in self._projects
        ]
        return updated

    async def delete(self, project_id: str) -> None:
        self._clear_error()
        try:
            await self._api.delete_project(project_id)
        except ProjectsClientError as e:
            logger.error(f"Error deleting project {project_id}: {e.message}")
            self._record_error(e)
            raise

        self._projects = [project for project in self._projects if project.id != project_id]
