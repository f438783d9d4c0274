"""
Location: python/payark_sdk/resources/projects.py

Summary:
    Projects API. Lists the projects of the authenticated account. Needs a
    Personal Access Token; project-scoped secret keys get a 403.
"""

from typing import TYPE_CHECKING

from pydantic import TypeAdapter

from ..types import Project

if TYPE_CHECKING:
    from ..http import HttpClient

_PROJECT_LIST = TypeAdapter(list[Project])


class ProjectsResource:
    """Operations on the account's projects."""

    def __init__(self, http: "HttpClient"):
        self._http = http

    async def list(self) -> list[Project]:
        """List all projects belonging to the authenticated account."""
        data = await self._http.request("GET", "/v1/projects")
        return _PROJECT_LIST.validate_python(data)
