"""
Shared pytest fixtures and configuration
"""
import copy
from collections import defaultdict
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from ranch_site.main import app
from ranch_site.dependencies import get_content_client
from ranch_site.apps.contact.services import get_contact_service
from ranch_site.common.content_client import ContentResponse
from ranch_site.common.errors import ContentStoreError


def _lookup(obj: Dict[str, Any], dotted_key: str) -> Any:
    value: Any = obj
    for part in dotted_key.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


class FakeContentClient:
    """
    In-memory stand-in for the Cosmic bucket.

    Applies equality filters the way the store does (dotted keys reach into
    metadata) and answers an empty match with a 404, like the real API.
    """

    def __init__(self):
        self.objects: Dict[str, List[Dict[str, Any]]] = defaultdict(list)
        self.failures: Dict[str, ContentStoreError] = {}
        self.calls: List[Dict[str, Any]] = []

    def add(self, object_type: str, *items: Dict[str, Any]) -> None:
        self.objects[object_type].extend(items)

    def fail(self, object_type: str, status_code: Optional[int] = 500, message: str = "Internal error") -> None:
        self.failures[object_type] = ContentStoreError(message, status_code=status_code)

    async def find(self, query, props=None, depth=None, limit=None) -> ContentResponse:
        self.calls.append({"query": query, "props": props, "depth": depth, "limit": limit})
        object_type = query.get("type")
        if object_type in self.failures:
            raise self.failures[object_type]

        matches = [
            obj for obj in self.objects.get(object_type, [])
            if all(_lookup(obj, key) == value for key, value in query.items() if key != "type")
        ]
        if not matches:
            raise ContentStoreError("No objects found", status_code=404)
        if limit is not None:
            matches = matches[:limit]
        return ContentResponse(objects=copy.deepcopy(matches), total=len(matches))

    async def find_one(self, query, props=None, depth=None) -> Dict[str, Any]:
        response = await self.find(query, props=props, depth=depth, limit=1)
        return response.objects[0]

    async def aclose(self) -> None:
        pass


class FakeContactService:
    def __init__(self, result):
        self.result = result
        self.submissions = []

    async def send(self, submission):
        self.submissions.append(submission)
        return self.result


@pytest.fixture
def content_client() -> FakeContentClient:
    return FakeContentClient()


@pytest.fixture(scope="function")
def client(content_client: FakeContentClient) -> TestClient:
    """
    Create a test client whose repositories read from the fake bucket.
    """
    app.dependency_overrides[get_content_client] = lambda: content_client

    test_client = TestClient(app)
    yield test_client

    # Cleanup
    app.dependency_overrides.clear()


@pytest.fixture
def contact_client(client: TestClient):
    """
    Test client with the contact service replaced; call it with the result to return.
    """
    def _with_result(result):
        service = FakeContactService(result)
        app.dependency_overrides[get_contact_service] = lambda: service
        return client, service

    yield _with_result

    if get_contact_service in app.dependency_overrides:
        del app.dependency_overrides[get_contact_service]
