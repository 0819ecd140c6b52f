"""
Shared BDD fixtures and steps.
TestClient is used as a context manager so the app lifespan (database connect/dispose) runs.
"""

import pytest
from fastapi.testclient import TestClient
from pytest_bdd import parsers, then, when

from sellfurniture.main import create_app


@pytest.fixture
def api():
    with TestClient(create_app()) as client:
        yield client


@pytest.fixture
def response():
    """Store last response and any token for later steps."""
    return {}


@when(parsers.parse('I request "{method}" "{path}"'))
def request_path(api, response, method, path):
    r = api.request(method, path)
    response["status"] = r.status_code
    response["body"] = r.json()


@then(parsers.parse("the response status should be {status:d}"))
def status_is(response, status):
    assert response["status"] == status


@then(parsers.parse('the response body should have "{key}" equals "{value}"'))
def body_field_equals(response, key, value):
    assert response["body"].get(key) == value
