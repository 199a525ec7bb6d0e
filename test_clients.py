"""Tests for request preview clients."""

import base64
import json

import pytest

from clients import ConfluenceClient, JiraClient
from utils import get_default_config


@pytest.fixture
def config():
    config = get_default_config()
    config["credentials"]["email"] = "me@example.org"
    config["jira"]["apiToken"] = "jira-token"
    config["confluence"]["apiToken"] = "wiki-token"
    return config


def basic_auth(email: str, token: str) -> str:
    return "Basic " + base64.b64encode(f"{email}:{token}".encode()).decode()


class TestJiraClient:

    def test_project_lookup(self, config):
        req = JiraClient(config).project_lookup()
        assert req.method == "GET"
        assert req.url == "https://your-domain.atlassian.net/rest/api/3/project/SIMONE"
        assert req.headers["Accept"] == "application/json"
        assert req.headers["Authorization"] == basic_auth("me@example.org", "jira-token")
        assert req.body is None

    def test_create_issue_body(self, config):
        body = {"fields": {"summary": "M12: Example Feature"}}
        req = JiraClient(config).create_issue(body)
        assert req.method == "POST"
        assert req.url == "https://your-domain.atlassian.net/rest/api/3/issue"
        assert req.headers["Content-Type"] == "application/json"
        assert json.loads(req.body) == body

    def test_create_project_url(self, config):
        req = JiraClient(config).create_project({"key": "SIMONE"})
        assert req.url == "https://your-domain.atlassian.net/rest/api/3/project"

    def test_trailing_slash_in_base_url(self, config):
        config["jira"]["baseUrl"] = "https://acme.atlassian.net/"
        req = JiraClient(config).create_issue({})
        assert req.url == "https://acme.atlassian.net/rest/api/3/issue"


class TestConfluenceClient:

    def test_space_lookup(self, config):
        req = ConfluenceClient(config).space_lookup()
        assert req.method == "GET"
        assert req.url == "https://your-domain.atlassian.net/wiki/rest/api/space/SIMONE"
        assert req.headers["Authorization"] == basic_auth("me@example.org", "wiki-token")

    def test_create_page(self, config):
        body = {"type": "page", "title": "M12 - Example Feature"}
        req = ConfluenceClient(config).create_page(body)
        assert req.method == "POST"
        assert req.url == "https://your-domain.atlassian.net/wiki/rest/api/content"
        assert json.loads(req.body) == body

    def test_create_space_url(self, config):
        req = ConfluenceClient(config).create_space({"key": "SIMONE"})
        assert req.url == "https://your-domain.atlassian.net/wiki/rest/api/space"
