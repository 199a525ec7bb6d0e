"""Request preview clients for Jira and Confluence.

Requests are prepared (URL, auth header, JSON body) but never sent.
"""

import requests


def _prepare(
    method: str, url: str, email: str, token: str, body: dict | None = None
) -> requests.PreparedRequest:
    """Prepare a request the way it would go over the wire."""
    return requests.Request(
        method,
        url,
        auth=(email, token),
        headers={"Accept": "application/json"},
        json=body,
    ).prepare()


class JiraClient:
    """Preview client for the Jira REST API."""

    def __init__(self, config: dict):
        self.base_url = str(config["jira"]["baseUrl"]).rstrip("/")
        self.project_key = config["jira"]["projectKey"]
        self.email = config["credentials"]["email"]
        self.token = config["jira"]["apiToken"]

    def project_lookup(self) -> requests.PreparedRequest:
        """GET the configured project."""
        return _prepare(
            "GET", f"{self.base_url}/rest/api/3/project/{self.project_key}", self.email, self.token
        )

    def create_project(self, body: dict) -> requests.PreparedRequest:
        """POST a new project."""
        return _prepare("POST", f"{self.base_url}/rest/api/3/project", self.email, self.token, body)

    def create_issue(self, body: dict) -> requests.PreparedRequest:
        """POST a new issue (epic)."""
        return _prepare("POST", f"{self.base_url}/rest/api/3/issue", self.email, self.token, body)


class ConfluenceClient:
    """Preview client for the Confluence REST API."""

    def __init__(self, config: dict):
        self.base_url = str(config["confluence"]["baseUrl"]).rstrip("/")
        self.space_key = config["confluence"]["spaceKey"]
        self.email = config["credentials"]["email"]
        self.token = config["confluence"]["apiToken"]

    def space_lookup(self) -> requests.PreparedRequest:
        """GET the configured space."""
        return _prepare(
            "GET", f"{self.base_url}/rest/api/space/{self.space_key}", self.email, self.token
        )

    def create_space(self, body: dict) -> requests.PreparedRequest:
        """POST a new space."""
        return _prepare("POST", f"{self.base_url}/rest/api/space", self.email, self.token, body)

    def create_page(self, body: dict) -> requests.PreparedRequest:
        """POST a new page."""
        return _prepare("POST", f"{self.base_url}/rest/api/content", self.email, self.token, body)
