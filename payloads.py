"""Request bodies for Jira and Confluence, built from config and milestone metadata.

All builders are pure: same input, same payload. Values are dropped into
the templates as-is.
"""

from models import MilestoneMeta

EPIC_PRIORITY = "Medium"
EPIC_LABELS = ["simone", "milestone"]
PROJECT_DESCRIPTION = "AI-driven project management with Simone integration"


def build_epic_payload(config: dict, meta: MilestoneMeta) -> dict:
    """Jira issue body for the milestone epic."""
    jira = config["jira"]
    return {
        "fields": {
            "project": {"key": jira["projectKey"]},
            "summary": f"{meta.key}: {meta.title}",
            "description": f"{meta.description}\n\n**Progress**: {meta.status.progress}",
            "issuetype": {"name": jira["epicIssueType"]},
            "priority": {"name": EPIC_PRIORITY},
            "labels": [*EPIC_LABELS, meta.key.lower()],
        }
    }


def build_page_payload(config: dict, meta: MilestoneMeta) -> dict:
    """Confluence content body for the milestone page."""
    heading = f"{meta.key} - {meta.title}"
    html = "\n".join(
        [
            f"<h1>{heading}</h1>",
            f"<p>{meta.description}</p>",
            "<h2>Progress</h2>",
            f"<p>Completed: {meta.status.progress}</p>",
        ]
    )
    return {
        "type": "page",
        "title": heading,
        "space": {"key": config["confluence"]["spaceKey"]},
        "body": {
            "storage": {
                "value": html,
                "representation": "storage",
            }
        },
    }


def build_project_payload(config: dict) -> dict:
    """Jira project creation record, echoing the endpoint and credentials."""
    jira = config["jira"]
    credentials = config["credentials"]
    return {
        "key": jira["projectKey"],
        "name": jira["projectName"],
        "projectTypeKey": jira.get("projectType") or "software",
        "lead": credentials["email"],
        "description": PROJECT_DESCRIPTION,
        "url": f"{jira['baseUrl']}/rest/api/3/project",
        "auth": {
            "email": credentials["email"],
            "token": jira["apiToken"],
        },
    }


def build_space_payload(config: dict) -> dict:
    """Confluence space creation record, echoing the endpoint and credentials."""
    confluence = config["confluence"]
    credentials = config["credentials"]
    return {
        "key": confluence["spaceKey"],
        "name": confluence["spaceName"],
        "description": {
            "plain": {
                "value": confluence["spaceDescription"],
                "representation": "plain",
            }
        },
        "type": "global",
        "url": f"{confluence['baseUrl']}/rest/api/space",
        "auth": {
            "email": credentials["email"],
            "token": confluence["apiToken"],
        },
    }


def request_body(record: dict) -> dict:
    """Strip the url/auth echo fields from a creation record."""
    return {k: v for k, v in record.items() if k not in ("url", "auth")}
