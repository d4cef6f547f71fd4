"""Shared fixtures for policy tests."""

from typing import Any

import pytest

from catalog_model.config.loader import ConfigLoader


@pytest.fixture
def user_entity() -> dict[str, Any]:
    """A complete, valid User entity."""
    return {
        "apiVersion": "backstage.io/v1alpha1",
        "kind": "User",
        "metadata": {
            "name": "doe",
        },
        "spec": {
            "type": "employee",
            "profile": {
                "displayName": "John Doe",
                "email": "john@doe.org",
                "picture": "https://doe.org/john.jpeg",
            },
            "memberOf": ["org-a", "department-b", "team-c", "developers"],
            "directMemberOf": ["team-c", "developers"],
        },
    }


@pytest.fixture
def group_entity() -> dict[str, Any]:
    """A complete, valid Group entity."""
    return {
        "apiVersion": "backstage.io/v1alpha1",
        "kind": "Group",
        "metadata": {
            "name": "team-c",
        },
        "spec": {
            "type": "team",
            "profile": {
                "displayName": "Team C",
                "email": "team-c@doe.org",
            },
            "parent": "department-b",
            "ancestors": ["department-b", "org-a"],
            "children": [],
            "descendants": [],
        },
    }


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point config lookup at empty temporary directories."""
    project_dir = tmp_path / "project"
    user_dir = tmp_path / "home"
    project_dir.mkdir()
    monkeypatch.setattr(ConfigLoader, "USER_CONFIG_DIR", user_dir)
    monkeypatch.chdir(project_dir)
    return project_dir, user_dir
