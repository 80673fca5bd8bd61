"""Tests for the workflow layer."""

import logging

import pytest

from deployzzz.services import projects as project_service
from deployzzz.services import storage as storage_service
from deployzzz.workflows import auth, iam, permissions, projects, storage


def test_create_bucket_private_makes_one_call(gcloud):
    assert storage.create_bucket("assets", "alpha", "us-east1", "STANDARD", is_public=False)
    assert [args[2] for args in gcloud.commands] == ["create"]


def test_create_bucket_public_creates_then_opens(gcloud):
    assert storage.create_bucket("assets", "alpha", is_public=True)
    assert [args[2] for args in gcloud.commands] == ["create", "add-iam-policy-binding"]


def test_create_bucket_failure_skips_public_toggle(gcloud):
    gcloud.fail(["storage", "buckets", "create"])

    assert not storage.create_bucket("assets", "alpha", is_public=True)
    assert gcloud.matching("storage", "buckets", "add-iam-policy-binding") == []


def test_create_bucket_public_toggle_failure_is_logged(gcloud, caplog):
    caplog.set_level(logging.INFO, logger="deployzzz")
    gcloud.fail(["storage", "buckets", "add-iam-policy-binding"])

    assert storage.create_bucket("assets", "alpha", is_public=True)
    assert "could not be made public" in caplog.text


def test_workflow_logs_activity(gcloud, caplog):
    caplog.set_level(logging.INFO, logger="deployzzz")
    gcloud.respond_json(["projects", "list"], [{"projectId": "alpha"}])

    assert projects.list_projects() == ["alpha"]
    assert "Listing all projects" in caplog.text


def test_workflow_converts_unexpected_errors(monkeypatch, caplog):
    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(storage_service, "list_buckets", boom)
    monkeypatch.setattr(project_service, "describe_project", boom)

    assert storage.list_buckets("alpha") == []
    assert projects.get_project("alpha") is None
    assert "boom" in caplog.text


def test_check_permissions_default_is_all_denied(monkeypatch):
    from deployzzz.services import permissions as permissions_service

    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(permissions_service, "check_permissions", boom)

    assert permissions.check_permissions("alpha", ["roles/owner", "roles/viewer"]) == {
        "roles/owner": False,
        "roles/viewer": False,
    }


def test_apply_admin_roles_and_of_results(gcloud):
    gcloud.fail(["projects", "add-iam-policy-binding", "alpha", "--member=user:alice@example.com", "--role=roles/owner"])

    assert not iam.apply_admin_roles("alpha", "alice@example.com")
    assert len(gcloud.commands) == 4


def test_authenticate_does_not_swallow_interrupts(gcloud):
    from deployzzz.types import CommandInterrupted

    gcloud.respond(["auth", "login"], error=CommandInterrupted("gcloud auth login"))

    with pytest.raises(KeyboardInterrupt):
        auth.authenticate()
