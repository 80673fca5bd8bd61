"""End-to-end command tests with a recording runner and scripted prompts."""

import sys

import pytest
from typer.testing import CliRunner

from deployzzz import __version__, display
from deployzzz.cli import app, main
from deployzzz.types import CommandInterrupted, GCloudError

cli = CliRunner()

BUCKET_ARGS = ["storage", "create-bucket", "-p", "alpha", "-n", "assets", "-l", "us-east1", "-s", "STANDARD"]


def invoke(*args):
    return cli.invoke(app, list(args))


def test_version():
    result = invoke("version")
    assert result.exit_code == 0
    assert __version__ in result.output


def test_malformed_config_exits_with_error(tmp_path, monkeypatch):
    path = tmp_path / "broken.yaml"
    path.write_text("log_level: [oops\n")
    monkeypatch.setenv("DEPLOYZZZ_CONFIG", str(path))

    result = invoke("version")

    assert result.exit_code == 1
    assert "Could not parse" in result.output


# storage create-bucket


def test_create_private_bucket(gcloud, scripted_prompts):
    scripted_prompts.queue(True)

    result = invoke(*BUCKET_ARGS, "--private")

    assert result.exit_code == 0, result.output
    assert gcloud.calls == [
        (
            [
                "storage",
                "buckets",
                "create",
                "gs://assets",
                "--project=alpha",
                "--location=us-east1",
                "--default-storage-class=STANDARD",
            ],
            False,
        )
    ]
    for value in ("assets", "alpha", "us-east1", "STANDARD", "Disabled"):
        assert value in result.output
    assert [kind for kind, _, _ in scripted_prompts.asked] == ["confirm"]


def test_create_public_bucket(gcloud, scripted_prompts):
    scripted_prompts.queue(True)

    result = invoke(*BUCKET_ARGS, "--public")

    assert result.exit_code == 0, result.output
    assert [args[2] for args in gcloud.commands] == ["create", "add-iam-policy-binding"]
    assert "Enabled" in result.output


def test_create_bucket_prompts_for_missing_options(gcloud, scripted_prompts):
    gcloud.respond_json(["projects", "list"], [{"projectId": "alpha"}, {"projectId": "beta"}])
    scripted_prompts.queue("beta", "assets", "europe-west1", "COLDLINE", False, True)

    result = invoke("storage", "create-bucket")

    assert result.exit_code == 0, result.output
    assert [kind for kind, _, _ in scripted_prompts.asked] == ["select", "text", "select", "select", "confirm", "confirm"]
    create = gcloud.matching("storage", "buckets", "create")[0]
    assert create[3:] == ["gs://assets", "--project=beta", "--location=europe-west1", "--default-storage-class=COLDLINE"]
    assert gcloud.matching("storage", "buckets", "add-iam-policy-binding") == []


def test_create_bucket_declined(gcloud, scripted_prompts):
    scripted_prompts.queue(False)

    result = invoke(*BUCKET_ARGS, "--public")

    assert result.exit_code == 0
    assert "Operation cancelled" in result.output
    assert gcloud.calls == []


def test_create_bucket_failure_exits_one(gcloud, scripted_prompts):
    gcloud.fail(["storage", "buckets", "create"])
    scripted_prompts.queue(True)

    result = invoke(*BUCKET_ARGS, "--public")

    assert result.exit_code == 1
    assert "Failed to create bucket" in result.output
    assert gcloud.matching("storage", "buckets", "add-iam-policy-binding") == []


def test_empty_project_list_stops_before_prompting(gcloud, scripted_prompts):
    gcloud.respond_json(["projects", "list"], [])

    result = invoke("storage", "create-bucket")

    assert result.exit_code == 1
    assert "No projects found" in result.output
    assert scripted_prompts.asked == []


# iam


def test_apply_admin_attempts_all_roles(gcloud, scripted_prompts):
    gcloud.fail(["projects", "add-iam-policy-binding", "alpha", "--member=user:alice@example.com", "--role=roles/storage.admin"])
    scripted_prompts.queue(True)

    result = invoke("iam", "apply-admin", "-p", "alpha", "-e", "alice@example.com")

    assert result.exit_code == 1
    assert len(gcloud.matching("projects", "add-iam-policy-binding")) == 4
    assert "Failed to apply all admin roles" in result.output


def test_apply_admin_success(gcloud, scripted_prompts):
    scripted_prompts.queue(True)

    result = invoke("iam", "apply-admin", "-p", "alpha", "-e", "alice@example.com")

    assert result.exit_code == 0, result.output
    assert len(gcloud.commands) == 4


def test_add_custom_role(gcloud, scripted_prompts):
    from deployzzz.commands.iam import CUSTOM_ROLE

    scripted_prompts.queue(CUSTOM_ROLE, "roles/run.admin", True)

    result = invoke("iam", "add-role", "-p", "alpha", "-e", "alice@example.com")

    assert result.exit_code == 0, result.output
    assert gcloud.commands[0][4] == "--role=roles/run.admin"


def test_add_role_passes_flag_through(gcloud, scripted_prompts):
    scripted_prompts.queue(True)

    result = invoke("iam", "add-role", "-p", "alpha", "-e", "alice@example.com", "-r", "projects/alpha/roles/deployer")

    assert result.exit_code == 0, result.output
    assert gcloud.commands[0][4] == "--role=projects/alpha/roles/deployer"
    assert [kind for kind, _, _ in scripted_prompts.asked] == ["confirm"]


def test_switch_passes_account_flag_through(gcloud):
    result = invoke("auth", "switch", "-a", "robot-42")

    assert result.exit_code == 0, result.output
    assert gcloud.commands == [["config", "set", "account", "robot-42"]]


def test_remove_role_without_roles_exits_one(gcloud, scripted_prompts):
    gcloud.respond_json(["projects", "get-iam-policy"], {"bindings": []})

    result = invoke("iam", "remove-role", "-p", "alpha", "-e", "alice@example.com")

    assert result.exit_code == 1
    assert scripted_prompts.asked == []


# auth


def test_interrupted_login_exits_quietly(gcloud, scripted_prompts):
    gcloud.respond(["auth", "login"], error=CommandInterrupted("gcloud auth login --launch-browser"))

    result = invoke("auth", "login")

    assert result.exit_code == 0
    assert "Error" not in result.output
    assert "✗" not in result.output


def test_failed_login_exits_one(gcloud, scripted_prompts):
    gcloud.respond(["auth", "login"], error=GCloudError("Command failed: gcloud auth login"))

    result = invoke("auth", "login")

    assert result.exit_code == 1
    assert "Error during authentication" in result.output


def test_login_sets_default_project(gcloud, scripted_prompts):
    gcloud.respond_json(["auth", "list"], [{"account": "alice@example.com", "status": "ACTIVE"}])
    gcloud.respond(["config", "get-value", "account"], "alice@example.com")

    result = invoke("auth", "login", "-p", "alpha")

    assert result.exit_code == 0, result.output
    assert ["config", "set", "project", "alpha"] in gcloud.commands
    assert "alice@example.com" in result.output


def test_interrupted_prompt_exits_quietly(gcloud, scripted_prompts):
    scripted_prompts.queue(KeyboardInterrupt())

    result = invoke("project", "create")

    assert result.exit_code == 0
    assert gcloud.calls == []


def test_auth_check_not_authenticated(gcloud):
    gcloud.respond_json(["auth", "list"], [])

    result = invoke("auth", "check")

    assert result.exit_code == 1
    assert "not authenticated" in result.output


def test_switch_without_other_accounts(gcloud, scripted_prompts):
    gcloud.respond_json(["auth", "list"], [{"account": "alice@example.com"}])
    gcloud.respond(["config", "get-value", "account"], "alice@example.com")

    result = invoke("auth", "switch")

    assert result.exit_code == 0
    assert "No other accounts connected" in result.output
    assert scripted_prompts.asked == []


def test_switch_to_selected_account(gcloud, scripted_prompts):
    gcloud.respond_json(["auth", "list"], [{"account": "alice@example.com"}, {"account": "bob@example.com"}])
    gcloud.respond(["config", "get-value", "account"], "alice@example.com")
    scripted_prompts.queue("bob@example.com")

    result = invoke("auth", "switch")

    assert result.exit_code == 0, result.output
    assert ["config", "set", "account", "bob@example.com"] in gcloud.commands


def test_logout_declined(gcloud, scripted_prompts):
    scripted_prompts.queue(False)

    result = invoke("auth", "logout")

    assert result.exit_code == 0
    assert gcloud.calls == []


# project


def test_project_list_empty_is_benign(gcloud):
    gcloud.respond_json(["projects", "list"], [])

    result = invoke("project", "list")

    assert result.exit_code == 0
    assert "No projects found" in result.output


def test_project_create_skips_empty_organizations(gcloud, scripted_prompts):
    gcloud.respond_json(["organizations", "list"], [])
    scripted_prompts.queue(True)

    result = invoke("project", "create", "-p", "alpha-proj", "-n", "Alpha Project")

    assert result.exit_code == 0, result.output
    assert gcloud.matching("projects", "create") == [["projects", "create", "alpha-proj", "--name=Alpha Project"]]


def test_project_delete_declined(gcloud, scripted_prompts):
    scripted_prompts.queue(False)

    result = invoke("project", "delete", "-p", "alpha")

    assert result.exit_code == 0
    assert gcloud.matching("projects", "delete") == []


def test_project_info(gcloud):
    gcloud.respond_json(["projects", "describe"], {
            "projectId": "alpha",
            "name": "Alpha",
            "projectNumber": "123",
            "parent": {"type": "organization", "id": "424242"},
        },
    )
    gcloud.respond(["services", "list"], "compute.googleapis.com\n")

    result = invoke("project", "info", "-p", "alpha")

    assert result.exit_code == 0, result.output
    assert "123" in result.output
    assert "424242" in result.output
    assert "compute.googleapis.com" in result.output


# billing, permissions, org-policy


def test_billing_link_offers_open_accounts(gcloud, scripted_prompts):
    gcloud.respond_json(
        ["billing", "accounts", "list"],
        [
            {"name": "billingAccounts/AAA", "displayName": "Main", "open": True},
            {"name": "billingAccounts/BBB", "displayName": "Closed", "open": False},
        ],
    )
    scripted_prompts.queue("AAA", True)

    result = invoke("billing", "link", "-p", "alpha")

    assert result.exit_code == 0, result.output
    choices = scripted_prompts.asked[0][2]["choices"]
    assert [choice["value"] for choice in choices] == ["AAA"]
    assert gcloud.matching("billing", "projects", "link") == [
        ["billing", "projects", "link", "alpha", "--billing-account=AAA"]
    ]


def test_permissions_check_from_flag(gcloud):
    gcloud.respond(["config", "get-value", "account"], "alice@example.com")
    gcloud.respond_json(
        ["projects", "get-iam-policy"],
        {"bindings": [{"role": "roles/viewer", "members": ["user:alice@example.com"]}]},
    )

    result = invoke("permissions", "check", "-p", "alpha", "--permissions", "roles/viewer, roles/owner")

    assert result.exit_code == 0, result.output
    assert "Granted" in result.output
    assert "Denied" in result.output


@pytest.mark.parametrize("flag,verb", [("--enforce", "enable-enforce"), ("--no-enforce", "disable-enforce")])
def test_org_policy_set_enforcement(gcloud, scripted_prompts, flag, verb):
    scripted_prompts.queue(True)

    result = invoke("org-policy", "set-enforcement", "-p", "alpha", "-n", "constraints/x", flag)

    assert result.exit_code == 0, result.output
    assert gcloud.commands == [["resource-manager", "org-policies", verb, "constraints/x", "--project=alpha"]]


def test_org_policy_add_exception_passes_flag_through(gcloud, scripted_prompts):
    scripted_prompts.queue(True)

    result = invoke("org-policy", "add-exception", "-p", "alpha", "-n", "constraints/gcp.resourceLocations", "-r", "in:us-locations")

    assert result.exit_code == 0, result.output
    assert gcloud.commands == [
        ["resource-manager", "org-policies", "allow", "constraints/gcp.resourceLocations", "in:us-locations", "--project=alpha"]
    ]


DECLINED_GATES = [
    (["project", "create", "-p", "alpha-proj", "-n", "Alpha Project", "-o", "42"], ["projects", "create"]),
    (["project", "delete", "-p", "alpha"], ["projects", "delete"]),
    (["auth", "create-project", "-p", "alpha-proj"], ["projects", "create"]),
    (["auth", "logout"], ["auth", "revoke"]),
    ([*BUCKET_ARGS, "--public"], ["storage", "buckets"]),
    (["storage", "make-public", "-p", "alpha", "-n", "assets"], ["storage", "buckets", "add-iam-policy-binding"]),
    (["storage", "make-private", "-p", "alpha", "-n", "assets"], ["storage", "buckets", "remove-iam-policy-binding"]),
    (["iam", "add-role", "-p", "alpha", "-e", "alice@example.com", "-r", "roles/viewer"], ["projects", "add-iam-policy-binding"]),
    (["iam", "remove-role", "-p", "alpha", "-e", "alice@example.com", "-r", "roles/viewer"], ["projects", "remove-iam-policy-binding"]),
    (["iam", "apply-admin", "-p", "alpha", "-e", "alice@example.com"], ["projects", "add-iam-policy-binding"]),
    (["billing", "link", "-p", "alpha", "-b", "AAA"], ["billing", "projects", "link"]),
    (["org-policy", "set-enforcement", "-p", "alpha", "-n", "constraints/x", "--enforce"], ["resource-manager", "org-policies", "enable-enforce"]),
    (["org-policy", "set-enforcement", "-p", "alpha", "-n", "constraints/x", "--no-enforce"], ["resource-manager", "org-policies", "disable-enforce"]),
    (["org-policy", "add-exception", "-p", "alpha", "-n", "constraints/x", "-r", "//compute.googleapis.com/projects/alpha"], ["resource-manager", "org-policies", "allow"]),
]


@pytest.mark.parametrize("args,mutating", DECLINED_GATES, ids=[" ".join(args[:2]) for args, _ in DECLINED_GATES])
def test_declined_confirmation_changes_nothing(gcloud, scripted_prompts, args, mutating):
    scripted_prompts.queue(False)

    result = invoke(*args)

    assert result.exit_code == 0, result.output
    assert "Operation cancelled" in result.output
    assert gcloud.matching(*mutating) == []
    assert [kind for kind, _, _ in scripted_prompts.asked] == ["confirm"]


# entry point


def run_main(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["deployzzz", *args])
    with pytest.raises(SystemExit) as excinfo:
        main()
    return excinfo.value.code


def test_main_interrupt_in_callback_exits_zero(monkeypatch, capsys):
    def interrupted():
        raise KeyboardInterrupt

    monkeypatch.setattr(display, "banner", interrupted)

    assert run_main(monkeypatch, "version") == 0
    assert "Aborted" not in capsys.readouterr().out


def test_main_success_exits_zero(monkeypatch, capsys):
    assert run_main(monkeypatch, "version") == 0
    assert __version__ in capsys.readouterr().out


def test_main_failure_exits_one(gcloud, monkeypatch):
    gcloud.respond_json(["auth", "list"], [])
    assert run_main(monkeypatch, "auth", "check") == 1


def test_main_usage_error_exits_one(monkeypatch):
    assert run_main(monkeypatch, "storage", "create-bucket", "--no-such-flag") == 1
