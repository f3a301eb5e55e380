"""Stage creation and server attachment."""

import pytest

from deploy_configuration import InvalidArgumentError, ServerRole, Stage


def test_add_stage_returns_new_stage(configuration):
    stage = configuration.add_stage("production", "shop.example.com", "deploy")

    assert isinstance(stage, Stage)
    assert stage.name == "production"
    assert stage.domain == "shop.example.com"
    assert stage.username == "deploy"
    assert configuration.get_stages()[-1] is stage


def test_add_stage_default_username(configuration):
    stage = configuration.add_stage("acceptance", "acc.example.com")

    assert stage.username == "app"


def test_stages_keep_insertion_order(configuration):
    production = configuration.add_stage("production", "shop.example.com")
    acceptance = configuration.add_stage("acceptance", "acc.example.com")
    test = configuration.add_stage("test", "test.example.com")

    assert configuration.get_stages() == [production, acceptance, test]


@pytest.mark.parametrize("name,domain", [("", "shop.example.com"), ("production", "")])
def test_empty_name_or_domain_is_rejected(configuration, name, domain):
    with pytest.raises(InvalidArgumentError):
        configuration.add_stage(name, domain)

    assert configuration.get_stages() == []


def test_stage_changes_are_visible_through_configuration(configuration):
    stage = configuration.add_stage("production", "shop.example.com")

    stage.add_server("web1.example.com").add_server(
        "lb1.example.com", roles=[ServerRole.LOAD_BALANCER]
    )

    servers = configuration.get_stages()[0].get_servers()
    assert [server.hostname for server in servers] == ["web1.example.com", "lb1.example.com"]


def test_server_defaults_to_application_roles():
    stage = Stage("production", "shop.example.com")

    stage.add_server("web1.example.com")

    server = stage.get_servers()[0]
    assert server.roles == [ServerRole.APPLICATION, ServerRole.APPLICATION_FIRST]
    assert server.has_role(ServerRole.APPLICATION)
    assert not server.has_role(ServerRole.VARNISH)
    assert server.options == {}
    assert server.ssh_options == {}


def test_server_options_are_copied():
    options = {"user": "deploy"}
    stage = Stage("production", "shop.example.com")

    stage.add_server("web1.example.com", options=options, ssh_options={"port": 2222})
    options["user"] = "other"

    server = stage.get_servers()[0]
    assert server.options == {"user": "deploy"}
    assert server.ssh_options == {"port": 2222}


def test_empty_hostname_is_rejected():
    stage = Stage("production", "shop.example.com")

    with pytest.raises(InvalidArgumentError):
        stage.add_server("")

    assert stage.get_servers() == []
