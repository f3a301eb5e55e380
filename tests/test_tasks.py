"""Commands and task descriptors."""

import pytest

from deploy_configuration import (
    CloudFlareCachePurge,
    Command,
    DeployCommand,
    InvalidArgumentError,
    NewRelic,
    NginxConfiguration,
    PlatformSettingConfiguration,
    RabbitMqService,
    RedisService,
    ServerRole,
    SlackWebhook,
    Stage,
    SupervisorConfiguration,
    TaskConfiguration,
    VarnishConfiguration,
)


def test_command_defaults():
    command = Command("bin/magento setup:static-content:deploy")

    assert command.get_command() == "bin/magento setup:static-content:deploy"
    assert command.get_server_roles() == ServerRole.application_roles()
    assert command.get_server_options() == {}
    assert not command.is_callable


def test_command_accepts_callable():
    def flush_cache():
        return None

    command = Command(flush_cache)

    assert command.is_callable
    assert command.get_command() is flush_cache
    assert "flush_cache" in repr(command)


@pytest.mark.parametrize("value", ["", "   "])
def test_empty_command_is_rejected(value):
    with pytest.raises(InvalidArgumentError):
        Command(value)


def test_non_command_value_is_rejected():
    with pytest.raises(TypeError):
        Command(42)


def test_none_roles_fall_back_to_application_roles():
    command = Command("make", server_roles=None, server_options=None)

    assert command.get_server_roles() == ServerRole.application_roles()
    assert command.get_server_options() == {}


def test_deploy_command_targets_stage():
    stage = Stage("production", "shop.example.com")
    command = DeployCommand("bin/magento setup:upgrade", server_roles=[ServerRole.APPLICATION_FIRST])

    assert command.get_stage() is None
    assert command.set_stage(stage) is command
    assert command.get_stage() is stage
    assert command.get_server_roles() == [ServerRole.APPLICATION_FIRST]


def test_deploy_command_rejects_non_stage():
    with pytest.raises(TypeError):
        DeployCommand("make").set_stage("production")


def test_deploy_command_is_a_command():
    command = DeployCommand("make", stage=Stage("test", "test.example.com"))

    assert isinstance(command, Command)
    assert command.get_stage().name == "test"
    assert repr(command) == "DeployCommand(command=make)"


def test_commands_compare_by_identity():
    assert Command("make") != Command("make")


def test_deploy_command_can_be_added_as_build_command(configuration):
    command = DeployCommand("make")

    configuration.add_build_command(command)

    assert configuration.get_build_commands() == [command]


@pytest.mark.parametrize(
    "task",
    [
        Command("make"),
        DeployCommand("make"),
        SlackWebhook("https://hooks.slack.com/services/T/B/X"),
        NewRelic("12345", "secret"),
        CloudFlareCachePurge("zone", "token"),
        NginxConfiguration(),
        SupervisorConfiguration(),
        VarnishConfiguration(),
        PlatformSettingConfiguration("php_version", "8.2"),
        RedisService(),
        RabbitMqService(),
    ],
)
def test_descriptors_are_task_configurations(task):
    assert isinstance(task, TaskConfiguration)


def test_platform_defaults():
    assert NginxConfiguration().source_folder == "etc/nginx"
    assert SupervisorConfiguration().source_folder == "etc/supervisor"
    assert VarnishConfiguration().config_file == "etc/varnish.vcl"
    assert RedisService().memory == "1024M"
    assert RabbitMqService().version == "3.12"


def test_platform_setting_requires_attribute():
    with pytest.raises(InvalidArgumentError):
        PlatformSettingConfiguration("", True)


def test_command_copies_roles_and_options():
    roles = [ServerRole.APPLICATION]
    options = {"timeout": 300}
    command = DeployCommand("bin/magento indexer:reindex", server_roles=roles, server_options=options)

    roles.append(ServerRole.VARNISH)
    options["timeout"] = 10

    assert command.server_roles == [ServerRole.APPLICATION]
    assert command.server_options == {"timeout": 300}
