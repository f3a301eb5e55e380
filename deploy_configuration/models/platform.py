"""
Platform Models

Descriptors for server configuration provisioned from the repository and
for additional services to run next to the application. Provisioning itself
is done by the execution engine.
"""

from dataclasses import dataclass
from typing import Any

from deploy_configuration.constants import (
    DEFAULT_CRON_FILE,
    DEFAULT_NGINX_FOLDER,
    DEFAULT_RABBITMQ_VERSION,
    DEFAULT_REDIS_MEMORY,
    DEFAULT_REDIS_VERSION,
    DEFAULT_SUPERVISOR_FOLDER,
    DEFAULT_VARNISH_CONFIG_FILE,
    DEFAULT_VARNISH_VERSION,
)
from deploy_configuration.exceptions import InvalidArgumentError
from deploy_configuration.models.tasks import TaskConfiguration


@dataclass
class NginxConfiguration(TaskConfiguration):
    """Nginx configuration files to sync to the servers."""

    source_folder: str = DEFAULT_NGINX_FOLDER


@dataclass
class SupervisorConfiguration(TaskConfiguration):
    """Supervisor program definitions to sync to the servers."""

    source_folder: str = DEFAULT_SUPERVISOR_FOLDER


@dataclass
class CronConfiguration(TaskConfiguration):
    """Crontab to install for the stage user."""

    source_file: str = DEFAULT_CRON_FILE


@dataclass
class VarnishConfiguration(TaskConfiguration):
    """Varnish VCL to load on the varnish servers."""

    config_file: str = DEFAULT_VARNISH_CONFIG_FILE
    version: str = DEFAULT_VARNISH_VERSION


@dataclass
class PlatformSettingConfiguration(TaskConfiguration):
    """A single platform setting, e.g. `php_version` or `varnish_enabled`."""

    attribute: str
    value: Any

    def __post_init__(self):
        if not self.attribute:
            raise InvalidArgumentError("Platform setting attribute must not be empty")


@dataclass
class RedisService(TaskConfiguration):
    """Redis instance to run alongside the application."""

    version: str = DEFAULT_REDIS_VERSION
    memory: str = DEFAULT_REDIS_MEMORY


@dataclass
class RabbitMqService(TaskConfiguration):
    """RabbitMQ broker to run alongside the application."""

    version: str = DEFAULT_RABBITMQ_VERSION
