"""
Deploy Configuration

Declarative description of how a project is built and deployed.
"""

from .configuration import Configuration
from .exceptions import (
    DeployConfigurationError,
    EmptyRepositoryError,
    InvalidArgumentError,
)
from .models import (
    CloudFlareCachePurge,
    Command,
    CronConfiguration,
    DeployCommand,
    NewRelic,
    NginxConfiguration,
    PlatformSettingConfiguration,
    RabbitMqService,
    RedisService,
    Server,
    ServerRole,
    SharedFile,
    SharedFolder,
    SlackWebhook,
    Stage,
    SupervisorConfiguration,
    TaskConfiguration,
    VarnishConfiguration,
)

__version__ = "1.0.0"

__all__ = [
    "Configuration",
    # Errors
    "DeployConfigurationError",
    "EmptyRepositoryError",
    "InvalidArgumentError",
    # Models
    "CloudFlareCachePurge",
    "Command",
    "CronConfiguration",
    "DeployCommand",
    "NewRelic",
    "NginxConfiguration",
    "PlatformSettingConfiguration",
    "RabbitMqService",
    "RedisService",
    "Server",
    "ServerRole",
    "SharedFile",
    "SharedFolder",
    "SlackWebhook",
    "Stage",
    "SupervisorConfiguration",
    "TaskConfiguration",
    "VarnishConfiguration",
]
