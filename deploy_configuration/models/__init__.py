"""
Deploy Configuration Models

Dataclass-based value objects owned by a Configuration.
"""

from .stage import (
    Server,
    ServerRole,
    Stage,
)
from .shared import (
    SharedFile,
    SharedFolder,
    SharedPath,
    to_shared_file,
    to_shared_folder,
)
from .tasks import (
    CloudFlareCachePurge,
    Command,
    DeployCommand,
    NewRelic,
    SlackWebhook,
    TaskConfiguration,
)
from .platform import (
    CronConfiguration,
    NginxConfiguration,
    PlatformSettingConfiguration,
    RabbitMqService,
    RedisService,
    SupervisorConfiguration,
    VarnishConfiguration,
)

__all__ = [
    # Stages
    "Server",
    "ServerRole",
    "Stage",
    # Shared paths
    "SharedFile",
    "SharedFolder",
    "SharedPath",
    "to_shared_file",
    "to_shared_folder",
    # Tasks
    "CloudFlareCachePurge",
    "Command",
    "DeployCommand",
    "NewRelic",
    "SlackWebhook",
    "TaskConfiguration",
    # Platform
    "CronConfiguration",
    "NginxConfiguration",
    "PlatformSettingConfiguration",
    "RabbitMqService",
    "RedisService",
    "SupervisorConfiguration",
    "VarnishConfiguration",
]
