"""
Task Models

Commands and task descriptors that run at the different deploy phases.
The execution engine decides how each kind is run; these classes only
carry the values it needs.
"""

from abc import ABC
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union

from deploy_configuration.exceptions import InvalidArgumentError
from deploy_configuration.models.stage import ServerRole, Stage

CommandLike = Union[str, Callable[[], Any]]


class TaskConfiguration(ABC):
    """Marker base for everything that can be scheduled as a deploy task."""


@dataclass(eq=False)
class Command(TaskConfiguration):
    """
    A shell command or a callable to run during a deploy phase.

    Build commands run on the build machine, after-deploy commands on the
    servers matching `server_roles`.
    """

    command: CommandLike
    server_roles: List[ServerRole] = field(default_factory=ServerRole.application_roles)
    server_options: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if isinstance(self.command, str):
            if not self.command.strip():
                raise InvalidArgumentError("Command must not be empty")
        elif not callable(self.command):
            raise TypeError(
                f"Command must be a string or callable, got {type(self.command).__name__}"
            )
        if self.server_roles is None:
            self.server_roles = ServerRole.application_roles()
        self.server_roles = list(self.server_roles)
        self.server_options = dict(self.server_options or {})

    @property
    def is_callable(self) -> bool:
        """Check if command is a callable instead of a shell string."""
        return not isinstance(self.command, str)

    def get_command(self) -> CommandLike:
        return self.command

    def get_server_roles(self) -> List[ServerRole]:
        return list(self.server_roles)

    def get_server_options(self) -> Dict[str, Any]:
        return dict(self.server_options)

    def __repr__(self) -> str:
        label = getattr(self.command, "__name__", "callable") if self.is_callable else self.command
        return f"{type(self).__name__}(command={label})"


@dataclass(eq=False, repr=False)
class DeployCommand(Command):
    """
    Command run on the servers while a release is being activated.

    When `stage` is set the command only runs for that stage, otherwise it
    runs for every stage. Matching happens by stage name.
    """

    stage: Optional[Stage] = None

    def __post_init__(self):
        super().__post_init__()
        self.set_stage(self.stage)

    def set_stage(self, stage: Optional[Stage]) -> "DeployCommand":
        if stage is not None and not isinstance(stage, Stage):
            raise TypeError(f"Expected Stage, got {type(stage).__name__}")
        self.stage = stage
        return self

    def get_stage(self) -> Optional[Stage]:
        return self.stage


@dataclass
class SlackWebhook(TaskConfiguration):
    """Post a deploy notification to a Slack incoming webhook."""

    webhook_url: str
    channel: Optional[str] = None


@dataclass
class NewRelic(TaskConfiguration):
    """Register a deployment marker in New Relic."""

    app_id: str
    api_key: str


@dataclass
class CloudFlareCachePurge(TaskConfiguration):
    """Purge the CloudFlare cache of a zone after deploying."""

    zone_id: str
    api_token: str
