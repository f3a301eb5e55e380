"""
Stage Models

Deployable environments and the servers that belong to them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from deploy_configuration.constants import DEFAULT_STAGE_USERNAME
from deploy_configuration.exceptions import InvalidArgumentError


class ServerRole(Enum):
    """Role a server plays within a stage."""

    APPLICATION = "application"
    APPLICATION_FIRST = "application_first"
    LOAD_BALANCER = "load_balancer"
    VARNISH = "varnish"
    REDIS = "redis"

    @classmethod
    def application_roles(cls) -> List["ServerRole"]:
        """Roles assigned when none are given."""
        return [cls.APPLICATION, cls.APPLICATION_FIRST]


@dataclass
class Server:
    """A single host within a stage."""

    hostname: str
    roles: List[ServerRole] = field(default_factory=ServerRole.application_roles)
    options: Dict[str, Any] = field(default_factory=dict)
    ssh_options: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.hostname:
            raise InvalidArgumentError("Server hostname must not be empty")

    def has_role(self, role: ServerRole) -> bool:
        """Check if server has the given role."""
        return role in self.roles

    def __repr__(self) -> str:
        roles = ", ".join(role.value for role in self.roles)
        return f"Server(hostname={self.hostname}, roles=[{roles}])"


@dataclass
class Stage:
    """
    A named deploy target, e.g. production or acceptance.

    Stages are created through Configuration.add_stage(), which hands the
    instance back so servers can be attached before continuing with the
    rest of the configuration.
    """

    name: str
    domain: str
    username: str = DEFAULT_STAGE_USERNAME
    servers: List[Server] = field(default_factory=list)

    def __post_init__(self):
        if not self.name:
            raise InvalidArgumentError("Stage name must not be empty")
        if not self.domain:
            raise InvalidArgumentError(
                "Stage domain must not be empty", context=f"Stage: {self.name}"
            )

    def add_server(
        self,
        hostname: str,
        roles: Optional[List[ServerRole]] = None,
        options: Optional[Dict[str, Any]] = None,
        ssh_options: Optional[Dict[str, Any]] = None,
    ) -> "Stage":
        """
        Attach a server to this stage

        Args:
            hostname: Host to connect to
            roles: Server roles, application roles when omitted
            options: Extra options passed to the execution engine
            ssh_options: Extra SSH options for this host

        Returns:
            This stage, for chaining
        """
        server = Server(
            hostname=hostname,
            roles=list(roles) if roles is not None else ServerRole.application_roles(),
            options=dict(options or {}),
            ssh_options=dict(ssh_options or {}),
        )
        self.servers.append(server)
        return self

    def get_servers(self) -> List[Server]:
        return list(self.servers)

    def __repr__(self) -> str:
        return f"Stage(name={self.name}, domain={self.domain}, username={self.username})"
