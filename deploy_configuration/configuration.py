"""Deploy configuration aggregate"""

import logging
import warnings
from typing import Callable, Iterable, List, Optional, Union

from deploy_configuration.constants import (
    DEFAULT_BUILD_ARCHIVE_FILE,
    DEFAULT_DEPLOY_EXCLUDE,
    DEFAULT_LOG_DIR,
    DEFAULT_PHP_VERSION,
    DEFAULT_PUBLIC_FOLDER,
    DEFAULT_STAGE_USERNAME,
    DEPRECATED_DAAS_FIELD,
)
from deploy_configuration.exceptions import EmptyRepositoryError
from deploy_configuration.models import (
    Command,
    DeployCommand,
    SharedFile,
    SharedFolder,
    Stage,
    TaskConfiguration,
    to_shared_file,
    to_shared_folder,
)

logger = logging.getLogger(__name__)

PostInitializeCallback = Callable[[], None]


def _require_type(value, expected: type, label: str):
    if not isinstance(value, expected):
        raise TypeError(
            f"{label} must be {expected.__name__}, got {type(value).__name__}"
        )
    return value


def _warn_deprecated(field_name: str) -> None:
    warnings.warn(
        DEPRECATED_DAAS_FIELD.format(field=field_name),
        DeprecationWarning,
        stacklevel=3,
    )


class Configuration:
    """
    Describes how a project is deployed.

    Every collection follows the same contract:

        get_<items>()      current items in insertion order (a copy)
        add_<item>(item)   append one item, returns self
        set_<items>(items) clear, then add each item, returns self

    `set_*` never merges, so calling it after `add_*` drops what was added
    before, including the default deploy excludes.

    Example:
        config = Configuration("git@github.com:acme/shop.git")
        config.set_php_version("8.2")
        config.add_shared_folder("var/import").add_shared_file("app/etc/env.php")
        stage = config.add_stage("production", "shop.example.com")
        stage.add_server("web1.example.com")
    """

    def __init__(self, git_repository: str):
        """
        Initialize configuration

        Args:
            git_repository: Repository to deploy, required

        Raises:
            EmptyRepositoryError: If git_repository is empty
        """
        if git_repository is not None:
            _require_type(git_repository, str, "Git repository")
        if not git_repository:
            raise EmptyRepositoryError()
        self._git_repository = git_repository

        self._stages: List[Stage] = []
        # Symlinked in order, so order matters
        self._shared_folders: List[SharedFolder] = []
        self._shared_files: List[SharedFile] = []
        # Shared folders are writable as well, the engine adds them itself
        self._writable_folders: List[str] = []
        self._deploy_exclude: List[str] = list(DEFAULT_DEPLOY_EXCLUDE)

        self._build_commands: List[Command] = []
        self._deploy_commands: List[DeployCommand] = []
        self._after_deploy_tasks: List[TaskConfiguration] = []
        self._platform_configurations: List[TaskConfiguration] = []
        self._platform_services: List[TaskConfiguration] = []
        self._post_initialize_callbacks: List[PostInitializeCallback] = []

        self._php_version = DEFAULT_PHP_VERSION
        self._public_folder = DEFAULT_PUBLIC_FOLDER
        self._build_archive_file = DEFAULT_BUILD_ARCHIVE_FILE
        self._log_dir = DEFAULT_LOG_DIR

        # DaaS is no longer supported, kept so older deploy scripts still run
        self._docker_base_image_php: Optional[str] = None
        self._docker_base_image_nginx: Optional[str] = None
        self._docker_image: Optional[str] = None
        self._docker_registry: Optional[str] = None
        self._docker_registry_username: Optional[str] = None
        self._docker_registry_password: Optional[str] = None
        self._daas_enabled = False

    def get_git_repository(self) -> str:
        return self._git_repository

    # Stages

    def add_stage(
        self, name: str, domain: str, username: str = DEFAULT_STAGE_USERNAME
    ) -> Stage:
        """
        Create a stage and add it to the configuration

        Unlike the other add methods this returns the new Stage, so servers
        can be attached to it directly.

        Args:
            name: Stage name, e.g. production
            domain: Domain the stage is reachable on
            username: Remote user to deploy as

        Returns:
            The created Stage
        """
        stage = Stage(name, domain, username)
        self._stages.append(stage)
        logger.debug("Added stage %s (%s@%s)", name, username, domain)
        return stage

    def get_stages(self) -> List[Stage]:
        return list(self._stages)

    # Shared folders / files

    def set_shared_folders(
        self, folders: Iterable[Union[SharedFolder, str]]
    ) -> "Configuration":
        self._shared_folders = []
        for folder in folders:
            self.add_shared_folder(folder)
        logger.debug("Replaced shared folders (%d)", len(self._shared_folders))
        return self

    def add_shared_folder(self, folder: Union[SharedFolder, str]) -> "Configuration":
        """Add a shared folder, plain paths are wrapped into a SharedFolder."""
        self._shared_folders.append(to_shared_folder(folder))
        return self

    def get_shared_folders(self) -> List[SharedFolder]:
        return list(self._shared_folders)

    def set_shared_files(
        self, files: Iterable[Union[SharedFile, str]]
    ) -> "Configuration":
        self._shared_files = []
        for file in files:
            self.add_shared_file(file)
        logger.debug("Replaced shared files (%d)", len(self._shared_files))
        return self

    def add_shared_file(self, file: Union[SharedFile, str]) -> "Configuration":
        """Add a shared file, plain paths are wrapped into a SharedFile."""
        self._shared_files.append(to_shared_file(file))
        return self

    def get_shared_files(self) -> List[SharedFile]:
        return list(self._shared_files)

    # Writable folders

    def set_writable_folders(self, folders: Iterable[str]) -> "Configuration":
        self._writable_folders = []
        for folder in folders:
            self.add_writable_folder(folder)
        logger.debug("Replaced writable folders (%d)", len(self._writable_folders))
        return self

    def add_writable_folder(self, folder: str) -> "Configuration":
        """Add a folder that must be writable but is not shared between deploys."""
        self._writable_folders.append(_require_type(folder, str, "Writable folder"))
        return self

    def get_writable_folders(self) -> List[str]:
        return list(self._writable_folders)

    # Deploy exclude

    def set_deploy_exclude(self, excludes: Iterable[str]) -> "Configuration":
        """Replace the exclude patterns, the defaults are dropped as well."""
        self._deploy_exclude = []
        for exclude in excludes:
            self.add_deploy_exclude(exclude)
        logger.debug("Replaced deploy excludes (%d)", len(self._deploy_exclude))
        return self

    def add_deploy_exclude(self, exclude: str) -> "Configuration":
        """Add a `tar --exclude=` pattern for the build archive."""
        self._deploy_exclude.append(_require_type(exclude, str, "Deploy exclude"))
        return self

    def get_deploy_exclude(self) -> List[str]:
        return list(self._deploy_exclude)

    # Build commands

    def set_build_commands(self, commands: Iterable[Command]) -> "Configuration":
        self._build_commands = []
        for command in commands:
            self.add_build_command(command)
        logger.debug("Replaced build commands (%d)", len(self._build_commands))
        return self

    def add_build_command(self, command: Command) -> "Configuration":
        """Add a command run before deploying, e.g. a static content build."""
        self._build_commands.append(_require_type(command, Command, "Build command"))
        return self

    def get_build_commands(self) -> List[Command]:
        return list(self._build_commands)

    # Deploy commands

    def set_deploy_commands(
        self, commands: Iterable[DeployCommand]
    ) -> "Configuration":
        self._deploy_commands = []
        for command in commands:
            self.add_deploy_command(command)
        logger.debug("Replaced deploy commands (%d)", len(self._deploy_commands))
        return self

    def add_deploy_command(self, command: DeployCommand) -> "Configuration":
        self._deploy_commands.append(
            _require_type(command, DeployCommand, "Deploy command")
        )
        return self

    def get_deploy_commands(self) -> List[DeployCommand]:
        return list(self._deploy_commands)

    # After deploy tasks

    def set_after_deploy_tasks(
        self, tasks: Iterable[TaskConfiguration]
    ) -> "Configuration":
        self._after_deploy_tasks = []
        for task in tasks:
            self.add_after_deploy_task(task)
        logger.debug("Replaced after deploy tasks (%d)", len(self._after_deploy_tasks))
        return self

    def add_after_deploy_task(self, task: TaskConfiguration) -> "Configuration":
        """Add a task run after a successful deploy, e.g. a Slack notification."""
        self._after_deploy_tasks.append(
            _require_type(task, TaskConfiguration, "After deploy task")
        )
        return self

    def get_after_deploy_tasks(self) -> List[TaskConfiguration]:
        return list(self._after_deploy_tasks)

    # Platform

    def set_platform_configurations(
        self, configurations: Iterable[TaskConfiguration]
    ) -> "Configuration":
        self._platform_configurations = []
        for platform_configuration in configurations:
            self.add_platform_configuration(platform_configuration)
        logger.debug(
            "Replaced platform configurations (%d)", len(self._platform_configurations)
        )
        return self

    def add_platform_configuration(
        self, platform_configuration: TaskConfiguration
    ) -> "Configuration":
        self._platform_configurations.append(
            _require_type(
                platform_configuration, TaskConfiguration, "Platform configuration"
            )
        )
        return self

    def get_platform_configurations(self) -> List[TaskConfiguration]:
        return list(self._platform_configurations)

    def set_platform_services(
        self, services: Iterable[TaskConfiguration]
    ) -> "Configuration":
        self._platform_services = []
        for service in services:
            self.add_platform_service(service)
        logger.debug("Replaced platform services (%d)", len(self._platform_services))
        return self

    def add_platform_service(self, service: TaskConfiguration) -> "Configuration":
        self._platform_services.append(
            _require_type(service, TaskConfiguration, "Platform service")
        )
        return self

    def get_platform_services(self) -> List[TaskConfiguration]:
        return list(self._platform_services)

    # Post initialize callbacks

    def set_post_initialize_callbacks(
        self, callbacks: Iterable[PostInitializeCallback]
    ) -> "Configuration":
        self._post_initialize_callbacks = []
        for callback in callbacks:
            self.add_post_initialize_callback(callback)
        logger.debug(
            "Replaced post initialize callbacks (%d)", len(self._post_initialize_callbacks)
        )
        return self

    def add_post_initialize_callback(
        self, callback: PostInitializeCallback
    ) -> "Configuration":
        """
        Add a callback for the execution engine to run once all deploy tasks
        are initialized. Stored only, never called here.
        """
        if not callable(callback):
            raise TypeError(
                f"Post initialize callback must be callable, got {type(callback).__name__}"
            )
        self._post_initialize_callbacks.append(callback)
        return self

    def get_post_initialize_callbacks(self) -> List[PostInitializeCallback]:
        return list(self._post_initialize_callbacks)

    # Scalars

    def get_php_version(self) -> str:
        return self._php_version

    def set_php_version(self, php_version: str) -> None:
        self._php_version = _require_type(php_version, str, "PHP version")

    def get_public_folder(self) -> str:
        return self._public_folder

    def set_public_folder(self, public_folder: str) -> None:
        self._public_folder = _require_type(public_folder, str, "Public folder")

    def get_build_archive_file(self) -> str:
        return self._build_archive_file

    def set_build_archive_file(self, build_archive_file: str) -> None:
        self._build_archive_file = _require_type(
            build_archive_file, str, "Build archive file"
        )

    def get_log_dir(self) -> str:
        return self._log_dir

    def set_log_dir(self, log_dir: str) -> None:
        """Directory containing log files, used for log aggregation across hosts."""
        self._log_dir = _require_type(log_dir, str, "Log dir")

    # Deprecated DaaS settings, stored but never used

    def get_docker_base_image_php(self) -> Optional[str]:
        return self._docker_base_image_php

    def set_docker_base_image_php(self, image: Optional[str]) -> None:
        _warn_deprecated("docker_base_image_php")
        self._docker_base_image_php = image

    def get_docker_base_image_nginx(self) -> Optional[str]:
        return self._docker_base_image_nginx

    def set_docker_base_image_nginx(self, image: Optional[str]) -> None:
        _warn_deprecated("docker_base_image_nginx")
        self._docker_base_image_nginx = image

    def get_docker_image(self) -> Optional[str]:
        return self._docker_image

    def set_docker_image(self, image: Optional[str]) -> None:
        _warn_deprecated("docker_image")
        self._docker_image = image

    def get_docker_registry(self) -> Optional[str]:
        return self._docker_registry

    def set_docker_registry(self, registry: Optional[str]) -> None:
        _warn_deprecated("docker_registry")
        self._docker_registry = registry

    def get_docker_registry_username(self) -> Optional[str]:
        return self._docker_registry_username

    def set_docker_registry_username(self, username: Optional[str]) -> None:
        _warn_deprecated("docker_registry_username")
        self._docker_registry_username = username

    def get_docker_registry_password(self) -> Optional[str]:
        return self._docker_registry_password

    def set_docker_registry_password(self, password: Optional[str]) -> None:
        _warn_deprecated("docker_registry_password")
        self._docker_registry_password = password

    def get_daas_enabled(self) -> bool:
        return self._daas_enabled

    def set_daas_enabled(self, enabled: bool) -> None:
        _warn_deprecated("daas_enabled")
        self._daas_enabled = bool(enabled)

    def __repr__(self) -> str:
        return (
            f"Configuration(repository={self._git_repository}, "
            f"stages={len(self._stages)}, "
            f"build_commands={len(self._build_commands)}, "
            f"deploy_commands={len(self._deploy_commands)})"
        )
