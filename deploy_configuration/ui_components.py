"""
Deploy Configuration - UI Components
Rich console overview of an assembled configuration
"""

from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from deploy_configuration.configuration import Configuration

BRAND_COLOR = "cyan"


def show_header(title: str, details: dict = None, console: Console = None):
    """
    Display a minimal header line followed by key-value details.

    Args:
        title: Main title
        details: Additional key-value pairs to display
        console: Rich Console instance (creates new if None)
    """
    if console is None:
        console = Console()

    console.print(
        f" [bold color(214)]deploy[/bold color(214)] [dim]›[/dim] [bold white]{escape(title)}[/bold white]"
    )

    if details:
        for key, value in details.items():
            console.print(
                f" [bold color(214)]deploy[/bold color(214)] [dim]›[/dim] {escape(str(key))}: [{BRAND_COLOR}]{escape(str(value))}[/{BRAND_COLOR}]"
            )

    console.print()


def _task_table(title: str, tasks: Iterable) -> Optional[Table]:
    tasks = list(tasks)
    if not tasks:
        return None

    table = Table(title=title, title_justify="left", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Task", style="white")

    for index, task in enumerate(tasks, start=1):
        table.add_row(str(index), escape(repr(task)))

    return table


def build_stage_table(configuration: Configuration) -> Table:
    """Table with one row per stage."""
    table = Table(
        title="Stages",
        title_justify="left",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Domain", style="white")
    table.add_column("User", style="dim")
    table.add_column("Servers", style="magenta")

    for stage in configuration.get_stages():
        servers = ", ".join(server.hostname for server in stage.get_servers()) or "-"
        table.add_row(
            escape(stage.name), escape(stage.domain), escape(stage.username), escape(servers)
        )

    return table


def build_paths_table(configuration: Configuration) -> Table:
    """Table of shared folders, shared files and writable folders."""
    table = Table(
        title="Paths",
        title_justify="left",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Path", style="white")
    table.add_column("Kind", style="yellow")

    for folder in configuration.get_shared_folders():
        table.add_row(escape(folder.path), "shared folder")
    for file in configuration.get_shared_files():
        table.add_row(escape(file.path), "shared file")
    for folder in configuration.get_writable_folders():
        table.add_row(escape(folder), "writable")

    return table


def show_configuration(configuration: Configuration, console: Console = None):
    """
    Print an overview of a configuration.

    Example:
        show_configuration(config)
    """
    if console is None:
        console = Console()

    show_header(
        "Deploy Configuration",
        details={
            "Repository": configuration.get_git_repository(),
            "PHP": configuration.get_php_version(),
            "Public folder": configuration.get_public_folder(),
            "Build archive": configuration.get_build_archive_file(),
            "Log dir": configuration.get_log_dir(),
        },
        console=console,
    )

    if configuration.get_stages():
        console.print(build_stage_table(configuration))
    else:
        console.print("[yellow]No stages configured[/yellow]")

    paths = build_paths_table(configuration)
    if paths.row_count:
        console.print(paths)

    for title, tasks in (
        ("Build commands", configuration.get_build_commands()),
        ("Deploy commands", configuration.get_deploy_commands()),
        ("After deploy tasks", configuration.get_after_deploy_tasks()),
        ("Platform configurations", configuration.get_platform_configurations()),
        ("Platform services", configuration.get_platform_services()),
    ):
        table = _task_table(title, tasks)
        if table is not None:
            console.print(table)

    console.print(
        f"\n[dim]Excluded from archive: {len(configuration.get_deploy_exclude())} patterns[/dim]"
    )
