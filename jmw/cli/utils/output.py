# jmw/cli/utils/output.py
"""Output formatting utilities"""

from pathlib import Path
from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...constants import EMOJI_ARROW, EMOJI_INFO, EMOJI_PACKAGE, EMOJI_SUCCESS, EMOJI_WARNING
from ...models import (
    BuildPlan,
    Detection,
    LocalDeployment,
    ProjectConfig,
    RemoteInstructions,
    RestartAdvice,
    Severity,
)
from ...utils.file_utils import format_size, list_artifacts
from ...utils.process_utils import format_command

console = Console()

RULE = "━" * 50


def format_detection(detection: Detection) -> None:
    """Show the detected project and module"""
    c = detection.classification
    console.print(f"{EMOJI_ARROW} Detected: [bold]{escape(detection.project_name)}[/bold] / "
                  f"[cyan]{escape(c.module_name)}[/cyan]")
    console.print(f"{EMOJI_ARROW} Packaging: {escape(c.packaging)}")
    console.print(f"{EMOJI_ARROW} Path: {escape(str(c.module_path))}")
    if c.is_global:
        console.print(f"{EMOJI_ARROW} Type: Global module ({escape(c.deployment_path)})")
    else:
        console.print(f"{EMOJI_ARROW} Type: Normal deployment")
    if c.is_multi_module_build:
        console.print(f"{EMOJI_ARROW} Multi-module build from {escape(str(c.repo_root))}")
    if detection.descriptor.is_aggregator:
        console.print(f"{EMOJI_ARROW} Aggregator of {len(detection.descriptor.modules)} modules")


def format_build_plan(plan: BuildPlan, requested_profile: Optional[str],
                      project: ProjectConfig) -> None:
    """Show the profile and the commands that will run"""
    if plan.profiles:
        label = ", ".join(plan.profiles)
        if not requested_profile and project.default_profile and \
                plan.profiles == (project.default_profile,):
            label += " (default)"
        console.print(f"{EMOJI_ARROW} Profile: {escape(label)}")
    if plan.skip_tests:
        console.print(f"{EMOJI_ARROW} Tests: skipped")

    console.print("\n[bold]Will execute:[/bold]")
    for command in plan.commands:
        console.print(f"  {escape(format_command(command.args))}", soft_wrap=True)
        console.print(f"  [dim](in {escape(str(command.working_dir))})[/dim]", soft_wrap=True)


def format_artifacts(target_dir: Path) -> None:
    """List built artifacts"""
    artifacts = list_artifacts(target_dir)
    console.print(f"\n{EMOJI_PACKAGE} Artifacts built:")
    if not artifacts:
        console.print("   [yellow]No artifacts found[/yellow]")
        return
    for artifact in artifacts:
        kind = "WAR" if artifact.suffix == ".war" else "JAR"
        console.print(f"   {kind}: {escape(artifact.name)} "
                      f"[dim]({format_size(artifact.stat().st_size)})[/dim]")


def format_local_deployment(deployment: LocalDeployment, project: ProjectConfig) -> None:
    """Show what a local deployment will do"""
    table = Table(title="Deployment Plan", box=box.ROUNDED, show_header=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Artifact", escape(str(deployment.artifact)))
    table.add_row("WildFly Root", escape(project.wildfly_root))
    table.add_row("Mode", project.wildfly_mode.value)
    if project.is_domain:
        table.add_row("Server Group", escape(project.server_group))
    if deployment.undeploy:
        table.add_row("Undeploy", escape(format_command(deployment.undeploy)))
    if deployment.command:
        table.add_row("Command", escape(format_command(deployment.command)))
    else:
        table.add_row("Target", escape(str(deployment.target_dir)))
    if deployment.marker is not None:
        table.add_row("Marker", escape(deployment.marker.name))

    console.print(table)


def format_restart_advice(advice: RestartAdvice, restart_command: str) -> None:
    """Show restart guidance"""
    console.print("\n" + RULE)

    if advice.severity is Severity.NONE:
        console.print(f"[green]{EMOJI_INFO}  NO RESTART NEEDED[/green]")
        console.print(f"Reason: {escape(advice.reason)}")
        return

    if advice.severity is Severity.REQUIRED:
        console.print(f"[red]{EMOJI_WARNING}  RESTART REQUIRED[/red]")
    else:
        console.print(f"[yellow]{EMOJI_WARNING}  RESTART RECOMMENDED[/yellow]")
    console.print(f"Reason: {escape(advice.reason)}")

    console.print("\nRestart command:")
    console.print(f"  {escape(restart_command)}", soft_wrap=True)


def format_remote_instructions(instructions: RemoteInstructions) -> None:
    """Show the remote deployment guide"""
    title = "REMOTE DEPLOYMENT GUIDE"
    if instructions.client:
        title += f" ({instructions.client})"

    console.print(f"\n[bold blue]📝 {escape(title)}[/bold blue]")
    console.print(RULE)
    console.print(f"Host: {escape(instructions.target)}")

    for number, step in enumerate(instructions.steps, 1):
        console.print(f"\n{number}. {escape(step.title)}:")
        for command in step.commands:
            console.print(f"   {escape(command)}", soft_wrap=True)


def format_clients(project_name: str, project: ProjectConfig) -> None:
    """List a project's clients"""
    if not project.clients:
        console.print(f"[yellow]No clients configured for project {escape(project_name)}[/yellow]")
        return

    table = Table(title=f"Clients of {escape(project_name)}", box=box.SIMPLE)
    table.add_column("Client", style="cyan")
    table.add_column("Remote", style="green")

    for name, client in project.clients.items():
        remote = client.remote.target if client.remote else "No remote config"
        label = f"{name} (default)" if name == project.default_client else name
        table.add_row(escape(label), escape(remote))

    console.print(table)

    if project.default_client:
        console.print(f"Default client: [green]{escape(project.default_client)}[/green]")


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        console.print(f"[red]Error:[/red] {escape(message)}: {escape(str(error))}")
    else:
        console.print(f"[red]Error:[/red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print warning message"""
    console.print(f"[yellow]Warning:[/yellow] {escape(message)}")


def print_success(message: str) -> None:
    """Print success message"""
    console.print(f"[green]{EMOJI_SUCCESS}[/green] {escape(message)}")


def print_info(message: str) -> None:
    """Print info message"""
    console.print(f"[blue]Info:[/blue] {escape(message)}")
