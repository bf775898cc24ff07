"""Build command implementation"""

import click
from rich.console import Console
from rich.markup import escape

from ..decorators import handle_errors, require_detection
from ..utils.interactive import get_confirmer
from ..utils.output import (
    format_artifacts,
    format_build_plan,
    format_detection,
    format_remote_instructions,
    format_restart_advice,
    print_info,
    print_success,
    print_warning,
)
from ...constants import EMOJI_ARROW
from ...core import (
    determine_restart,
    local_restart_command,
    remote_instructions,
    select_remote,
    synthesize_build,
)
from ...services import BuildService
from ...utils.process_utils import format_command

console = Console()


@click.command()
@click.argument('profile', required=False, default='')
@click.option('--client', help='Target client (shows remote deployment commands after build)')
@click.option('--skip-tests', is_flag=True, help='Skip tests during build')
@click.option('-y', '--yes', 'assume_yes', is_flag=True, help='Skip confirmation prompt')
@click.option('--dry-run', is_flag=True, help='Show the build commands without running them')
@click.pass_context
@handle_errors
@require_detection
def build(ctx, profile, client, skip_tests, assume_yes, dry_run):
    """Build the current Maven module

    Detects the project and module from the current directory, shows the
    Maven command it will run, asks for confirmation and runs it. After a
    successful build it reports the artifact, whether WildFly needs a
    restart, and how to deploy it to the selected remote.

    \b
    Examples:
      jmw build              # default profile of the project
      jmw build PROD         # explicit profile
      jmw build --skip-tests
      jmw build TEST --client metrocargo
    """
    obj = ctx.obj
    detection = obj.detection
    config = obj.config
    project = detection.project

    # Resolve everything that can fail before running anything
    plan = synthesize_build(
        detection.classification,
        project,
        profile=profile,
        skip_tests=skip_tests,
        maven_command=config.settings.maven_command,
    )
    client_name, remote = select_remote(project, client)

    format_detection(detection)
    if client_name:
        suffix = "" if client else " (default)"
        console.print(f"{EMOJI_ARROW} Client: {escape(client_name)}{suffix}")
    format_build_plan(plan, profile, project)

    if dry_run:
        print_info("Dry run: nothing executed")
        return

    service = BuildService(config.settings, obj.runner)
    outcome = service.run(plan, detection, get_confirmer(assume_yes))

    if not outcome.executed:
        print_warning("Build cancelled")
        return

    console.print()
    print_success("Build completed successfully!")
    format_artifacts(detection.classification.target_dir)

    if outcome.artifact is None:
        return

    advice = determine_restart(outcome.artifact.name, detection.classification, config.restart_rules)
    format_restart_advice(advice, format_command(local_restart_command(project)))

    if remote is not None:
        format_remote_instructions(
            remote_instructions(outcome.artifact, detection.classification, project, remote, client_name)
        )
