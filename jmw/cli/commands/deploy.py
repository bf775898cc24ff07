"""Deploy command implementation"""

import click

from ..decorators import handle_errors, require_detection
from ..utils.interactive import get_confirmer
from ..utils.output import (
    format_detection,
    format_local_deployment,
    format_remote_instructions,
    format_restart_advice,
    print_success,
    print_warning,
)
from ...core import determine_restart, local_restart_command, remote_instructions, select_remote
from ...services import DeployService
from ...utils.process_utils import format_command


@click.command()
@click.argument('artifact', type=click.Path(dir_okay=False))
@click.option('--client', help='Client whose remote deployment commands are shown')
@click.option('-y', '--yes', 'assume_yes', is_flag=True, help='Skip confirmation prompt')
@click.pass_context
@handle_errors
@require_detection
def deploy(ctx, artifact, client, assume_yes):
    """Deploy an artifact to the local WildFly

    Global modules are copied into the WildFly modules tree, standalone
    deployments into standalone/deployments with a .dodeploy marker, and
    domain deployments are pushed to the server group through jboss-cli.

    \b
    Examples:
      jmw deploy ./target/myapp.war
      jmw deploy ./target/orders-EJB.jar --client metrocargo
    """
    obj = ctx.obj
    detection = obj.detection
    config = obj.config
    project = detection.project

    service = DeployService(config.settings, obj.runner)
    deployment = service.plan(artifact, detection)
    client_name, remote = select_remote(project, client)

    format_detection(detection)
    format_local_deployment(deployment, project)

    if not service.deploy(deployment, get_confirmer(assume_yes)):
        print_warning("Deployment cancelled")
        return

    print_success(f"Deployment completed: {deployment.destination}")

    advice = determine_restart(deployment.artifact.name, detection.classification, config.restart_rules)
    format_restart_advice(advice, format_command(local_restart_command(project)))

    if remote is not None:
        format_remote_instructions(
            remote_instructions(deployment.artifact, detection.classification, project, remote, client_name)
        )
