"""Clients command implementation"""

import click

from ..decorators import handle_errors, require_project
from ..utils.output import format_clients


@click.command()
@click.pass_context
@handle_errors
@require_project
def clients(ctx):
    """Show available clients for the current project"""
    project_name, project = ctx.obj.project
    format_clients(project_name, project)
