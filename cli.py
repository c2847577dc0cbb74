import logging

import typer
from rich.console import Console
from rich.markup import escape

from iecs.aws_sessions import AWSSessions
from iecs.ecs_id_resolver import ClusterResolver, ContainerResolver, TaskResolver
from iecs.exceptions import IecsError
from iecs.log_inspector import LogConfigurationInspector
from iecs.selector import ConsoleSelector
from iecs.session import SessionLauncher

app = typer.Typer(no_args_is_help=True, help="Interactive ECS exec and log lookup.")

console = Console()
err_console = Console(stderr=True)


class Selection:
    """Cluster, task and container picked for one invocation."""

    def __init__(self, aws_sessions, selector):
        self.ecs = aws_sessions.ecs_client()
        self.selector = selector
        self.cluster = None
        self.task = None
        self.container = None

    def resolve(self, cluster=None, task=None, container=None):
        self.cluster = ClusterResolver(self.ecs, self.selector).resolve(cluster)
        self.task = TaskResolver(self.ecs, self.selector).resolve(
            self.cluster.identifier, task
        )
        self.container = ContainerResolver(self.ecs, self.selector).resolve(
            self.cluster.identifier, self.task.identifier, container
        )
        return self


def fail(error: IecsError):
    err_console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    profile: str = typer.Option(
        None, "--profile", envvar="AWS_PROFILE", help="AWS profile to use."
    ),
    region: str = typer.Option(
        None, "--region", envvar="AWS_REGION", help="AWS region to use."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING, format="%(message)s"
    )
    ctx.obj = AWSSessions(profile_name=profile, region_name=region)


@app.command("exec")
def exec_command(
    ctx: typer.Context,
    cluster: str = typer.Option(None, help="Cluster name or ARN."),
    task: str = typer.Option(None, help="Task ID or ARN."),
    container: str = typer.Option(None, help="Container name."),
    command: str = typer.Option("/bin/bash", help="Command to run."),
    interactive: bool = typer.Option(
        True, "--interactive/--no-interactive", "-i", help="Toggles interactive mode."
    ),
):
    """Run a remote command on a container."""
    aws_sessions = ctx.obj
    try:
        selection = Selection(aws_sessions, ConsoleSelector()).resolve(
            cluster, task, container
        )
        launcher = SessionLauncher(selection.ecs, aws_sessions.region)
        returncode = launcher.launch(
            selection.cluster,
            selection.task.identifier,
            selection.container,
            command,
            interactive,
        )
    except IecsError as e:
        fail(e)
    raise typer.Exit(code=returncode)


@app.command("logs")
def logs_command(
    ctx: typer.Context,
    cluster: str = typer.Option(None, help="Cluster name or ARN."),
    task: str = typer.Option(None, help="Task ID or ARN."),
    container: str = typer.Option(None, help="Container name."),
):
    """Validate the log configuration of a container."""
    aws_sessions = ctx.obj
    try:
        selection = Selection(aws_sessions, ConsoleSelector()).resolve(
            cluster, task, container
        )
        inspector = LogConfigurationInspector(selection.ecs, aws_sessions.region)
        reference = inspector.inspect(
            selection.task.definition_identifier, selection.container.display_name
        )
    except IecsError as e:
        fail(e)
    console.print(f"Log group: {escape(str(reference))}")


def go():
    app()


if __name__ == "__main__":
    go()
