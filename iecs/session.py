import logging
import subprocess

from . import wire
from .checker import ConfigChecker
from .ecs_id_resolver import api_call
from .exceptions import ApiError, PluginNotFound
from .identifier import parse_identifier
from .models import ExecSession

logger = logging.getLogger(__name__)


class SessionLauncher:
    """Starts an ECS exec session and hands it to session-manager-plugin."""

    stage = "session"

    def __init__(self, ecs_client, region: str, checker: ConfigChecker = None):
        self.ecs = ecs_client
        self.region = region
        self.checker = checker or ConfigChecker()

    def execute_command(
        self, cluster, task, container, command, interactive
    ) -> ExecSession:
        with api_call(self.stage, "ExecuteCommand"):
            response = self.ecs.execute_command(
                cluster=cluster,
                task=task,
                container=container,
                command=command,
                interactive=interactive,
            )
        if not response.get("session"):
            raise ApiError("session not found", stage=self.stage)
        return ExecSession.from_response(response["session"])

    def launch(self, cluster, task, container, command, interactive=True) -> int:
        plugin = self.checker.find_session_manager_plugin()
        if logger.isEnabledFor(logging.DEBUG):
            version = self.checker.session_manager_plugin_version(plugin)
            logger.debug(
                f"Using {plugin} {version}, argument layout "
                f"v{wire.ARGUMENTS_VERSION}"
            )

        session = self.execute_command(
            cluster.identifier,
            task,
            container.display_name,
            command,
            interactive,
        )
        task_name = parse_identifier(task, self.stage).display_name
        target = wire.session_target(
            cluster.display_name, task_name, container.runtime_id
        )
        arguments = wire.plugin_arguments(
            wire.encode_session(session),
            self.region,
            wire.encode_start_session(target),
        )

        logger.info(f"Starting session {session.session_id} for target: {target}")
        try:
            proc = subprocess.Popen((plugin, *arguments))
        except FileNotFoundError as e:
            raise PluginNotFound(cause=e) from e
        try:
            returncode = proc.wait()
        except KeyboardInterrupt:
            # SIGINT reaches the plugin through the process group
            returncode = proc.wait()
        if returncode < 0:
            # killed by a signal, report it the way a shell does
            returncode = 128 - returncode
        logger.info(f"session-manager-plugin exited with {returncode}")
        return returncode
