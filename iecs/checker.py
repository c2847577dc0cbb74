import shutil
import subprocess

from .exceptions import PluginNotFound

SESSION_MANAGER_PLUGIN = "session-manager-plugin"


class ConfigChecker:
    @staticmethod
    def find_session_manager_plugin():
        """Return the path of session-manager-plugin, or raise PluginNotFound."""
        path = shutil.which(SESSION_MANAGER_PLUGIN)
        if path is None:
            raise PluginNotFound()
        return path

    @staticmethod
    def session_manager_plugin_version(path):
        try:
            result = subprocess.run(
                [path, "--version"],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=True,
            )
        except (subprocess.CalledProcessError, FileNotFoundError):
            return None
        return result.stdout.decode().strip()
