"""
Application launcher for Archive Browser.
Starts the app that handles a selected file, fire-and-forget.
"""

import subprocess
import traceback
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional

from utils.logging import log_error


class Loader(ABC):
    """Starts an application with a single argument string."""

    @abstractmethod
    def start(self, app_name: str, argument: str) -> None:
        pass


class ProcessLoader(Loader):
    """
    Launches configured commands as child processes.

    Each app name maps to a command template; the "{path}" placeholder is
    replaced by the argument (translated to a host path when a resolver is
    given). The process is not waited on.
    """

    PLACEHOLDER = "{path}"

    def __init__(
        self,
        commands: Dict[str, List[str]],
        resolve_path: Optional[Callable[[str], str]] = None,
    ):
        self.commands = commands
        self.resolve_path = resolve_path

    def build_command(self, app_name: str, argument: str) -> Optional[List[str]]:
        """
        Build the command line for an app.

        Returns:
            The argv list, or None if the app has no configured command
        """
        template = self.commands.get(app_name)
        if not template:
            return None

        if self.resolve_path:
            argument = self.resolve_path(argument)

        if any(self.PLACEHOLDER in part for part in template):
            return [part.replace(self.PLACEHOLDER, argument) for part in template]
        return list(template) + [argument]

    def start(self, app_name: str, argument: str) -> None:
        command = self.build_command(app_name, argument)
        if command is None:
            log_error(f"No launcher configured for {app_name}", "LoaderError")
            return

        try:
            subprocess.Popen(command)
        except OSError as e:
            log_error(
                f"Failed to start {app_name}", type(e).__name__, traceback.format_exc()
            )
