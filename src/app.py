"""
Archive Browser Application - Main orchestrator.

This module provides the main application class that coordinates
all components: settings, storage, the browser core, input, and UI.
"""

import pygame
from typing import Optional

from constants import APP_VERSION, DEV_MODE, FPS, SCREEN_WIDTH, SCREEN_HEIGHT
from browser.archive import ArchiveBrowser
from config.browser import BrowserConfig
from config.settings import load_settings, load_controller_mapping, get_controller_mapping
from input.controller import ControllerHandler
from services.loader import ProcessLoader
from services.storage import LocalStorage
from ui.screens.archive_screen import ArchiveScreen
from ui.screens.modals.rename_modal import RenameModal
from ui.theme import Theme
from utils.logging import log_error, init_log_file, update_log_file_path


class ArchiveApp:
    """
    Main application class for Archive Browser.

    Runs the pygame loop and feeds one command at a time to the browser.
    """

    def __init__(self):
        """Initialize the application."""
        self.settings = load_settings()
        update_log_file_path(self.settings["work_dir"])
        init_log_file()
        print(f"Archive Browser {APP_VERSION}")

        pygame.init()
        pygame.display.set_caption("Archive")

        if DEV_MODE:
            self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        else:
            display_info = pygame.display.Info()
            self.screen = pygame.display.set_mode(
                (display_info.current_w, display_info.current_h),
                pygame.FULLSCREEN,
            )
        self.clock = pygame.time.Clock()

        pygame.joystick.init()
        self.joystick: Optional[pygame.joystick.JoystickType] = None
        if pygame.joystick.get_count() > 0:
            self.joystick = pygame.joystick.Joystick(0)
            self.joystick.init()
            print(f"Joystick detected: {self.joystick.get_name()}")
        else:
            print("No joystick detected, using keyboard")

        load_controller_mapping()
        self.controller = ControllerHandler(get_controller_mapping())

        self.theme = Theme()
        self.archive_screen = ArchiveScreen(self.theme)
        self.rename_modal = RenameModal(self.theme)

        config = BrowserConfig.from_settings(self.settings)
        storage = LocalStorage(self.settings["storage_root"])
        loader = ProcessLoader(config.loader_commands, storage.host_path)
        self.browser = ArchiveBrowser(config, storage, loader, self.rename_modal)

    def run(self):
        """Run the main application loop."""
        self.browser.open()
        running = True

        while running:
            self.clock.tick(FPS)
            now = pygame.time.get_ticks()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break

                # The rename modal owns the keyboard while it is open
                if self.rename_modal.handle_event(event):
                    self.controller.reset()
                    continue

                command = self.controller.handle_event(event, now)
                if command is not None:
                    self.browser.handle_command(command)

            if not self.rename_modal.active:
                repeat = not self.browser.state.menu_open
                for command in self.controller.poll(now, repeat):
                    self.browser.handle_command(command)

            if self.browser.state.exit_requested:
                running = False

            self.archive_screen.render(
                self.screen, self.browser.state, self.browser.config.tabs
            )
            self.rename_modal.render(self.screen)
            pygame.display.flip()

        pygame.quit()


def main():
    """Entry point for the application."""
    try:
        app = ArchiveApp()
        app.run()
    except Exception as e:
        import traceback

        log_error(f"Application error: {e}", type(e).__name__, traceback.format_exc())
        raise


if __name__ == "__main__":
    main()
