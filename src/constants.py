"""
Global constants for Archive Browser.
Contains path configuration, display settings, browser limits and timing constants.
"""

import os

# **************************************************************** #
#                       Build Info                                     #
# **************************************************************** #
APP_VERSION = "dev"

# **************************************************************** #
#                       Environment Detection                        #
# **************************************************************** #
DEV_MODE = os.getenv("DEV_MODE", "false").lower() == "true"

# Detect if running from a zip bundle (e.g., .pygame file)
_raw_script_dir = os.path.dirname(os.path.abspath(__file__))
if ".pygame" in _raw_script_dir or ".zip" in _raw_script_dir:
    SCRIPT_DIR = os.path.dirname(
        _raw_script_dir.split(".pygame")[0].split(".zip")[0] + ".pygame"
    )
else:
    SCRIPT_DIR = _raw_script_dir

# **************************************************************** #
#                       Path Configuration                           #
# **************************************************************** #
if DEV_MODE:
    TEMP_LOG_DIR = os.path.join(SCRIPT_DIR, "..", "workdir")
    CONFIG_FILE = os.path.join(SCRIPT_DIR, "..", "workdir", "config.json")
else:
    TEMP_LOG_DIR = SCRIPT_DIR
    CONFIG_FILE = os.path.join(SCRIPT_DIR, "config.json")

os.makedirs(TEMP_LOG_DIR, exist_ok=True)

# **************************************************************** #
#                       Display Settings                             #
# **************************************************************** #
FPS = 30
SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480

# **************************************************************** #
#                       Browser Limits                               #
# **************************************************************** #
MAX_DEPTH = 32  # Directory levels below a tab root
MAX_FILES = 100  # Entries kept per listing
MAX_NAME_LEN = 255
MENU_ITEM_COUNT = 4  # Open, Favorite, Rename, Delete
VISIBLE_ROWS = 4  # Rows that fit on the list screen

# **************************************************************** #
#                       Input Timing                                 #
# **************************************************************** #
LONG_PRESS_MS = 500  # Hold time before OK turns into a long press
NAVIGATION_INITIAL_DELAY = 300  # ms before repeating starts
NAVIGATION_START_RATE = 200  # ms between repeats when starting (slow)
NAVIGATION_MAX_RATE = 60  # ms between repeats at maximum speed (fast)
NAVIGATION_ACCELERATION = 0.90  # Acceleration factor per repeat
