"""Global constants for plugin-deploy"""

APP_NAME = "plugin-deploy"
LOG_FORMAT = "%(name)s: %(message)s"

# Project layout (relative to project root)
DEFAULT_ENV_FILE = ".env"
DEFAULT_MANIFEST_FILE = "manifest.json"
DEFAULT_DIST_DIR = "dist"

# Configuration keys
ENV_INSTALL_ROOT = "VAULT_PATH"
MANIFEST_ID_FIELD = "id"

# Install layout: <install root>/<HOST_CONFIG_DIR>/<PLUGINS_DIR>/<plugin id>
HOST_CONFIG_DIR = ".obsidian"
PLUGINS_DIR = "plugins"

# Files managed inside the output directory
LIVE_MARKER_FILE = ".hotreload"
USER_DATA_FILE = "data.json"

# Mode tokens accepted on the command line
MODE_TOKEN_LINK = "dev"
MODE_TOKEN_COPY = "build"
MODE_ALIASES = {
    "link": MODE_TOKEN_LINK,
    "copy": MODE_TOKEN_COPY,
}

# Process exit codes
EXIT_OK = 0
EXIT_FAILURE = 1


# Error codes
class ErrorCode:
    CONFIGURATION_ERROR = "PD001"
    MANIFEST_ERROR = "PD002"
    FILESYSTEM_ERROR = "PD003"
    LINK_CREATION_FAILED = "PD004"
    COPY_FAILED = "PD005"


# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ARROW = "→"
EMOJI_LINK = "🔗"

# Messages templates
MSG_LINK_CREATED = f"{EMOJI_LINK} Link created: {{source}} {EMOJI_ARROW} {{plugin_id}}"
MSG_LINK_REUSED = f"{EMOJI_LINK} Link already in place: {{source}} {EMOJI_ARROW} {{plugin_id}}"
MSG_COPY_DONE = f"{EMOJI_SUCCESS} Copied {{source}} {EMOJI_ARROW} {{plugin_id}} ({{count}} entries: {{names}})"
MSG_ENV_MISSING = "{env_file} not found, skipping deployment"
MSG_IDENTICAL_PATH = "Target directory is the output directory itself, nothing to deploy"
