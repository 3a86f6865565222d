"""
Installer Constants

Centralized defaults for paths, repository coordinates and messages.
"""

# Service
SERVICE_NAME = "mini-azaan.service"
SERVICE_DESCRIPTION = "Mini Azaan Service"
SERVICE_RESTART_SEC = 5

# Install layout
APP_ROOT = "/opt/mini-azaan"
APP_DIR = "/opt/mini-azaan/app"
ETC_DIR = "/etc/mini-azaan"
ETC_CONFIG = "/etc/mini-azaan/config.yml"
BIN_LINK = "/usr/local/bin/mini-azaan"
SYSTEMD_UNIT_DIR = "/etc/systemd/system"
FIRMWARE_USER_DATA = "/boot/firmware/user-data"
LOG_DIR = "/var/log/mini-azaan-installer"

# Repository (private, cloned over a deploy key)
REPO_URL = "git@github.com:zukkybaig/mini-azaan.git"
GIT_REF = "main"
REMOTE_HOST = "github.com"

# Identity
DEFAULT_RUN_USER = "pi"
SSH_KEY_NAME = "id_ed25519"
SSH_KEY_ALGORITHM = "ed25519"
KEY_COMMENT_PREFIX = "mini-azaan"

# Files expected in the cloned repository
REQUIREMENTS_FILE = "requirements.txt"
CONFIG_TEMPLATE = "config.yml"
MANAGE_SCRIPT = "manage.sh"
ENTRY_POINT = "main.py"
VENV_DIR = ".venv"

# Hostname
DEFAULT_HOSTNAME = "mini-azaan"

# Health check
JOURNAL_LINES = 60

# Permissions
SSH_DIR_MODE = 0o700
SSH_CONFIG_MODE = 0o600
KNOWN_HOSTS_MODE = 0o644
SEEDED_CONFIG_MODE = 0o644

# OS packages
OS_PACKAGES = [
    "git",
    "openssh-client",
    "openssh-server",
    "python3",
    "python3-venv",
    "python3-pip",
    "mpg123",
    "alsa-utils",
    "avahi-daemon",
]

MDNS_SERVICE = "avahi-daemon"

# Messages
DEPLOY_KEY_INSTRUCTIONS = [
    "Add this public key to GitHub:",
    "Repo -> Settings -> Deploy keys -> Add deploy key",
    "Tip: read-only is fine",
]
CLONE_FAILED_HINT = (
    "If SSH auth is fine, this is usually permissions or deploy key not added."
)
WAIT_FOR_DEPLOY_KEY = "Press Enter once you've added the deploy key"
