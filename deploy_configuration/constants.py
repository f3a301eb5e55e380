"""
Deploy Configuration Constants

Centralized defaults for configuration values.
"""

# Files and folders left out of the build archive (`tar --exclude=`).
# A leading `./` anchors to the project root, `*.ext` matches anywhere.
DEFAULT_DEPLOY_EXCLUDE = (
    "./.git",
    "./.github",
    "./deploy.php",
    "./.gitlab-ci.yml",
    "./Jenkinsfile",
    ".DS_Store",
    ".idea",
    ".gitignore",
    ".editorconfig",
    "*.scss",
    "*.less",
    "*.jsx",
    "*.ts",
)

# Scalar defaults
DEFAULT_PHP_VERSION = "php"
DEFAULT_PUBLIC_FOLDER = "pub"
DEFAULT_BUILD_ARCHIVE_FILE = "build/build.tgz"
DEFAULT_LOG_DIR = "var/log"

# Default stage configuration
DEFAULT_STAGE_USERNAME = "app"

# Default platform configuration sources
DEFAULT_NGINX_FOLDER = "etc/nginx"
DEFAULT_SUPERVISOR_FOLDER = "etc/supervisor"
DEFAULT_CRON_FILE = "etc/cron"
DEFAULT_VARNISH_CONFIG_FILE = "etc/varnish.vcl"

# Default service versions
DEFAULT_VARNISH_VERSION = "6.0"
DEFAULT_REDIS_VERSION = "7.0"
DEFAULT_REDIS_MEMORY = "1024M"
DEFAULT_RABBITMQ_VERSION = "3.12"

# Warning Messages
DEPRECATED_DAAS_FIELD = (
    "'{field}' is deprecated, DaaS is no longer supported and this value is ignored"
)
