"""Download endpoints and fixed limits for the Liquibase setup action.

Centralizes every URL and constant that may need updating when Liquibase
changes its distribution hosting.
"""

# Community URLs carry a 'v' prefix in the release path, Pro and Secure URLs do not.
DOWNLOAD_URLS = {
    "COMMUNITY_WINDOWS_ZIP": (
        "https://package.liquibase.com/downloads/cli/liquibase/releases/download/v{version}/liquibase-{version}.zip"
    ),
    "COMMUNITY_UNIX": (
        "https://package.liquibase.com/downloads/cli/liquibase/releases/download/v{version}/liquibase-{version}.tar.gz"
    ),
    # Legacy Pro hosting, used for pro/secure editions up to and including 4.33.0
    "PRO_WINDOWS_ZIP": (
        "https://package.liquibase.com/downloads/cli/liquibase/releases/pro/{version}/liquibase-pro-{version}.zip"
    ),
    "PRO_UNIX": (
        "https://package.liquibase.com/downloads/cli/liquibase/releases/pro/{version}/liquibase-pro-{version}.tar.gz"
    ),
    "SECURE_WINDOWS_ZIP": (
        "https://package.liquibase.com/downloads/cli/liquibase/releases/secure/{version}/liquibase-secure-{version}.zip"
    ),
    "SECURE_UNIX": (
        "https://package.liquibase.com/downloads/cli/liquibase/releases/secure/"
        "{version}/liquibase-secure-{version}.tar.gz"
    ),
}

MIN_SUPPORTED_VERSION = "4.32.0"

# Pro/secure versions strictly above this one are served from the secure endpoints
SECURE_URL_BOUNDARY_VERSION = "4.33.0"

# Prerelease tag published only on the secure endpoints
SECURE_RELEASE_TEST_VERSION = "5-secure-release-test"

# Values used to check that a custom URL template yields a well-formed URL
TEMPLATE_SAMPLE_VALUES = {
    "version": "4.32.0",
    "platform": "unix",
    "extension": "tar.gz",
    "edition": "oss",
}

VALIDATION_TIMEOUT_SECONDS = 30.0

DOWNLOAD_TIMEOUT_SECONDS = 300.0

EXECUTABLE_NAME = "liquibase"

LICENSE_PROPERTIES_FILENAME = "liquibase.properties"

# Environment variables holding file paths (the containing directory is created)
LIQUIBASE_FILE_ENV_VARS = (
    "LIQUIBASE_LOG_FILE",
    "LIQUIBASE_OUTPUT_FILE",
    "LIQUIBASE_PROPERTIES_FILE",
)

# Environment variables holding directory paths (rewritten only)
LIQUIBASE_DIRECTORY_ENV_VARS = ("LIQUIBASE_REPORT_PATH",)

LIQUIBASE_PATH_ENV_VARS = LIQUIBASE_FILE_ENV_VARS + LIQUIBASE_DIRECTORY_ENV_VARS
