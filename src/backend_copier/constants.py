"""Build layout constants."""

# Build output produced by ./build.sh in the project root
DIST_DIR_NAME = "dist"
ONEDIR_NAME = "main"
CONFIG_DIR_NAME = "config"

# Packaging directory consumed by the frontend bundler
FRONTEND_DIR_NAME = "frontend"
BACKEND_DIR_NAME = "backend"

BUILD_COMMAND = "./build.sh"

# Environment overrides
ENV_ROOT = "BACKEND_COPIER_ROOT"
ENV_DIST_DIR = "BACKEND_COPIER_DIST_DIR"
ENV_DEST_DIR = "BACKEND_COPIER_DEST_DIR"
ENV_LOG_LEVEL = "BACKEND_COPIER_LOG_LEVEL"
ENV_LOG_FORMAT = "BACKEND_COPIER_LOG_FORMAT"

BYTES_PER_MB = 1024 * 1024
