"""
PeerShare - Global Constants and Configuration Values

This module defines all constants used throughout PeerShare.
Sizes of cryptographic values, alphabets and configuration defaults
are centralized here.

Author: orpheus497
Version: 1.0.0
"""

import string

# Version Information
VERSION = "1.0.0"
APP_NAME = "PeerShare"
AUTHOR = "orpheus497"

# Cryptography Constants
KEY_SIZE = 32  # 256 bits for AES-256-GCM
NONCE_SIZE = 12  # 96 bits for GCM
TAG_SIZE = 16  # 128-bit GCM authentication tag
MIN_ENVELOPE_SIZE = NONCE_SIZE + TAG_SIZE  # 28 bytes
SALT_SIZE = 16  # 128 bits
ARGON2_TIME_COST = 3
ARGON2_MEMORY_COST = 65536  # 64 MB
ARGON2_PARALLELISM = 1

# Invite Codes
INVITE_CODE_LENGTH = 8
INVITE_CODE_ALPHABET = string.ascii_uppercase + string.digits  # 36 characters

# Transfer Passwords
PASSWORD_LENGTH = 16
PASSWORD_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "!@#$%^&*"

# QR Code Defaults
QR_DEFAULT_SIZE = 256  # pixels, square
QR_DEFAULT_BORDER = 2  # boxes
QR_DEFAULT_ERROR_CORRECTION = "H"
QR_DATA_URL_PREFIX = "data:image/png;base64,"

# File Paths
DEFAULT_DATA_DIR = "~/.peershare"
CONFIG_FILENAME = "config.toml"
LOG_FILENAME = "peershare.log"

# Logging Configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5

# Environment variable prefix for configuration overrides
ENV_PREFIX = "PEERSHARE"
