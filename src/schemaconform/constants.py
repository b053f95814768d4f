"""Shared constants for the schemaconform harness."""

HARNESS_NAME = "schemaconform"
HARNESS_VERSION = "1.0.0"

ANSI_RESET = "\033[0m"
ANSI_GREEN = "\033[32m"
ANSI_RED = "\033[31m"
ANSI_YELLOW = "\033[33m"
ANSI_BOLD = "\033[1m"

EXIT_SUCCESS = 0
EXIT_CONFORMANCE_FAIL = 1
EXIT_CONFIG_ERROR = 2

MESSAGE_SEPARATOR = " | "
SCHEMA_PLACEHOLDER_INSTANCE = ""
SCHEMA_HARD_ERROR_PREFIX = "ENGINE ERROR IN SCHEMA CHECK: "
DATA_HARD_ERROR_PREFIX = "ENGINE ERROR IN DATA CHECK: "

SUMMARY_SUCCEED_LABEL = "Total Succeed"
SUMMARY_FAIL_LABEL = "Total Fail"

ENV_PREFIX = "SCHEMACONFORM_"
DEFAULT_LOG_LEVEL = "WARNING"

__all__ = [
    "HARNESS_NAME",
    "HARNESS_VERSION",
    "ANSI_RESET",
    "ANSI_GREEN",
    "ANSI_RED",
    "ANSI_YELLOW",
    "ANSI_BOLD",
    "EXIT_SUCCESS",
    "EXIT_CONFORMANCE_FAIL",
    "EXIT_CONFIG_ERROR",
    "MESSAGE_SEPARATOR",
    "SCHEMA_PLACEHOLDER_INSTANCE",
    "SCHEMA_HARD_ERROR_PREFIX",
    "DATA_HARD_ERROR_PREFIX",
    "SUMMARY_SUCCEED_LABEL",
    "SUMMARY_FAIL_LABEL",
    "ENV_PREFIX",
    "DEFAULT_LOG_LEVEL",
]
