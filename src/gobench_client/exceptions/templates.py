"""
Standardized error codes and message templates.

Keeps the wording of user-facing errors consistent across dispatchers,
the API gateway and the CLI.
"""


class ErrorCodes:
    """Error codes for programmatic handling."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    MISSING_NAME = "MISSING_NAME"
    MISSING_SCENARIO = "MISSING_SCENARIO"
    MISSING_ID = "MISSING_ID"
    INVALID_SCENARIO_PAYLOAD = "INVALID_SCENARIO_PAYLOAD"
    CLONE_SOURCE_NOT_FOUND = "CLONE_SOURCE_NOT_FOUND"

    API_ERROR = "API_ERROR"
    API_CONNECTION_FAILED = "API_CONNECTION_FAILED"
    API_BAD_RESPONSE = "API_BAD_RESPONSE"
    APPLICATION_NOT_FOUND = "APPLICATION_NOT_FOUND"
    API_UNEXPECTED = "API_UNEXPECTED"

    CONFIG_ERROR = "CONFIG_ERROR"
    CONFIG_INVALID = "CONFIG_INVALID"
    CONFIG_MISSING = "CONFIG_MISSING"
    CONFIG_VALIDATION = "CONFIG_VALIDATION"


class ErrorMessageTemplates:
    """Standardized error message templates for consistent formatting."""

    API_ERROR = "API {operation}: {message}"
    API_CONNECTION_FAILED = "API {operation}: connection to {url} failed - {details}"
    API_BAD_STATUS = "API {operation}: backend answered HTTP {status_code}"
    APPLICATION_NOT_FOUND = "Application {application_id} not found"

    CONFIG_INVALID = "Invalid configuration for '{field}': got {value!r}, expected {expected}"
    CONFIG_MISSING = "Missing required configuration: '{field}'"
