"""
Application Errors

FLOW OVERVIEW
- TodoAppError: base class for everything raised by the application.
- ValidationError: rejected user input (empty title). Never surfaced to users;
  the service drops invalid submissions silently.
- StorageError: the database was unreachable or refused the statement.
  Propagated to the caller and rendered as a generic failure page.
- ConfigurationError: required settings missing at startup.
"""


class TodoAppError(Exception):
    """Base class for application errors"""


class ValidationError(TodoAppError):
    """Raised when user input fails validation"""


class StorageError(TodoAppError):
    """Raised when the record store cannot complete an operation"""

    def __init__(self, operation, message=None):
        self.operation = operation
        super().__init__(message or f"Storage operation '{operation}' failed")


class ConfigurationError(TodoAppError):
    """Raised when the application is started without required settings"""
