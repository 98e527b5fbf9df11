"""
Custom exceptions for the passwords app.
"""

class PasswordsAppError(Exception):
    """Base exception for the passwords app."""
    pass

class BackendError(PasswordsAppError):
    """A backend operation failed."""
    pass

class GenerationError(BackendError):
    """Password, word or PIN generation errors."""
    pass

class HashingError(BackendError):
    """Digest or encoding errors."""
    pass

class AnalysisError(BackendError):
    """Scoring or structural analysis errors."""
    pass

class ConfigError(PasswordsAppError):
    """Settings file read/write or validation errors."""
    pass

class ClipboardError(PasswordsAppError):
    """Clipboard access failures."""
    pass
