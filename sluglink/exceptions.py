class SlugLinkError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:sluglink_error'


class InvalidURLError(SlugLinkError):
    """Raised when a user-supplied URL fails validation."""

    error_code = 'validation:invalid_url'


class SlugGenerationError(SlugLinkError):
    """Raised when the slug generator can't propose a usable slug."""

    error_code = 'generator:slug_generation_error'


class DeadlineExceededError(SlugLinkError):
    """Raised when a request runs out of time before finishing."""

    error_code = 'request:deadline_exceeded'


class ConfigurationError(SlugLinkError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
