class LinkShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:linkshortener_error'


class ValidationError(LinkShortenerError):
    """Raised when a shorten request carries malformed input."""

    error_code = 'request:validation_error'


class ConflictError(LinkShortenerError):
    """Raised when a requested custom shortcode is already reserved."""

    error_code = 'request:conflict_error'


class ExhaustionError(LinkShortenerError):
    """Raised when no free shortcode was found within the attempt budget."""

    error_code = 'registry:exhaustion_error'


class ConfigurationError(LinkShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
