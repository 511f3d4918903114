"""Custom exceptions for constitution_reader."""


class ConstitutionReaderError(Exception):
    """Base exception for constitution_reader operations."""


class DocumentLoadError(ConstitutionReaderError):
    """Error while loading or validating the document tree."""


class InterpretationError(ConstitutionReaderError):
    """Error from the AI interpretation service.

    Subclasses split configuration problems from transient failures so callers
    can present them differently.
    """

    kind = "error"


class ConfigurationError(InterpretationError):
    """The interpretation service is not usable with the current settings."""

    kind = "configuration"


class MissingCredentialError(ConfigurationError):
    """No API key is configured."""


class ClientInitError(ConfigurationError):
    """The SDK client could not be constructed."""


class TransientServiceError(InterpretationError):
    """A single request failed; a later attempt may succeed."""

    kind = "transient"


class ServiceUnavailableError(TransientServiceError):
    """The API or transport returned an error."""


class EmptyResponseError(TransientServiceError):
    """The API answered without any text."""


class InterpretationInProgressError(ConstitutionReaderError):
    """An interpretation for the same article is already pending."""


# Name used by callers that only care about "the AI call failed".
ServiceError = InterpretationError
