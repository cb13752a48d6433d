# translator/errors.py


class TranslationError(RuntimeError):
    """A provider call failed or returned nothing usable."""


class ProviderNotConfigured(ValueError):
    """Provider selected but its key / URL is missing, or translation is disabled."""


class ProviderNotSupported(ValueError):
    """Unknown provider name."""
