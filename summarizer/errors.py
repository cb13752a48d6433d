# summarizer/errors.py


class SummarizationError(RuntimeError):
    pass


class ProviderNotConfigured(ValueError):
    pass


class ProviderNotSupported(ValueError):
    pass
