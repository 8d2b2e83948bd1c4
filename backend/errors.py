# errors.py
# provider boundary failures. Only providers/ raises these; handlers turn
# them into empty results with a reason.


class ProviderError(Exception):
    def __init__(self, provider: str, detail: str):
        super().__init__(f"{provider}: {detail}")
        self.provider = provider
        self.detail = detail


class UpstreamUnavailable(ProviderError):
    """Transport failure, timeout, or an unusable status from the provider."""


class NotFound(ProviderError):
    """Provider answered, but the requested entity does not exist."""


class MalformedPayload(ProviderError):
    """Provider answered with a body that is not a JSON object."""
