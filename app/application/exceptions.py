class MissingSessionError(ValueError):
    """Raised when a chat message arrives without a session identifier."""
    pass


class ResponderError(RuntimeError):
    """Base class for failures of the natural-language responder."""
    pass


class LLMUpstreamError(ResponderError):
    """Raised when LLM provider fails (timeouts, network errors, service unavailable)."""
    pass


class LLMContractError(ResponderError):
    """Raised when LLM adapter violates contract (empty or unusable response)."""
    pass
