class ConfigError(RuntimeError):
    """Startup configuration is missing or invalid."""


class UpstreamError(RuntimeError):
    """The Gemini call failed or returned something unusable."""

    def __init__(self, message: str, model_name: str = ""):
        super().__init__(message)
        self.model_name = model_name
