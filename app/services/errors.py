class ResearchError(Exception):
    """Base class for failures that end a lookup with an error message."""

    status_code = 500
    default_message = "An unexpected error occurred."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.message}


class MissingInputError(ResearchError):
    status_code = 400
    default_message = "Please provide at least a brand, model, serial number, or description."


class EmptyResponseError(ResearchError):
    """The model replied without any text block."""

    default_message = "Failed to get a response from the research engine."


class ResultParseError(ResearchError):
    """The model's text was not valid JSON, even after fence stripping."""

    default_message = "Failed to parse research results. Please try again."


class UpstreamError(ResearchError):
    """Transport, auth or API failure from the model call."""
