"""Shared error types for transcript conversion."""


class TranscriptError(Exception):
    """Base error for all transcript conversion failures."""


class InvalidTranscript(TranscriptError):
    """The transcript violates an invariant the provider payload depends on."""

    LEADING_USER = "conversation must start with a user message after any system messages"
    MULTIPLE_SYSTEM = "multiple system messages are not supported"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)
