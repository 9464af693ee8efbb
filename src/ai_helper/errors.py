from __future__ import annotations


class MissingCredentialError(RuntimeError):
    """
    Raised before any network call when a backend has no API key to send.
    """

    def __init__(self, variable: str = "ANTHROPIC_API_KEY"):
        self.variable = variable
        super().__init__(f"{variable} environment variable not set")
