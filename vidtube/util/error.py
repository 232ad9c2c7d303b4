"""Utility layer errors.

These signal wiring mistakes at startup, never domain failures, so the
API error handlers do not translate them.
"""


class UtilError(Exception):
    """Base utility error."""


class DependencyInjectionError(UtilError):
    """A DI component could not be resolved to a provider."""

    def __init__(self, component: str, reason: str):
        self.component = component
        super().__init__(f"Component '{component}': {reason}")
