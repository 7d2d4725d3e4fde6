class AutomationError(Exception):
    """Base class for harness failures that should fail the scenario."""


class NoSuchElementError(AutomationError):
    """The driver found nothing for a selector."""

    def __init__(self, selector: str):
        super().__init__(f"No element matches selector '{selector}'")
        self.selector = selector


class ElementNotFoundError(AutomationError):
    """A required element is entirely absent from the page."""


class InvalidStateError(AutomationError):
    """The page is not in the state an operation requires."""


class CredentialsError(AutomationError):
    """Credential file is missing or malformed."""
