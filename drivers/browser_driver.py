from typing import Protocol


class ElementHandle(Protocol):
    """What page objects may do with a located element."""

    @property
    def text(self) -> str: ...

    def click(self) -> None: ...

    def send_keys(self, text: str) -> None: ...

    def clear(self) -> None: ...

    def is_displayed(self) -> bool: ...

    def is_enabled(self) -> bool: ...


class BrowserDriver(Protocol):
    """
    Browser capabilities page objects depend on. Selectors are CSS.

    find_element raises NoSuchElementError when nothing matches;
    find_elements returns an empty list instead.
    """

    @property
    def url(self) -> str: ...

    def navigate(self, url: str) -> None: ...

    def find_element(self, selector: str) -> ElementHandle: ...

    def find_elements(self, selector: str) -> list[ElementHandle]: ...
