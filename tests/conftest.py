import pytest
from rich.console import Console

import radix_menu


@pytest.fixture(autouse=True)
def plain_consoles(monkeypatch):
    """Render menu output without styles so tests can match on text."""
    monkeypatch.setattr(radix_menu, "console", Console(highlight=False, color_system=None, width=200))
    monkeypatch.setattr(
        radix_menu, "err_console",
        Console(stderr=True, highlight=False, color_system=None, width=200),
    )
