from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / 'fixtures'


@pytest.fixture
def dracula_minttyrc() -> str:
    return (FIXTURES_DIR / 'Dracula.minttyrc').read_text(encoding='utf-8')


@pytest.fixture
def dracula_itermcolors() -> bytes:
    return (FIXTURES_DIR / 'Dracula.itermcolors').read_bytes()


@pytest.fixture
def dracula_mintty_yaml() -> str:
    """Reference Alacritty output for Dracula.minttyrc."""
    return (FIXTURES_DIR / 'Dracula.minttyrc.yml').read_text(encoding='utf-8')


@pytest.fixture
def dracula_iterm_yaml() -> str:
    """Reference Alacritty output for Dracula.itermcolors."""
    return (FIXTURES_DIR / 'Dracula.itermcolors.yml').read_text(encoding='utf-8')
