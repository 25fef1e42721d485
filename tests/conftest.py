"""
Pytest fixtures shared by the games test suite
"""
import pytest

from games.models import Game


@pytest.fixture
def make_game(db):
    """Factory creating a stored game; keyword arguments override defaults."""
    def _make(**kwargs):
        fields = {
            'title': 'Platformer',
            'slug': 'platformer',
            'description': 'Jump between platforms.',
            'thumbnail': 'https://cdn.example.com/platformer.png',
        }
        fields.update(kwargs)
        return Game.objects.create(**fields)
    return _make


@pytest.fixture
def platformer(make_game):
    return make_game()
