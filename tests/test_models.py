"""
Tests for the Game model and slug generation
"""
import importlib

import pytest
from django.apps import apps
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from games.models import Game, unique_slug


@pytest.mark.django_db
def test_slug_round_trip(platformer):
    stored = Game.objects.get(pk=platformer.pk)
    assert stored.slug == 'platformer'
    assert stored.featured is False


@pytest.mark.django_db
def test_duplicate_slug_rejected_by_database(platformer, make_game):
    with pytest.raises(IntegrityError):
        with transaction.atomic():
            make_game(title='Another Platformer')
    assert Game.objects.filter(slug='platformer').count() == 1


@pytest.mark.django_db
def test_duplicate_slug_rejected_by_validation(platformer):
    game = Game(title='Copy', slug='platformer', description='x', thumbnail='https://example.com/a.png')
    with pytest.raises(ValidationError) as excinfo:
        game.full_clean()
    assert 'slug' in excinfo.value.message_dict


@pytest.mark.django_db
def test_numeric_slug_rejected():
    game = Game(title='2048', slug='2048', description='x', thumbnail='https://example.com/a.png')
    with pytest.raises(ValidationError) as excinfo:
        game.full_clean()
    assert 'slug' in excinfo.value.message_dict


@pytest.mark.django_db
def test_save_fills_missing_slug_from_title(make_game):
    first = make_game(title='Space Race', slug='')
    second = make_game(title='Space Race', slug='')
    assert first.slug == 'space-race'
    assert second.slug == 'space-race-2'


@pytest.mark.django_db
def test_human_chosen_slug_is_kept_verbatim(make_game):
    game = make_game(title='Something Else', slug='my_custom-Slug')
    assert game.slug == 'my_custom-Slug'


@pytest.mark.django_db
def test_unique_slug_avoids_digit_only_base():
    assert unique_slug(Game, '2048') == 'game-2048'


@pytest.mark.django_db
def test_unique_slug_falls_back_for_unsluggable_title():
    assert unique_slug(Game, '!!!') == 'game'


@pytest.mark.django_db
def test_featured_queryset(make_game):
    make_game(title='Puzzle', slug='puzzle', featured=True)
    make_game(title='Racer', slug='racer')
    assert [g.slug for g in Game.objects.featured()] == ['puzzle']


@pytest.mark.django_db
def test_default_ordering_puts_featured_first(make_game):
    make_game(title='Alpha', slug='alpha')
    make_game(title='Zeta', slug='zeta', featured=True)
    assert [g.slug for g in Game.objects.all()] == ['zeta', 'alpha']


@pytest.mark.django_db
def test_absolute_url_uses_slug(platformer):
    assert platformer.get_absolute_url() == '/games/platformer/'


@pytest.mark.django_db
def test_populate_slugs_migration_backfills_blank_slugs(make_game):
    game = make_game(title='Old Game', slug='old-game')
    Game.objects.filter(pk=game.pk).update(slug='')

    migration = importlib.import_module('games.migrations.0003_populate_game_slugs')
    migration.forwards(apps, None)

    game.refresh_from_db()
    assert game.slug == 'old-game'
