from django.db import migrations
from django.db.models import Q

from games.models import unique_slug


def forwards(apps, schema_editor):
    Game = apps.get_model('games', 'Game')
    # one row at a time so each new slug is visible to the next uniqueness check
    for game in Game.objects.filter(Q(slug__isnull=True) | Q(slug='')).order_by('id'):
        game.slug = unique_slug(Game, game.title, exclude_pk=game.pk)
        game.save(update_fields=['slug'])


def backwards(apps, schema_editor):
    Game = apps.get_model('games', 'Game')
    Game.objects.update(slug=None)


class Migration(migrations.Migration):

    dependencies = [
        ('games', '0002_game_slug'),
    ]

    operations = [
        migrations.RunPython(forwards, backwards),
    ]
