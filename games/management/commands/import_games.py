import json
import logging

from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from games.models import Game

logger = logging.getLogger(__name__)

FIELDS = ('title', 'description', 'thumbnail', 'featured')


class Command(BaseCommand):
    help = 'Create or update games from a JSON file (a list of objects keyed by slug)'

    def add_arguments(self, parser):
        parser.add_argument('path', help='JSON file to import')
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Validate every entry without writing to the database'
        )

    def handle(self, *args, **options):
        path = options['path']
        dry_run = options['dry_run']

        try:
            with open(path, 'r', encoding='utf-8') as f:
                entries = json.load(f)
        except OSError as e:
            raise CommandError(f"Cannot read {path}: {e}")
        except ValueError as e:
            raise CommandError(f"Invalid JSON in {path}: {e}")

        if not isinstance(entries, list):
            raise CommandError("Expected a JSON array of game objects.")

        created = updated = failed = 0
        for idx, data in enumerate(entries):
            label = f"#{idx}"
            if isinstance(data, dict):
                label = data.get('slug') or data.get('title') or label
            try:
                was_created = self._import_one(data, dry_run)
            except (ValidationError, ValueError, TypeError) as e:
                failed += 1
                logger.warning("import of game %s failed: %s", label, e)
                self.stdout.write(self.style.ERROR(f"Error importing {label}: {e}"))
                continue
            if was_created:
                created += 1
            else:
                updated += 1

        prefix = "[dry run] " if dry_run else ""
        self.stdout.write(self.style.SUCCESS(
            f"{prefix}{created} created, {updated} updated, {failed} failed."
        ))

    def _import_one(self, data, dry_run):
        if not isinstance(data, dict):
            raise TypeError("entry is not an object")
        slug = data.get('slug')
        if not slug:
            raise ValueError("entry has no slug")

        game = Game.objects.filter(slug=slug).first()
        created = game is None
        if created:
            game = Game(slug=slug)
        for field in FIELDS:
            if field in data:
                setattr(game, field, data[field])

        game.full_clean()
        if not dry_run:
            with transaction.atomic():
                game.save()
        return created
