"""
Slug -> Game lookup used by both the HTML play page and the JSON API.

The match is exact: no case folding and no whitespace trimming. Slug
uniqueness is enforced by the database, so a lookup returns at most one row.
"""

import logging

from .exceptions import GameNotFound
from .models import Game

logger = logging.getLogger(__name__)


def resolve(slug):
    if not slug:
        raise GameNotFound(slug)
    try:
        return Game.objects.get(slug=slug)
    except Game.DoesNotExist:
        logger.debug("game lookup missed for slug %r", slug)
        raise GameNotFound(slug) from None
