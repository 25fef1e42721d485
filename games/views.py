import logging

from django.http import Http404
from django.shortcuts import render, get_object_or_404, redirect

from .dispatcher import dispatch
from .exceptions import GameNotFound
from .models import Game
from .resolver import resolve

logger = logging.getLogger(__name__)


def _is_htmx(request):
    return request.headers.get('HX-Request') == 'true'


def home(request):
    games = Game.objects.all()
    q = request.GET.get('q')
    featured = request.GET.get('featured')

    if q:
        games = games.filter(title__icontains=q)
    if featured == '1':
        games = games.featured()

    context = {
        'games': games,
        'q': q or '',
        'featured': featured == '1',
    }

    if _is_htmx(request):
        return render(request, 'games/partials/game_grid.html', context)
    return render(request, 'games/home.html', context)


def game_play(request, slug):
    try:
        game = resolve(slug)
    except GameNotFound as exc:
        raise Http404(str(exc))
    return dispatch(request, game)


def legacy_game_redirect(request, pk):
    # numeric links from before slugs existed
    game = get_object_or_404(Game, pk=pk)
    logger.info("redirecting legacy game url id=%s to slug %r", pk, game.slug)
    return redirect(game, permanent=True)
