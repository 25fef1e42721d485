from django.shortcuts import render
from django.urls import reverse


def mount_point_id(game):
    # the client module looks the element up by exactly this string
    return game.slug


def dispatch(request, game):
    """Render the play page for an already resolved ``game``.

    The page holds a single mount element for the client module; the
    template's autoescaping is the only transformation applied to the id.
    """
    return render(request, 'games/play.html', {
        'game': game,
        'mount_id': mount_point_id(game),
        'api_url': reverse('api_game_detail', args=[game.slug]),
    })
