"""
games/api_views.py

Read-only JSON API consumed by the client module mounted on play pages.

Endpoints:
  GET /api/games/              (optional ?featured=1)
  GET /api/games/<slug>/
"""

from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import GameNotFound
from .models import Game
from .resolver import resolve
from .serializers import GameSerializer


class PublicAPIView(APIView):
    permission_classes = [AllowAny]


class APIGameListView(PublicAPIView):
    def get(self, request):
        games = Game.objects.all()
        if request.query_params.get('featured') == '1':
            games = games.featured()
        return Response(GameSerializer(games, many=True).data)


class APIGameDetailView(PublicAPIView):
    def get(self, request, slug):
        try:
            game = resolve(slug)
        except GameNotFound as exc:
            raise NotFound(str(exc))
        return Response(GameSerializer(game).data)
