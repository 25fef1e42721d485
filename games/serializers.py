from django.urls import reverse
from rest_framework import serializers

from .models import Game


class GameSerializer(serializers.ModelSerializer):
    url = serializers.SerializerMethodField()

    class Meta:
        model = Game
        fields = ['id', 'slug', 'title', 'description', 'thumbnail', 'featured', 'url']

    def get_url(self, obj):
        return reverse('game_play', args=[obj.slug])
