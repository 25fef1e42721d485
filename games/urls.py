from django.urls import path
from . import api_views, views


urlpatterns = [
    path('', views.home, name='home'),
    path('games/<int:pk>/', views.legacy_game_redirect, name='legacy_game'),
    path('games/<slug:slug>/', views.game_play, name='game_play'),

    path('api/games/', api_views.APIGameListView.as_view(), name='api_game_list'),
    path('api/games/<slug:slug>/', api_views.APIGameDetailView.as_view(), name='api_game_detail'),
]
