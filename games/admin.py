from django.contrib import admin
from .models import Game


@admin.register(Game)
class GameAdmin(admin.ModelAdmin):
    list_display = ('title', 'slug', 'featured', 'updated_at')
    list_editable = ('featured',)
    search_fields = ('title', 'slug')
    list_filter = ('featured',)
    prepopulated_fields = {"slug": ("title",)}
    readonly_fields = ('created_at', 'updated_at')


admin.site.site_header = "Arcade administration"
