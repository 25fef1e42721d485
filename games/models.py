from django.core.exceptions import ValidationError
from django.db import models
from django.utils.text import slugify


def validate_not_numeric(value):
    # all-digit paths are routed to the legacy id redirect
    if value.isdigit():
        raise ValidationError("Slug cannot consist of digits only.")


def unique_slug(model, title, exclude_pk=None):
    """Slug derived from ``title`` that no other row of ``model`` uses.

    Works with historical models too, so the data migration shares it.
    """
    base = slugify(title) or 'game'
    if base.isdigit():
        base = f"game-{base}"
    slug = base
    idx = 1
    while model.objects.filter(slug=slug).exclude(pk=exclude_pk).exists():
        idx += 1
        slug = f"{base}-{idx}"
    return slug


class GameQuerySet(models.QuerySet):
    def featured(self):
        return self.filter(featured=True)


class Game(models.Model):
    title = models.CharField(max_length=200)
    slug = models.SlugField(max_length=220, unique=True, validators=[validate_not_numeric],
                            help_text='Used in play URLs and as the page mount point id')
    description = models.TextField()
    thumbnail = models.URLField(help_text='Thumbnail image URL')
    featured = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = GameQuerySet.as_manager()

    class Meta:
        ordering = ['-featured', 'title']

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = unique_slug(self.__class__, self.title, exclude_pk=self.pk)
        super().save(*args, **kwargs)

    def get_absolute_url(self):
        from django.urls import reverse
        return reverse('game_play', args=[self.slug])
