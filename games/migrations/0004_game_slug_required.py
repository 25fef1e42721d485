from django.db import migrations, models

import games.models


class Migration(migrations.Migration):

    dependencies = [
        ('games', '0003_populate_game_slugs'),
    ]

    operations = [
        migrations.AlterField(
            model_name='game',
            name='slug',
            field=models.SlugField(help_text='Used in play URLs and as the page mount point id', max_length=220, unique=True, validators=[games.models.validate_not_numeric]),
        ),
    ]
