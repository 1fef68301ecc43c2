from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("players", "0001_initial"),
    ]

    operations = [
        migrations.AlterField(
            model_name="player",
            name="region",
            field=models.CharField(blank=True, default="", max_length=32),
        ),
    ]
