from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Player",
            fields=[
                ("puuid", models.CharField(max_length=128, primary_key=True, serialize=False)),
                ("game_name", models.CharField(blank=True, db_index=True, default="", max_length=64)),
                ("tag_line", models.CharField(blank=True, default="", max_length=16)),
                ("region", models.CharField(blank=True, default="", max_length=8)),
                (
                    "last_refreshed_at",
                    models.DateTimeField(
                        blank=True,
                        db_index=True,
                        help_text="When the last reconciliation pass started.",
                        null=True,
                    ),
                ),
            ],
            options={
                "verbose_name": "Player",
                "verbose_name_plural": "Players",
                "db_table": "players",
                "ordering": ["-last_refreshed_at"],
            },
        ),
    ]
