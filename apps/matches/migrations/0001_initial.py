import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("players", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="MatchRecord",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("match_id", models.CharField(db_index=True, max_length=32)),
                ("game_mode", models.CharField(blank=True, default="", max_length=32)),
                ("champion_name", models.CharField(blank=True, max_length=64, null=True)),
                ("kills", models.PositiveSmallIntegerField(default=0)),
                ("deaths", models.PositiveSmallIntegerField(default=0)),
                ("assists", models.PositiveSmallIntegerField(default=0)),
                ("win", models.BooleanField(blank=True, null=True)),
                (
                    "game_creation",
                    models.BigIntegerField(
                        db_index=True,
                        help_text="Epoch milliseconds of match creation, as reported upstream.",
                    ),
                ),
                (
                    "player",
                    models.ForeignKey(
                        db_column="puuid",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="match_records",
                        to="players.player",
                        to_field="puuid",
                    ),
                ),
            ],
            options={
                "verbose_name": "Match record",
                "verbose_name_plural": "Match records",
                "db_table": "matches",
                "ordering": ["-game_creation"],
                "indexes": [
                    models.Index(fields=["player", "-game_creation"], name="match_player_recent_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("match_id", "player"), name="match_record_unique_participant"),
                ],
            },
        ),
    ]
