from django.apps import AppConfig


class PlayersConfig(AppConfig):
    """
    App configuration for the 'players' app.
    Owns tracked Riot accounts and the stats reconciliation pipeline.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.players"  # Full dotted path to the app
    verbose_name = "Players"
