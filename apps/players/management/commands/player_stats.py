# apps/players/management/commands/player_stats.py
# ================================================================================
"""
Django management command that runs the stats pipeline for one Riot ID.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

import orjson
import structlog
from django.core.management.base import BaseCommand, CommandError, CommandParser

from apps.core.exceptions import RiotStatsError
from apps.players.services.player_stats_service import PlayerStatsService

if TYPE_CHECKING:
    from apps.core.datatype import PlayerStatsPayload

log = structlog.get_logger(__name__)


class Command(BaseCommand):
    """Resolves a Riot ID, reconciles its recent matches and prints the aggregates."""

    help = "Fetches (or serves from the local store) recent match stats for a Riot ID."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("game_name", help="Riot ID display name, e.g. 'Faker'.")
        parser.add_argument("tag_line", help="Riot ID tag, without the '#'.")
        parser.add_argument("region", help="Platform region, e.g. 'kr1' or 'euw1'.")
        parser.add_argument("--json", action="store_true", help="Output the result as raw JSON.")

    def handle(self, *args: Any, **options: Any) -> None:
        try:
            payload = asyncio.run(self._handle_async(options["game_name"], options["tag_line"], options["region"]))
        except KeyboardInterrupt:
            self.stderr.write(self.style.WARNING("\nOperation cancelled by user."))
            return
        except RiotStatsError as e:
            raise CommandError(str(e)) from e
        except Exception as e:
            log.exception("player_stats command failed unexpectedly.", exc_info=e)
            msg = f"Command failed with an unhandled exception: {e}"
            raise CommandError(msg) from e

        if options["json"]:
            self.stdout.write(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode())
        else:
            self._pretty_print(options["game_name"], options["tag_line"], payload)

    async def _handle_async(self, game_name: str, tag_line: str, region: str) -> PlayerStatsPayload:
        async with PlayerStatsService.from_settings() as service:
            return await service.get_player_stats(game_name, tag_line, region)

    def _pretty_print(self, game_name: str, tag_line: str, payload: PlayerStatsPayload) -> None:
        style = self.style
        self.stdout.write(style.MIGRATE_HEADING("\n" + "=" * 30 + f"\n  {game_name}#{tag_line}\n" + "=" * 30))
        if "message" in payload:
            self.stdout.write(f"  {style.WARNING(payload['message'])}")
        self.stdout.write(f"  Matches : {len(payload['matches'])}")
        self.stdout.write(f"  Wins    : {style.SUCCESS(str(payload['overallWins']))}")
        self.stdout.write(f"  Losses  : {style.ERROR(str(payload['overallLosses']))}")
        for champion in payload["championWinRates"]:
            self.stdout.write(
                f"  {champion['championName']:<14}: {champion['wins']}/{champion['gamesPlayed']} wins",
            )
        self.stdout.write(style.MIGRATE_HEADING("=" * 30))
