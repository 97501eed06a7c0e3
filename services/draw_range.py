# services/draw_range.py
import asyncio
import logging
import math
from typing import List

import httpx

from errors import ApiError
from models import DrawData, Game
from services.dates import to_calendar_date
from services.normalize import normalize_draw
from sources.alc import fetch_draw, fetch_draw_dates

logger = logging.getLogger(__name__)


def parse_count(value: str) -> int:
    """'5' or '5.0' -> 5. Anything that is not a whole number is rejected."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        number = math.nan
    if not math.isfinite(number) or not number.is_integer():
        raise ApiError("Invalid draw count! Please use an integer value.")
    if number < 0:
        raise ApiError("Invalid draw count! Please use a non-negative integer value.")
    return int(number)


async def get_draw_dates(cli: httpx.AsyncClient, game: Game) -> List[str]:
    return [to_calendar_date(d) for d in await fetch_draw_dates(cli, game)]


async def first_draw(cli: httpx.AsyncClient, game: Game, date: str) -> DrawData:
    draws = await fetch_draw(cli, game, date)
    if not draws:
        raise ApiError(f"No {game.value} draw found.", status_code=404)
    return draws[0]


async def fetch_draw_range(cli: httpx.AsyncClient, game: Game, count: int) -> List[DrawData]:
    """
    The `count` most recent draws of `game`, newest first.

    One upstream request per draw date, all in flight at once; the first
    failure fails the whole call.
    """
    dates = await get_draw_dates(cli, game)
    if count > len(dates):
        raise ApiError(f"Invalid draw count! There are {len(dates)} {game.value} draws available.")

    wanted = dates[:count]
    logger.info("fetching %d %s draws", len(wanted), game.value)
    draws = await asyncio.gather(*(first_draw(cli, game, d) for d in wanted))
    return [normalize_draw(d) for d in draws]
