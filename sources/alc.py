# sources/alc.py
import logging
from typing import Any, AsyncIterator, List

import httpx
from pydantic import TypeAdapter

from models import DrawData, DrawDatesResponse, Game
from settings import settings

logger = logging.getLogger(__name__)

_DRAWS = TypeAdapter(List[DrawData])


async def get_client() -> AsyncIterator[httpx.AsyncClient]:
    """One upstream client per inbound request (FastAPI dependency)."""
    async with httpx.AsyncClient(base_url=settings.ALC_API_BASE, timeout=settings.UPSTREAM_TIMEOUT) as cli:
        yield cli


async def _get(cli: httpx.AsyncClient, path: str) -> Any:
    logger.debug("GET %s", path)
    r = await cli.get(path)
    r.raise_for_status()
    return r.json()


async def fetch_latest_all(cli: httpx.AsyncClient) -> List[DrawData]:
    return _DRAWS.validate_python(await _get(cli, "latest"))


async def fetch_latest_for_game(cli: httpx.AsyncClient, game: Game) -> List[DrawData]:
    return _DRAWS.validate_python(await _get(cli, f"latest/{game.value}"))


async def fetch_draw_dates(cli: httpx.AsyncClient, game: Game) -> List[str]:
    """Raw upstream draw dates, most recent first. History depth is the provider's choice."""
    payload = DrawDatesResponse.model_validate(await _get(cli, f"draw_dates/{game.value}"))
    return [d.draw_date for d in payload.draw_dates]


async def fetch_draw(cli: httpx.AsyncClient, game: Game, date: str) -> List[DrawData]:
    return _DRAWS.validate_python(await _get(cli, f"draw/{game.value}/{date}"))
