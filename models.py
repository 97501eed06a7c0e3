from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict

from errors import ApiError


class Game(str, Enum):
    HitorMiss = "HitorMiss"
    DailyGrand = "DailyGrand"
    Lotto4 = "Lotto4"
    PokerLotto = "PokerLotto"
    ShaBam = "ShaBam"
    Pik4 = "Pik4"
    SalsaBingo = "SalsaBingo"
    LottoMax = "LottoMax"
    Lotto649 = "Lotto649"
    KenoAtlantic = "KenoAtlantic"
    Bucko = "Bucko"
    Atlantic49 = "Atlantic49"


VALID_GAMES = [g.value for g in Game]


def parse_game(value: str) -> Game:
    try:
        return Game(value)
    except ValueError:
        raise ApiError(f"Invalid game! Please use one of: {', '.join(VALID_GAMES)}.") from None


# Upstream payloads are passed through as-is: only the date fields are typed,
# everything else is carried untouched and unknown keys are kept.
class _Upstream(BaseModel):
    model_config = ConfigDict(extra="allow")


class NextDraw(_Upstream):
    draw_date: str


class DrawData(_Upstream):
    draw_date: str
    last_edit_date: str
    next_draw: Optional[NextDraw] = None

    # draw: providerdrawId, bonus_number, prize_payouts, tag, tag_prize_payouts, winning_numbers
    draw: Any = None
    game: Any = None
    guaranteed_draws: Any = None
    promotional_draws: Any = None
    standard_balls: Any = None
    jackpot_balls: Any = None
    jackpot_ball_drawn: Any = None


class DrawDate(_Upstream):
    draw_date: str


class DrawDatesResponse(_Upstream):
    draw_dates: List[DrawDate] = []
