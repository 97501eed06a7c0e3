# services/normalize.py
from models import DrawData
from services.dates import decode_alc_date


def normalize_draw(draw: DrawData) -> DrawData:
    """Copy of the record with its upstream-encoded dates rewritten to ISO-8601."""
    next_draw = draw.next_draw
    if next_draw is not None:
        next_draw = next_draw.model_copy(update={"draw_date": decode_alc_date(next_draw.draw_date)})

    return draw.model_copy(update={
        "draw_date": decode_alc_date(draw.draw_date),
        "last_edit_date": decode_alc_date(draw.last_edit_date),
        "next_draw": next_draw,
    })
