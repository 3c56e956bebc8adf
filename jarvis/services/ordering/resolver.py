"""Quick-order resolution: chat line in, priced order preview out."""
import logging
from typing import Sequence

from jarvis.services.menu.base import MenuItem
from jarvis.services.ordering.matcher import fuzzy_match_item
from jarvis.services.ordering.models import OrderLine, OrderPreview, StockShortage
from jarvis.services.ordering.parser import parse_natural_language

logger = logging.getLogger(__name__)


def resolve_order(text: str, menu_items: Sequence[MenuItem]) -> OrderPreview:
    """
    Parse a chat line and resolve each item against the orderable menu.

    Only items that are switched on and in stock can match. Names that match
    nothing are reported in ``not_found``; items asked for in a larger
    quantity than the stock are reported in ``shortages`` and left out of
    the order lines and total.
    """
    parsed = parse_natural_language(text)
    available = [item for item in menu_items if item.in_stock]

    lines = []
    not_found = []
    shortages = []
    for parsed_item in parsed:
        match = fuzzy_match_item(parsed_item.raw_name, available)
        if not match.resolved:
            not_found.append(parsed_item.raw_name)
            continue

        menu_item = match.item
        logger.debug(
            f"[JARVIS] '{parsed_item.raw_name}' -> '{menu_item.name}' via {match.tier}"
        )
        if parsed_item.quantity > menu_item.quantity:
            shortages.append(
                StockShortage(
                    name=menu_item.name,
                    requested=parsed_item.quantity,
                    in_stock=menu_item.quantity,
                )
            )
            continue

        lines.append(
            OrderLine(
                name=menu_item.name,
                price=menu_item.price,
                quantity=parsed_item.quantity,
                line_total=menu_item.price * parsed_item.quantity,
            )
        )

    preview = OrderPreview(
        text=text,
        parsed=parsed,
        items=lines,
        not_found=not_found,
        shortages=shortages,
        total=sum(line.line_total for line in lines),
    )
    logger.info(
        f"[JARVIS] Resolved order - {len(lines)} matched, {len(not_found)} not found, "
        f"{len(shortages)} short on stock, total: {preview.total:g}"
    )
    return preview
