"""
Texte du devis à exporter (copie presse-papier, impression, partage).
"""
import math
from typing import Optional

from config import settings
from models.pricing import Breakdown, DeliveryRequest, QuoteInput
from services.pricing_service import to_amount

SEPARATOR = "-" * 29


def format_money(amount: float, currency: Optional[str] = None) -> str:
    """Ex: 1234.5 → 'GHS 1,234.50'."""
    if amount is None or math.isnan(amount):
        amount = 0.0
    return f"{currency or settings.CURRENCY} {amount:,.2f}"


def _qty(value) -> str:
    return f"{to_amount(value):g}"


def quote_summary(
    body: QuoteInput,
    request: DeliveryRequest,
    breakdown: Breakdown,
    currency: Optional[str] = None,
) -> str:
    money = lambda v: format_money(v, currency)  # noqa: E731

    lines = [
        f"{settings.COMPANY_NAME} – Delivery Quote",
        "",
        f"Delivery type: {request.delivery_type.value}",
        f"Weight: {_qty(body.weight_kg)} kg",
    ]
    if body.use_zones:
        lines.append(f"Zone: {request.zone.name if request.zone else '—'}")
    else:
        lines.append(f"Distance: {_qty(body.distance_km)} km")
    if body.fragile:
        lines.append("Fragile handling: Yes")
    if body.cash_on_delivery:
        lines.append("Cash on Delivery: Yes")

    lines += [
        SEPARATOR,
        f"Base: {money(breakdown.base)}",
        f"Distance: {money(breakdown.distance_cost)}",
        f"Weight: {money(breakdown.weight_cost)}",
    ]
    # Lignes optionnelles masquées quand elles valent 0
    if breakdown.zone_fee:
        lines.append(f"Zone: {money(breakdown.zone_fee)}")
    if breakdown.type_surcharge:
        lines.append(f"Speed: {money(breakdown.type_surcharge)}")
    if breakdown.extras:
        lines.append(f"Extras: {money(breakdown.extras)}")
    lines.append(f"Total: {money(breakdown.total)}")

    return "\n".join(lines)
