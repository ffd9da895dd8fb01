"""
Service de tarification livraison.

Formule :
  sous_total = base + (distance_effective × per_km) + (poids × per_kg)
             + supplément vitesse + forfait zone + extras (fragile, COD)
  total      = sous_total arrondi au 0.50 le plus proche (demi vers le haut)

Distance effective : km saisis, ou `approx_km` de la zone sélectionnée.
Toute saisie invalide (négative, non numérique) est ramenée à 0, sans erreur.
"""
import math
import logging
from typing import Optional, Any

from config import settings
from models.common import DeliveryType
from models.pricing import PricingConfig, DeliveryRequest, Breakdown, QuoteInput, Zone

logger = logging.getLogger(__name__)


def to_amount(value: Any) -> float:
    """
    Convertit une saisie brute en nombre ; None, texte illisible, NaN ou inf → 0.
    La valeur absolue est plafonnée à settings.MAX_AMOUNT.
    """
    if value is None:
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        logger.debug("Saisie non numérique %r — ramenée à 0", value)
        return 0.0
    if math.isnan(amount) or math.isinf(amount):
        return 0.0
    return max(-settings.MAX_AMOUNT, min(amount, settings.MAX_AMOUNT))


def round_to_half(value: float) -> float:
    """Arrondit au multiple de 0.50 le plus proche, les demis vers le haut."""
    if not math.isfinite(value):
        return 0.0
    return math.floor(value * 2 + 0.5) / 2


def _finite(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def _type_surcharge(config: PricingConfig, delivery_type: DeliveryType) -> float:
    return {
        DeliveryType.EXPRESS:  config.express_surcharge,
        DeliveryType.SAME_DAY: config.same_day_surcharge,
    }.get(delivery_type, 0.0)


def _selected_zone(config: PricingConfig, request: DeliveryRequest) -> Optional[Zone]:
    """La zone de la requête, si elle existe encore dans la config."""
    if request.zone is None:
        return None
    if config.find_zone(request.zone.id) is None:
        logger.debug("Zone %s absente de la config — ignorée", request.zone.id)
        return None
    return request.zone


def effective_distance_km(config: PricingConfig, request: DeliveryRequest) -> float:
    zone = _selected_zone(config, request)
    if zone is not None:
        return max(0.0, zone.approx_km)
    if request.zone is not None:
        # zone demandée mais inconnue : comme "aucune zone choisie" en mode zone
        return 0.0
    return max(0.0, request.distance_km)


# ── Point d'entrée principal ──────────────────────────────────────────────────

def evaluate(config: PricingConfig, request: DeliveryRequest) -> Breakdown:
    zone = _selected_zone(config, request)

    base           = config.base_fee
    distance_cost  = _finite(effective_distance_km(config, request) * config.per_km)
    weight_cost    = _finite(max(0.0, request.weight_kg) * config.per_kg)
    type_surcharge = _type_surcharge(config, request.delivery_type)
    zone_fee       = zone.surcharge if zone is not None else 0.0

    extras = 0.0
    if request.fragile:
        extras += config.fragile_surcharge
    if request.cash_on_delivery:
        extras += config.cod_surcharge
    extras = _finite(extras)

    # montant non fini (débordement) : ramené à 0
    subtotal = _finite(base + distance_cost + weight_cost + type_surcharge + zone_fee + extras)

    return Breakdown(
        base=base,
        distance_cost=distance_cost,
        weight_cost=weight_cost,
        type_surcharge=type_surcharge,
        zone_fee=zone_fee,
        extras=extras,
        subtotal=subtotal,
        total=round_to_half(subtotal),
    )


def build_request(config: PricingConfig, body: QuoteInput) -> DeliveryRequest:
    """
    Traduit la saisie du calculateur en DeliveryRequest.
    En mode zone, la distance saisie est remplacée par `approx_km` de la zone ;
    sans zone valide, distance et forfait zone valent 0.
    """
    zone = None
    if body.use_zones:
        zone = config.find_zone(body.zone_id)
        if zone is None:
            logger.debug("Mode zone sans zone valide (zone_id=%r)", body.zone_id)
        distance = zone.approx_km if zone is not None else 0.0
    else:
        distance = to_amount(body.distance_km)

    return DeliveryRequest(
        weight_kg=to_amount(body.weight_kg),
        distance_km=distance,
        delivery_type=body.delivery_type,
        fragile=body.fragile,
        cash_on_delivery=body.cash_on_delivery,
        zone=zone,
    )
