"""
Service d'édition de la grille tarifaire (onglet Admin).

Chaque opération prend la config courante et retourne un ConfigEdit :
nouvelle version si l'édition est appliquée, config inchangée sinon.
Les montants négatifs ou illisibles sont ramenés à 0, jamais rejetés.
"""
import uuid
import logging
from typing import Any

from config import settings
from models.common import RateField, ZoneField
from models.pricing import PricingConfig, Zone, ConfigEdit
from services.pricing_service import to_amount

logger = logging.getLogger(__name__)

NEW_ZONE_NAME = "New Zone"


def default_config() -> PricingConfig:
    return PricingConfig(
        base_fee=settings.BASE_FEE,
        per_km=settings.PRICE_PER_KM,
        per_kg=settings.PRICE_PER_KG,
        express_surcharge=settings.EXPRESS_SURCHARGE,
        same_day_surcharge=settings.SAME_DAY_SURCHARGE,
        fragile_surcharge=settings.FRAGILE_SURCHARGE,
        cod_surcharge=settings.COD_SURCHARGE,
        zones=[Zone(**z) for z in settings.DEFAULT_ZONES],
    )


def _zone_id(config: PricingConfig) -> str:
    taken = {z.id for z in config.zones}
    while True:
        zone_id = f"zon_{uuid.uuid4().hex[:12]}"
        if zone_id not in taken:
            return zone_id


def _next_version(config: PricingConfig, **changes) -> PricingConfig:
    data = config.model_dump()
    data.update(changes)
    data["version"] = config.version + 1
    return PricingConfig(**data)


def _non_negative(value: Any) -> float:
    return max(0.0, to_amount(value))


# ── Tarifs ────────────────────────────────────────────────────────────────────

def set_rate(config: PricingConfig, field: RateField, value: Any) -> ConfigEdit:
    amount = _non_negative(value)
    updated = _next_version(config, **{field.value: amount})
    logger.info("Tarif %s = %.2f (v%d)", field.value, amount, updated.version)
    return ConfigEdit(config=updated)


# ── Zones ─────────────────────────────────────────────────────────────────────

def add_zone(config: PricingConfig) -> ConfigEdit:
    zone = Zone(id=_zone_id(config), name=NEW_ZONE_NAME)
    updated = _next_version(config, zones=[*config.zones, zone])
    logger.info("Zone ajoutée %s (v%d)", zone.id, updated.version)
    return ConfigEdit(config=updated, detail=zone.id)


def remove_last_zone(config: PricingConfig) -> ConfigEdit:
    if len(config.zones) <= 1:
        logger.info("Suppression refusée : une seule zone restante")
        return ConfigEdit(
            config=config,
            applied=False,
            detail="Impossible de supprimer la dernière zone",
        )
    removed = config.zones[-1]
    updated = _next_version(config, zones=config.zones[:-1])
    logger.info("Zone supprimée %s (v%d)", removed.id, updated.version)
    return ConfigEdit(config=updated, detail=removed.id)


def edit_zone_field(config: PricingConfig, zone_id: str, field: ZoneField, value: Any) -> ConfigEdit:
    if config.find_zone(zone_id) is None:
        logger.debug("Edition ignorée : zone %s introuvable", zone_id)
        return ConfigEdit(config=config, applied=False, detail=f"Zone {zone_id} introuvable")

    if field == ZoneField.NAME:
        new_value = "" if value is None else str(value)
    else:
        new_value = _non_negative(value)

    zones = [
        Zone(**{**z.model_dump(), field.value: new_value}) if z.id == zone_id else z
        for z in config.zones
    ]
    updated = _next_version(config, zones=zones)
    logger.info("Zone %s : %s = %r (v%d)", zone_id, field.value, new_value, updated.version)
    return ConfigEdit(config=updated)
