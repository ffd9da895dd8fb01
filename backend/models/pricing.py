import logging
from typing import Any, Optional, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from models.common import DeliveryType, ZoneField

logger = logging.getLogger(__name__)

# Saisie brute venant du formulaire : nombre, texte ou vide
RawNumber = Optional[Union[float, str]]


class Zone(BaseModel):
    model_config = ConfigDict(frozen=True)

    id:        str
    name:      str
    surcharge: float = Field(default=0.0, ge=0)   # forfait zone (GHS)
    approx_km: float = Field(default=0.0, ge=0)   # distance utilisée à la place du km saisi


class PricingConfig(BaseModel):
    """
    Grille tarifaire d'une session. Chaque édition appliquée produit une
    nouvelle instance avec `version` incrémentée ; le moteur lit toujours
    une version complète.
    """
    model_config = ConfigDict(frozen=True)

    base_fee:           float = Field(ge=0)
    per_km:             float = Field(ge=0)
    per_kg:             float = Field(ge=0)
    express_surcharge:  float = Field(ge=0)
    same_day_surcharge: float = Field(ge=0)
    fragile_surcharge:  float = Field(ge=0)
    cod_surcharge:      float = Field(ge=0)
    zones:              List[Zone]   # ordre d'affichage uniquement
    version:            int = 1

    @model_validator(mode="after")
    def _check_zones(self):
        if not self.zones:
            raise ValueError("Au moins une zone est requise")
        ids = [z.id for z in self.zones]
        if len(ids) != len(set(ids)):
            raise ValueError("Identifiants de zone en double")
        return self

    def find_zone(self, zone_id: Optional[str]) -> Optional[Zone]:
        if not zone_id:
            return None
        return next((z for z in self.zones if z.id == zone_id), None)


class DeliveryRequest(BaseModel):
    """Entrée d'une évaluation. `zone` renseignée = tarification par zone."""
    model_config = ConfigDict(frozen=True)

    weight_kg:        float = 0.0
    distance_km:      float = 0.0    # ignorée si une zone est sélectionnée
    delivery_type:    DeliveryType = DeliveryType.STANDARD
    fragile:          bool = False
    cash_on_delivery: bool = False
    zone:             Optional[Zone] = None

    @field_validator("delivery_type", mode="before")
    @classmethod
    def _unknown_type_is_standard(cls, v):
        if isinstance(v, DeliveryType):
            return v
        try:
            return DeliveryType(v)
        except (ValueError, TypeError):
            logger.info("Type de livraison inconnu %r — tarif standard", v)
            return DeliveryType.STANDARD


class Breakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    base:           float
    distance_cost:  float
    weight_cost:    float
    type_surcharge: float
    zone_fee:       float
    extras:         float
    subtotal:       float
    total:          float   # subtotal arrondi à 0.50


class ConfigEdit(BaseModel):
    """Résultat d'une opération d'édition : refusée ou non, la config reste valide."""
    config:  PricingConfig
    applied: bool = True
    detail:  Optional[str] = None


# ── Corps de requêtes API ─────────────────────────────────────────────────────

class QuoteInput(BaseModel):
    weight_kg:        RawNumber = 1
    distance_km:      RawNumber = 10
    delivery_type:    Any = DeliveryType.STANDARD.value   # valeur inconnue → standard
    fragile:          bool = False
    cash_on_delivery: bool = False
    use_zones:        bool = False
    zone_id:          Optional[str] = None


class QuoteResponse(BaseModel):
    total:                 float
    currency:              str = "GHS"
    breakdown:             Breakdown
    delivery_type:         DeliveryType
    effective_distance_km: float
    zone_name:             Optional[str] = None
    config_version:        int


class RateUpdate(BaseModel):
    value: RawNumber = None


class ZoneUpdate(BaseModel):
    field: ZoneField
    value: RawNumber = None


class EditingToggle(BaseModel):
    enabled: bool


class ConfigView(BaseModel):
    config:          PricingConfig
    editing_enabled: bool
