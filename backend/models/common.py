from enum import Enum


class DeliveryType(str, Enum):
    STANDARD = "standard"
    EXPRESS  = "express"
    SAME_DAY = "same-day"


class RateField(str, Enum):
    """Les sept tarifs scalaires éditables depuis l'admin."""
    BASE_FEE           = "base_fee"
    PER_KM             = "per_km"
    PER_KG             = "per_kg"
    EXPRESS_SURCHARGE  = "express_surcharge"
    SAME_DAY_SURCHARGE = "same_day_surcharge"
    FRAGILE_SURCHARGE  = "fragile_surcharge"
    COD_SURCHARGE      = "cod_surcharge"


class ZoneField(str, Enum):
    NAME      = "name"
    SURCHARGE = "surcharge"
    APPROX_KM = "approx_km"
