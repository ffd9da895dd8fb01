from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Dict, Any


class Settings(BaseSettings):
    # App
    APP_ENV: str = "development"
    DEBUG: bool = True
    COMPANY_NAME: str = "RichDonlurds Shoes Limited"
    CURRENCY: str = "GHS"

    # Grille tarifaire par défaut (GHS) — recopiée dans chaque nouvelle session
    BASE_FEE:           float = 15.0
    PRICE_PER_KM:       float = 2.0    # GHS / km
    PRICE_PER_KG:       float = 5.0    # GHS / kg
    EXPRESS_SURCHARGE:  float = 20.0   # forfait
    SAME_DAY_SURCHARGE: float = 35.0
    FRAGILE_SURCHARGE:  float = 5.0
    COD_SURCHARGE:      float = 3.0    # paiement à la livraison

    DEFAULT_ZONES: List[Dict[str, Any]] = [
        {"id": "accra",         "name": "Accra Metro",                   "surcharge": 0.0,  "approx_km": 5.0},
        {"id": "greater-accra", "name": "Greater Accra (outside metro)", "surcharge": 10.0, "approx_km": 15.0},
        {"id": "other-region",  "name": "Other Regions",                 "surcharge": 25.0, "approx_km": 100.0},
    ]

    # Admin : état initial de l'interrupteur "Edit"
    ADMIN_EDITING_ENABLED: bool = False

    # Rate limiting des devis publics (syntaxe slowapi)
    RATE_LIMIT_ENABLED: bool = True
    QUOTE_RATE_LIMIT: str = "60/minute"

    # Plafond de toute saisie numérique (poids, km, tarifs) ; au-delà : plafonné
    MAX_AMOUNT: float = 1_000_000_000.0

    model_config = SettingsConfigDict(
        env_file=[".env", "../.env"],  # cherche dans backend/ puis dans la racine
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
