"""
Router pricing : calculateur client (public).
"""
from fastapi import APIRouter, Depends, Request

from config import settings
from core.dependencies import store_dependency
from core.limiter import limiter
from models.common import DeliveryType
from models.pricing import QuoteInput, QuoteResponse
from services.pricing_service import build_request, evaluate, effective_distance_km
from services.quote_service import quote_summary
from store import ConfigStore

router = APIRouter()


@router.get("/zones", summary="Liste des zones de livraison (public)")
async def list_zones(current_store: ConfigStore = Depends(store_dependency)):
    return {"zones": current_store.config.zones}


@router.get("/delivery-types", summary="Vitesses de livraison et suppléments (public)")
async def list_delivery_types(current_store: ConfigStore = Depends(store_dependency)):
    cfg = current_store.config
    surcharges = {
        DeliveryType.STANDARD: 0.0,
        DeliveryType.EXPRESS:  cfg.express_surcharge,
        DeliveryType.SAME_DAY: cfg.same_day_surcharge,
    }
    return {
        "delivery_types": [
            {"value": t.value, "surcharge": surcharges[t]} for t in DeliveryType
        ],
        "currency": settings.CURRENCY,
    }


@router.post("/quote", response_model=QuoteResponse, summary="Calculer un devis (public)")
@limiter.limit(settings.QUOTE_RATE_LIMIT)
async def get_quote(
    request: Request,
    body: QuoteInput,
    current_store: ConfigStore = Depends(store_dependency),
):
    cfg = current_store.config
    delivery = build_request(cfg, body)
    breakdown = evaluate(cfg, delivery)
    return QuoteResponse(
        total=breakdown.total,
        currency=settings.CURRENCY,
        breakdown=breakdown,
        delivery_type=delivery.delivery_type,
        effective_distance_km=effective_distance_km(cfg, delivery),
        zone_name=delivery.zone.name if delivery.zone else None,
        config_version=cfg.version,
    )


@router.post("/quote/summary", summary="Texte du devis à copier/partager (public)")
@limiter.limit(settings.QUOTE_RATE_LIMIT)
async def get_quote_summary(
    request: Request,
    body: QuoteInput,
    current_store: ConfigStore = Depends(store_dependency),
):
    cfg = current_store.config
    delivery = build_request(cfg, body)
    breakdown = evaluate(cfg, delivery)
    return {"text": quote_summary(body, delivery, breakdown, settings.CURRENCY)}
