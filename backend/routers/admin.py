"""
Router admin : configuration tarifaire interne (tarifs et zones).
Tous les mutateurs passent par require_editing.
"""
from fastapi import APIRouter, Depends

from core.dependencies import require_editing, store_dependency
from core.exceptions import conflict_exception
from models.common import RateField
from models.pricing import ConfigEdit, ConfigView, EditingToggle, RateUpdate, ZoneUpdate
from services import config_service
from store import ConfigStore

router = APIRouter()


@router.get("/config", response_model=ConfigView, summary="Config tarifaire courante")
async def get_config(current_store: ConfigStore = Depends(store_dependency)):
    return ConfigView(config=current_store.config, editing_enabled=current_store.editing_enabled)


@router.put("/editing", response_model=ConfigView, summary="Activer/désactiver le mode édition")
async def toggle_editing(
    body: EditingToggle,
    current_store: ConfigStore = Depends(store_dependency),
):
    current_store.set_editing(body.enabled)
    return ConfigView(config=current_store.config, editing_enabled=current_store.editing_enabled)


@router.put("/rates/{field}", response_model=ConfigEdit, summary="Modifier un tarif")
async def update_rate(
    field: RateField,
    body: RateUpdate,
    current_store: ConfigStore = Depends(require_editing),
):
    return current_store.apply(config_service.set_rate(current_store.config, field, body.value))


@router.post("/zones", response_model=ConfigEdit, summary="Ajouter une zone")
async def create_zone(current_store: ConfigStore = Depends(require_editing)):
    return current_store.apply(config_service.add_zone(current_store.config))


@router.delete("/zones/last", response_model=ConfigEdit, summary="Supprimer la dernière zone")
async def delete_last_zone(current_store: ConfigStore = Depends(require_editing)):
    edit = current_store.apply(config_service.remove_last_zone(current_store.config))
    if not edit.applied:
        raise conflict_exception(edit.detail)
    return edit


@router.patch("/zones/{zone_id}", response_model=ConfigEdit, summary="Modifier un champ de zone")
async def update_zone(
    zone_id: str,
    body: ZoneUpdate,
    current_store: ConfigStore = Depends(require_editing),
):
    # zone inconnue : pas d'erreur, applied=false
    return current_store.apply(
        config_service.edit_zone_field(current_store.config, zone_id, body.field, body.value)
    )


@router.post("/config/reset", response_model=ConfigView, summary="Restaurer la grille par défaut")
async def reset_config(current_store: ConfigStore = Depends(require_editing)):
    current_store.reset()
    return ConfigView(config=current_store.config, editing_enabled=current_store.editing_enabled)
