"""
Stockage de session : la grille tarifaire vit uniquement en mémoire du
processus et disparaît à l'arrêt. Un seul écrivain (l'admin) ; le moteur
lit toujours une version complète de la config.
"""
import logging

from config import settings
from models.pricing import PricingConfig, ConfigEdit
from services.config_service import default_config

logger = logging.getLogger(__name__)


class ConfigStore:
    def __init__(self, editing_enabled: bool = False):
        self.config: PricingConfig = default_config()
        self.editing_enabled = editing_enabled

    def apply(self, edit: ConfigEdit) -> ConfigEdit:
        """Remplace la config courante si l'édition a été appliquée."""
        if edit.applied:
            self.config = edit.config
        return edit

    def set_editing(self, enabled: bool) -> None:
        self.editing_enabled = enabled
        logger.info("Edition admin %s", "activée" if enabled else "désactivée")

    def reset(self) -> PricingConfig:
        # version monotone, même après reset
        fresh = default_config()
        self.config = fresh.model_copy(update={"version": self.config.version + 1})
        logger.info("Config réinitialisée (v%d)", self.config.version)
        return self.config


store: ConfigStore = None


def get_store() -> ConfigStore:
    if store is None:
        raise RuntimeError("Store not initialised. Call init_store() first.")
    return store


def init_store() -> ConfigStore:
    global store
    store = ConfigStore(editing_enabled=settings.ADMIN_EDITING_ENABLED)
    logger.info("Config tarifaire chargée (%d zones)", len(store.config.zones))
    return store


def close_store() -> None:
    global store
    store = None
    logger.info("Config tarifaire libérée")
