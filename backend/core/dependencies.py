from fastapi import Depends

from core.exceptions import forbidden_exception
from store import ConfigStore, get_store


def store_dependency() -> ConfigStore:
    return get_store()


async def require_editing(current_store: ConfigStore = Depends(store_dependency)) -> ConfigStore:
    """
    Dépendance des mutateurs admin : refuse tant que l'interrupteur "Edit"
    n'est pas activé.
    Usage : Depends(require_editing)
    """
    if not current_store.editing_enabled:
        raise forbidden_exception("Edition désactivée — activez le mode édition")
    return current_store
