from bizadmin.server.db.store import JsonStore
from bizadmin.server.settings.config import settings


def init_store() -> JsonStore:
    return JsonStore(settings.db_path)


def get_store() -> JsonStore:
    # FastAPI dependency; tests override it with a store in a temp dir
    return init_store()
