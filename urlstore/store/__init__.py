from urlstore.store.url_store import URLStore
from urlstore.store.factory import build_url_store


__all__ = [
    'URLStore',
    'build_url_store',
]
