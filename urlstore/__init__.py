from urlstore.models import URLRecordModel
from urlstore.store import URLStore, build_url_store
from urlstore.telemetry import Usage


__all__ = [
    'URLRecordModel',
    'URLStore',
    'Usage',
    'build_url_store',
]
