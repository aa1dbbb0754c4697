from store.base import RecordStore, BackendNotConfigured
from store.mysql_store import MySQLRecordStore
from store.demo_store import DemoRecordStore
from store.blobs import LocalBlobStore


def create_record_store(app):
    """Pick the store implementation once, from the app configuration."""
    if app.config.get('DEMO_MODE'):
        app.logger.warning("No database configured; serving in-memory demo data.")
        return DemoRecordStore()
    return MySQLRecordStore(app.db_pool)


__all__ = [
    'RecordStore',
    'BackendNotConfigured',
    'MySQLRecordStore',
    'DemoRecordStore',
    'LocalBlobStore',
    'create_record_store',
]
