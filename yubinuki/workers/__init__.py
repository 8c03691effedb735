# =======================================================================================
# yubinuki/workers/__init__.py - Workers Package
# =======================================================================================
from .access_worker import AccessWorker

__all__ = ["AccessWorker"]
