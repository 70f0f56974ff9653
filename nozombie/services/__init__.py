"""
Services package.
"""

from .config_svc import ConfigService
from .zombie_scan_svc import ZombieScanService

__all__ = ["ConfigService", "ZombieScanService"]
