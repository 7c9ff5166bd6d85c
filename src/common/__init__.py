# Common utilities
from .config_loader import (
    InventorySettings,
    load_config,
    load_inventory_settings,
    resolve_credentials,
)
from .log_config import setup_logging
from .text_utils import format_number, safe_filename
