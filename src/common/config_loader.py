"""
Configuration Loader

Loads the YAML settings file for the inventory browser and resolves
Shopify credentials from the environment.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

SETTINGS_FILE = 'inventory.yaml'

# Shopify caps the page size of every connection at 250
MAX_PAGE_SIZE = 250

DEFAULT_EXPORT_COLUMNS = [
    'Product Name', 'Weight', 'Price', 'Currency', 'Barcode', 'Available Units',
]


@dataclass
class InventorySettings:
    """Settings read from config/inventory.yaml."""
    page_size: int = 30
    api_version: str = "2025-01"
    collections_limit: int = 50
    export_columns: List[str] = field(default_factory=lambda: list(DEFAULT_EXPORT_COLUMNS))
    include_bom: bool = True
    export_dir: str = "output/exports"

    def __post_init__(self):
        if not isinstance(self.page_size, int) or isinstance(self.page_size, bool) or self.page_size < 1:
            raise ValueError(f"page_size must be a positive integer, got {self.page_size!r}")
        if self.page_size > MAX_PAGE_SIZE:
            raise ValueError(f"page_size cannot exceed {MAX_PAGE_SIZE}, got {self.page_size}")
        if not isinstance(self.collections_limit, int) or self.collections_limit < 1:
            raise ValueError(
                f"collections_limit must be a positive integer, got {self.collections_limit!r}"
            )
        if not self.export_columns:
            raise ValueError("export_columns must list at least one column")


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'inventory.yaml')

    Returns:
        Parsed YAML content as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def settings_from_dict(data: Dict[str, Any]) -> InventorySettings:
    """
    Build settings from a parsed YAML mapping.

    Unknown keys are ignored so that older config files keep working.
    """
    known = InventorySettings.__dataclass_fields__.keys()
    values = {key: value for key, value in data.items() if key in known}
    if 'export_columns' in values:
        values['export_columns'] = [str(column) for column in values['export_columns'] or []]
    return InventorySettings(**values)


def load_inventory_settings(filename: str = SETTINGS_FILE) -> InventorySettings:
    """
    Load inventory browser settings.

    Returns:
        InventorySettings populated from the YAML file

    Raises:
        FileNotFoundError: If the settings file doesn't exist
        ValueError: If a setting has an invalid value
    """
    return settings_from_dict(load_config(filename))


def resolve_credentials(
    shop: Optional[str] = None,
    token: Optional[str] = None,
) -> Tuple[Optional[str], Optional[str]]:
    """
    Resolve the shop name and Admin API token.

    Explicit arguments win over the SHOPIFY_SHOP and SHOPIFY_ACCESS_TOKEN
    environment variables.
    """
    return (
        shop or os.environ.get("SHOPIFY_SHOP"),
        token or os.environ.get("SHOPIFY_ACCESS_TOKEN"),
    )
