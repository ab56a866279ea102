from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Sequence, Union

from kart_game.config import get_config, resolve_repo_path

from .data_models import (
    MODE_CLASSES,
    GameMode,
    ItemDescriptor,
    ItemKind,
    ModeTable,
    PowerupConfigError,
    mode_class_for,
    weight_list_name,
)
from .xml_loader import load_powerup_document

logger = logging.getLogger(__name__)


def _default_xml_path() -> Path:
    return resolve_repo_path(get_config("powerups.xml_path", "configs/powerup.xml"))


class PowerupRegistry:
    """Loads powerup declarations and keeps one weight table per mode class."""

    def __init__(self, xml_path: Optional[Path] = None, weight_lists: Optional[Sequence[str]] = None) -> None:
        self.xml_path = Path(xml_path) if xml_path else _default_xml_path()
        configured = weight_lists if weight_lists is not None else get_config("powerups.weight_lists", MODE_CLASSES)
        self.weight_lists = tuple(configured)
        self.items: Dict[ItemKind, ItemDescriptor] = {}
        self.tables: Dict[str, ModeTable] = {}
        self.reload()

    def reload(self) -> None:
        document = load_powerup_document(self.xml_path, weight_lists=self.weight_lists)
        # Replace whole dicts so readers never see a half loaded state.
        self.items = dict(document.items)
        self.tables = dict(document.tables)

    def unload(self) -> None:
        self.items = {}
        self.tables = {}

    def table_for_class(self, mode_class: str) -> ModeTable:
        table = self.tables.get(mode_class)
        if table is None:
            message = f"No weight list '{weight_list_name(mode_class)}' loaded from {self.xml_path}"
            logger.error(message)
            raise PowerupConfigError(message)
        return table

    def table_for_mode(self, mode: Union[GameMode, str]) -> ModeTable:
        return self.table_for_class(mode_class_for(mode))

    def get_item_type(self, name: str) -> ItemKind:
        return ItemKind.from_name(name)
