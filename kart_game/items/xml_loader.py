from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Dict, List, NoReturn, Optional, Sequence, Tuple
from xml.etree import ElementTree as ET

from .data_models import (
    MODE_CLASSES,
    ItemDescriptor,
    ItemKind,
    ModeTable,
    PowerupConfigError,
    PowerupDocument,
    WeightedEntry,
    weight_list_name,
)
from .distribution import assemble_table
from .weight_rows import parse_bucket_entries

logger = logging.getLogger(__name__)

ITEM_TAG = "item"


def load_powerup_document(
    path: Path | str,
    *,
    weight_lists: Optional[Sequence[str]] = None,
) -> PowerupDocument:
    """Loads powerup.xml style data: item declarations plus one weight list per mode class."""

    xml_path = Path(path)
    if not xml_path.exists():
        raise FileNotFoundError(xml_path)

    try:
        root = ET.parse(xml_path).getroot()
    except ET.ParseError as exc:
        raise PowerupConfigError(f"Could not parse {xml_path}: {exc}") from exc

    document = _build_document(root, weight_lists)
    logger.info(
        "Loaded %d powerups and %d weight lists from %s",
        len(document.items),
        len(document.tables),
        xml_path,
    )
    return document


def parse_powerup_document(text: str, *, weight_lists: Optional[Sequence[str]] = None) -> PowerupDocument:
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise PowerupConfigError(f"Could not parse powerup document: {exc}") from exc
    return _build_document(root, weight_lists)


def _build_document(root: ET.Element, weight_lists: Optional[Sequence[str]]) -> PowerupDocument:
    items = _parse_items(root)
    mode_classes = tuple(weight_lists) if weight_lists is not None else MODE_CLASSES
    tables: Dict[str, ModeTable] = {
        mode_class: _parse_weight_list(root, mode_class) for mode_class in mode_classes
    }
    return PowerupDocument(items=items, tables=tables)


def _parse_items(root: ET.Element) -> Dict[ItemKind, ItemDescriptor]:
    items: Dict[ItemKind, ItemDescriptor] = {}
    for position, node in enumerate(root.findall(ITEM_TAG), start=1):
        name = node.get("name", "")
        kind = ItemKind.from_name(name)
        if kind is ItemKind.NONE:
            _fail(f"Can't find item '{name}' from powerup document, entry {position}.")

        icon = node.get("icon", "")
        if not icon:
            _fail(f"Powerup '{name}' has no 'icon' attribute.")

        attributes = {key: value for key, value in node.attrib.items() if key not in ("name", "icon", "model")}
        items[kind] = ItemDescriptor(kind=kind, icon=icon, model=node.get("model") or None, attributes=attributes)
    return items


def _parse_weight_list(root: ET.Element, mode_class: str) -> ModeTable:
    list_name = weight_list_name(mode_class)
    node = root.find(list_name)
    if node is None:
        _fail(f"Cannot find node '{list_name}' in powerup document.")

    raw_buckets: List[Tuple[float, List[WeightedEntry]]] = []
    for bucket_node in node:
        distance = _parse_distance(bucket_node, list_name)
        entries = parse_bucket_entries(
            bucket_node.get("single", ""),
            bucket_node.get("multi", ""),
            label=f"{list_name}@{distance:g}",
        )
        raw_buckets.append((distance, entries))

    if not raw_buckets:
        _fail(f"Weight list '{list_name}' has no distance buckets.")
    return assemble_table(mode_class, raw_buckets)


def _parse_distance(node: ET.Element, list_name: str) -> float:
    raw = node.get("distance")
    if raw is None:
        _fail(f"Bucket <{node.tag}> in '{list_name}' has no distance.")
    try:
        distance = float(raw)
    except ValueError as exc:
        raise PowerupConfigError(f"Invalid distance '{raw}' in '{list_name}'") from exc
    if math.isnan(distance):
        _fail(f"Invalid distance '{raw}' in '{list_name}'")
    return distance


def _fail(message: str) -> NoReturn:
    logger.error(message)
    raise PowerupConfigError(message)
