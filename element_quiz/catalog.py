"""
catalog.py
===========================

The fixed element catalog and simple lookups over it.

The catalog is compiled in: there is no loading step and no file format.
Image files are resolved by the UI from image_key + extension.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from .models import Item

# ----------------------------------------------------------------------
#  Catalog
# ----------------------------------------------------------------------
ELEMENTS: Tuple[Item, ...] = (
    Item(name="Carbon", image_key="Carbon"),
    Item(name="Gold", image_key="Gold"),
    Item(name="Chlorine", image_key="Chlorine"),
    Item(name="Sodium", image_key="Sodium"),
)


# ----------------------------------------------------------------------
#  Helpers
# ----------------------------------------------------------------------
def get_all_items() -> List[Item]:
    """All items in catalog order"""
    return list(ELEMENTS)


def get_item_by_name(name: str, items: Optional[Sequence[Item]] = None) -> Optional[Item]:
    """Case-insensitive lookup by name. None if absent."""
    wanted = name.lower()
    for item in items if items is not None else ELEMENTS:
        if item.name.lower() == wanted:
            return item
    return None


def image_path(
    item_or_key: Union[Item, str],
    images_dir: Union[str, Path],
    extension: str = ".png",
) -> Path:
    """
    Path of the image for an item (or a bare image key).

    The file may not exist; the caller decides how to render a missing asset.
    """
    key = item_or_key.image_key if isinstance(item_or_key, Item) else item_or_key
    if extension and not extension.startswith("."):
        extension = "." + extension
    return Path(images_dir) / f"{key}{extension}"
