"""Backup utilities for catalog overwrites."""

import shutil
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .logging import get_logger

logger = get_logger().get_logger('backup')

BACKUP_PREFIX = 'localization_backup_'


def create_backup(
    catalog_path: Path,
    backup_root: Path,
    backup_name: Optional[str] = None,
) -> Optional[Path]:
    """
    Copy a catalog into a timestamped backup directory before it is overwritten.

    The catalog's language directory is kept in the backup layout
    (``<backup_root>/<backup_name>/en.lproj/Localizable.strings``).

    Args:
        catalog_path: Catalog file about to be overwritten
        backup_root: Directory holding backups (usually the catalog base dir)
        backup_name: Custom backup name (default: timestamp)

    Returns:
        Path of the copied file, or None when there was nothing to back up
    """
    if not catalog_path.is_file():
        return None

    if backup_name is None:
        backup_name = f"{BACKUP_PREFIX}{datetime.now().strftime('%Y%m%d_%H%M%S')}"

    dest_path = backup_root / backup_name / catalog_path.parent.name / catalog_path.name
    dest_path.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(catalog_path, dest_path)

    logger.debug(f"Backup created: {dest_path}")
    return dest_path


def list_backups(backup_root: Path) -> List[Path]:
    """
    List backup directories, newest first.

    Args:
        backup_root: Directory holding backups

    Returns:
        List of backup directories
    """
    return sorted(
        backup_root.glob(f'{BACKUP_PREFIX}*'),
        key=lambda p: p.stat().st_mtime,
        reverse=True
    )
