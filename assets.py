from dataclasses import dataclass
from pathlib import Path
import hashlib

import pulumi

from content_types import content_type_for
from site_errors import FilesystemError


@dataclass(frozen=True)
class Asset:
    relative_path: str
    content_type: str
    source: Path
    digest: str


def _digest(path: Path) -> str:
    return hashlib.sha256(path.read_bytes()).hexdigest()


def scan_site_assets(site_dir: Path) -> list[Asset]:
    """
    One Asset per regular file directly inside site_dir, sorted by name.

    Subdirectories are not descended into; they are skipped with a warning.
    """
    site_dir = Path(site_dir)
    if not site_dir.is_dir():
        raise FilesystemError(f"Site directory does not exist or is not a directory: {site_dir}")

    try:
        entries = sorted(site_dir.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise FilesystemError(f"Cannot list site directory {site_dir}: {e}") from e

    found: list[Asset] = []
    for entry in entries:
        if not entry.is_file():
            pulumi.log.warn(f"Skipping non-file entry in site directory: {entry.name}")
            continue
        try:
            digest = _digest(entry)
        except OSError as e:
            raise FilesystemError(f"Cannot read site file {entry}: {e}") from e

        found.append(
            Asset(
                relative_path=entry.name,
                content_type=content_type_for(entry.name),
                source=entry,
                digest=digest,
            )
        )

    pulumi.log.info(f"Found {len(found)} site file(s) in {site_dir}")
    return found
