from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SystemSources:
    """Locations of the kernel-exposed files read to generate an fstab"""

    mounts_path: Path = Path("/proc/mounts")
    swaps_path: Path = Path("/proc/swaps")
    disk_directory: Path = Path("/dev/disk")
