import logging
from pathlib import Path

ZRAM_DEVICE_PREFIX = "/dev/zram"
ZRAM_SWAP_OPTIONS = ",pri=100"


def get_active_swap_device(swaps: str) -> str:
    """Get the first active swap device from the swaps list, or an empty string"""
    lines = swaps.strip().split("\n")
    if len(lines) < 2:
        return ""
    # The first line is the column header
    return lines[1].split(" ")[0]


def generate_swap_line(swaps_path: Path = Path("/proc/swaps")) -> str | None:
    """
    Create a mount table line for the first active swap device.

    Only the first device is considered.
    Returns None if the swaps list can't be read or has no device.
    """
    try:
        swaps = swaps_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        logging.debug("Cannot read swaps from %s: %s", swaps_path, error)
        return None
    device = get_active_swap_device(swaps)
    if len(device) == 0:
        logging.debug("No active swap device")
        return None
    options = ZRAM_SWAP_OPTIONS if device.startswith(ZRAM_DEVICE_PREFIX) else ""
    logging.debug("Found active swap device %s", device)
    return f"{device} none swap default{options} 0 0"
