import logging
import os
from pathlib import Path


def resolve_identity_link(link: Path) -> tuple[str, str]:
    """
    Get the device path and identity token of an identity symlink.

    The relative target (eg. ../../sda1) is rewritten to an absolute
    device path (eg. /dev/sda1).
    Raises OSError for entries that aren't symlinks and UnicodeError for
    names that aren't valid UTF-8.
    """
    link.name.encode("utf-8")
    target = os.readlink(link)
    target.encode("utf-8")
    return target.replace("../..", "/dev"), link.name


def get_device_identities(
    kind: str = "uuid", disk_directory: Path = Path("/dev/disk")
) -> dict[str, str]:
    """
    Map device paths to their identity token (eg. their UUID).

    Best effort: a missing directory gives an empty mapping,
    unresolvable entries are skipped.
    """
    identity_directory = disk_directory / f"by-{kind.lower()}"
    identities: dict[str, str] = {}
    try:
        links = sorted(identity_directory.iterdir())
    except OSError as error:
        logging.debug("Cannot list %s: %s", identity_directory, error)
        return identities
    for link in links:
        try:
            device, token = resolve_identity_link(link)
        except (OSError, UnicodeError) as error:
            logging.debug("Skipped identity entry %s: %s", link, error)
            continue
        identities[device] = token
    logging.debug("Found %d device identities in %s", len(identities), identity_directory)
    return identities
