import logging

from genfstab.errors import (
    MountsFileDoesNotExists,
    MountsIsEmpty,
    MountsPermissionDenied,
    RootNotMounted,
    UnknownError,
)
from genfstab.fstab.fstab import Fstab
from genfstab.fstab.fstab_entry_builder import FstabEntryBuilder
from genfstab.mounts.device_identity import get_device_identities
from genfstab.mounts.mount_record import MountRecord
from genfstab.mounts.swap import generate_swap_line
from genfstab.sources import SystemSources

# Filesystems without backing storage, never persisted
PSEUDO_FILESYSTEMS = frozenset(
    (
        "anon_inodefs",
        "apparmorfs",
        "autofs",
        "bdev",
        "binder",
        "binfmt_misc",
        "bpf",
        "cgroup",
        "cgroup2",
        "configfs",
        "cpuset",
        "debugfs",
        "devfs",
        "devpts",
        "devtmpfs",
        "dlmfs",
        "dmabuf",
        "drm",
        "efivarfs",
        "esdfs",
        "hugetlbfs",
        "ipathfs",
        "mqueue",
        "nfsd",
        "none",
        "nsfs",
        "overlay",
        "pipefs",
        "proc",
        "pstore",
        "ramfs",
        "resctrl",
        "rootfs",
        "rpc_pipefs",
        "securityfs",
        "selinuxfs",
        "smackfs",
        "sockfs",
        "spufs",
        "sysfs",
        "tmpfs",
        "tracefs",
        "vboxsf",
        "virtiofs",
    )
)


def is_persistable(record: MountRecord, root: str) -> bool:
    """Check if a mount record belongs in the fstab of the given root"""
    if record.fs_vfstype in PSEUDO_FILESYSTEMS:
        return False
    # Sub-mounts of the root are kept, other absolute mount points are not.
    # Swap ("none") has no separator and is always kept.
    if "/" in record.fs_file and root not in record.fs_file:
        return False
    if record.fs_vfstype.startswith("fuse"):
        return False
    if record.fs_spec.startswith("/dev/loop"):
        return False
    return True


def fsck_pass_number(record: MountRecord, root: str) -> int:
    if record.fs_file == "none":
        return 0
    if record.fs_file == root:
        return 1
    return 2


class FstabGenerator:
    sources: SystemSources

    def __init__(self, sources: SystemSources | None = None) -> None:
        self.sources = sources if sources is not None else SystemSources()

    def read_mounts(self) -> list[str]:
        """Read the mount table lines, with the active swap appended"""
        path = self.sources.mounts_path
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError as error:
            raise MountsFileDoesNotExists(f"{path} does not exist") from error
        except PermissionError as error:
            raise MountsPermissionDenied(f"Cannot read {path}") from error
        except (OSError, UnicodeDecodeError) as error:
            raise UnknownError(f"Failed to read {path}") from error

        content = content.strip()
        if len(content) == 0:
            raise MountsIsEmpty(f"{path} is empty")

        lines = content.split("\n")
        swap_line = generate_swap_line(self.sources.swaps_path)
        if swap_line is not None:
            lines.append(swap_line)
        return lines

    def generate(self, root: str, use_uuid: bool = False) -> Fstab:
        """
        Generate the fstab lines for the filesystems mounted under root.

        Multiple mounts of the same device only produce the first one.
        Raises a GenfstabError subclass when no fstab can be generated.
        """
        identities = get_device_identities("uuid", self.sources.disk_directory)
        entry_builder = FstabEntryBuilder(identities, use_uuid)
        lines = self.read_mounts()

        written_devices: dict[str, None] = {}
        fstab_lines: list[str] = []
        for i, line in enumerate(lines, start=1):
            record = MountRecord.from_line(line, i)
            if not is_persistable(record, root):
                logging.debug("Ignored %s on %s", record.fs_spec, record.fs_file)
                continue
            if record.fs_spec in written_devices:
                logging.debug("Ignored %s on %s, already written", record.fs_spec, record.fs_file)
                continue
            entry = entry_builder.from_record(record, fsck_pass_number(record, root))
            logging.debug("Generated fstab entry: %s", entry)
            fstab_lines.append(str(entry))
            written_devices[record.fs_spec] = None

        if len(fstab_lines) == 0:
            raise RootNotMounted(f"Nothing is mounted on {root}")
        logging.info("Generated fstab for %s with %d entries", root, len(fstab_lines))
        return Fstab(fstab_lines)
