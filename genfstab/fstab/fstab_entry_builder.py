from genfstab.fstab.fstab_entry import FstabEntry
from genfstab.mounts.mount_record import MountRecord


class FstabEntryBuilder:
    identities: dict[str, str]
    use_uuid: bool

    def __init__(self, identities: dict[str, str], use_uuid: bool = False) -> None:
        self.identities = identities
        self.use_uuid = use_uuid

    def get_spec(self, device: str) -> str:
        """Get the device as UUID=<uuid> if possible in UUID mode, else as is"""
        if self.use_uuid and device in self.identities:
            return f"UUID={self.identities[device]}"
        return device

    def from_record(self, record: MountRecord, fsck_pass_number: int) -> FstabEntry:
        """Create a fstab entry object from a mount record"""
        return FstabEntry(
            spec=self.get_spec(record.fs_spec),
            mount_point=record.fs_file,
            fs_type=record.fs_vfstype,
            mount_options=record.fs_mntopts,
            dump_frequency=0,
            fsck_pass_number=fsck_pass_number,
        )
