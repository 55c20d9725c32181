from dataclasses import dataclass


@dataclass
class FstabEntry:
    spec: str
    mount_point: str
    fs_type: str
    mount_options: str
    dump_frequency: int = 0
    fsck_pass_number: int = 0

    def __str__(self) -> str:
        return " ".join(
            (
                self.spec,
                self.mount_point,
                self.fs_type,
                self.mount_options,
                str(self.dump_frequency),
                str(self.fsck_pass_number),
            )
        )
