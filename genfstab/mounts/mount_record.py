from dataclasses import dataclass

from genfstab.errors import MalformedMountRecord
from genfstab.mounts.unmangle import unmangle


@dataclass(frozen=True)
class MountRecord:
    """The leading fields of a mount table line"""

    fs_spec: str
    fs_file: str
    fs_vfstype: str
    fs_mntopts: str

    @classmethod
    def from_line(cls, line: str, line_number: int = 0) -> "MountRecord":
        """Create a mount record from a mount table line"""
        segments = line.split(" ")
        if len(segments) < 4:
            raise MalformedMountRecord(line, line_number)
        fs_spec, fs_file, fs_vfstype, fs_mntopts = (
            unmangle(segment) for segment in segments[:4]
        )
        return cls(fs_spec, fs_file, fs_vfstype, fs_mntopts)
