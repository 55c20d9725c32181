from enum import Enum


class ErrorKind(Enum):
    MOUNTS_FILE_DOES_NOT_EXISTS = "MountsFileDoesNotExists"
    MOUNTS_PERMISSION_DENIED = "MountsPermissionDenied"
    MOUNTS_IS_EMPTY = "MountsIsEmpty"
    ROOT_NOT_MOUNTED = "RootNotMounted"
    MALFORMED_MOUNT_RECORD = "MalformedMountRecord"
    UNKNOWN_ERROR = "UnknownError"


class GenfstabError(Exception):
    """Base error for a failed fstab generation"""

    kind: ErrorKind = ErrorKind.UNKNOWN_ERROR


class MountsFileDoesNotExists(GenfstabError):
    """Error raised when the mount table doesn't exist"""

    kind = ErrorKind.MOUNTS_FILE_DOES_NOT_EXISTS


class MountsPermissionDenied(GenfstabError):
    """Error raised when the mount table can't be read with the current privileges"""

    kind = ErrorKind.MOUNTS_PERMISSION_DENIED


class MountsIsEmpty(GenfstabError):
    """Error raised when the mount table has no content"""

    kind = ErrorKind.MOUNTS_IS_EMPTY


class RootNotMounted(GenfstabError):
    """Error raised when no mount is left for the root after filtering"""

    kind = ErrorKind.ROOT_NOT_MOUNTED


class UnknownError(GenfstabError):
    """Error raised when the mount table couldn't be read for another reason"""

    kind = ErrorKind.UNKNOWN_ERROR


class MalformedMountRecord(GenfstabError):
    """Error raised when a mount table line has less than four fields"""

    kind = ErrorKind.MALFORMED_MOUNT_RECORD

    line: str
    line_number: int

    def __init__(self, line: str, line_number: int = 0) -> None:
        self.line = line
        self.line_number = line_number
        super().__init__(f"Malformed mount record at line {line_number}: {line!r}")
