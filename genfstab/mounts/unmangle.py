import re

# Octal escapes used by the kernel in /proc/mounts fields
MANGLED_CHARACTERS = {
    "040": " ",
    "011": "\t",
    "012": "\n",
    "134": "\\",
    "043": "#",
}

mangled_pattern = re.compile(r"\\(040|011|012|134|043)")


def unmangle(field: str) -> str:
    """Replace the kernel octal escapes of a mount table field by their characters"""
    return mangled_pattern.sub(lambda match: MANGLED_CHARACTERS[match[1]], field)
