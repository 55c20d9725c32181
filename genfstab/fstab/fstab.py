class Fstab:
    """Ordered rendered fstab lines"""

    lines: list[str]

    def __init__(self, lines: list[str]) -> None:
        self.lines = lines

    def __str__(self) -> str:
        return "\n".join(self.lines)

    def __iter__(self):
        yield from self.lines

    def __len__(self) -> int:
        return len(self.lines)
