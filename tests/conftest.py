from pathlib import Path

import pytest

from genfstab.sources import SystemSources


def make_sources(
    directory: Path,
    mounts: str | None = None,
    swaps: str | None = None,
    uuids: dict[str, str] | None = None,
) -> SystemSources:
    """Create a fake system under a directory, missing parts are left absent"""
    sources = SystemSources(
        mounts_path=directory / "proc" / "mounts",
        swaps_path=directory / "proc" / "swaps",
        disk_directory=directory / "dev" / "disk",
    )
    sources.mounts_path.parent.mkdir(parents=True, exist_ok=True)
    if mounts is not None:
        sources.mounts_path.write_text(mounts, encoding="utf-8")
    if swaps is not None:
        sources.swaps_path.write_text(swaps, encoding="utf-8")
    if uuids is not None:
        by_uuid = sources.disk_directory / "by-uuid"
        by_uuid.mkdir(parents=True)
        for uuid, target in uuids.items():
            (by_uuid / uuid).symlink_to(target)
    return sources


@pytest.fixture
def system(tmp_path: Path):
    def factory(**kwargs) -> SystemSources:
        return make_sources(tmp_path, **kwargs)

    return factory
