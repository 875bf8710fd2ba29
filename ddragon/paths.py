# ddragon/paths.py
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Optional

UPLOAD_ROOT = "upload"

@dataclass(frozen=True)
class ResolvedDir:
    rel_dir: str
    abs_dir: Path

@dataclass(frozen=True)
class ResolvedPath:
    rel_dir: str
    abs_dir: Path
    rel_path: str
    abs_path: Path
    filename: str


def relative_dir(version: str, language: str, resource_type: str, is_image: bool = False) -> str:
    ## images look the same in every language, so they live once per version
    if is_image:
        return f"{UPLOAD_ROOT}/{version}/{resource_type}_img"
    return f"{UPLOAD_ROOT}/{version}/{language}/{resource_type}"


class PathResolver:
    """
    Maps (version, language, resource type, filename) to the on-disk layout:

        upload/{version}/{language}/{type}/{type}.json   documents
        upload/{version}/{type}_img/{filename}           images

    The only side effect is creating the target directory.
    """
    def __init__(self, base_dir: Path | str):
        self.base_dir = Path(base_dir)

    def resolve_dir(self, version: str, language: str, resource_type: str, is_image: bool = False) -> ResolvedDir:
        rel_dir = relative_dir(version, language, resource_type, is_image)
        abs_dir = self.base_dir / rel_dir
        abs_dir.mkdir(parents=True, exist_ok=True)
        return ResolvedDir(rel_dir=rel_dir, abs_dir=abs_dir)

    def resolve_in(self, directory: ResolvedDir, filename: str) -> ResolvedPath:
        rel_path = str(PurePosixPath(directory.rel_dir) / filename)
        abs_path = directory.abs_dir / filename
        # rune icons carry sub folders, e.g. perk-images/Styles/7200_Domination.png
        abs_path.parent.mkdir(parents=True, exist_ok=True)
        return ResolvedPath(
            rel_dir=directory.rel_dir,
            abs_dir=directory.abs_dir,
            rel_path=rel_path,
            abs_path=abs_path,
            filename=filename,
        )

    def resolve(
        self,
        version: str,
        language: str,
        resource_type: str,
        filename: Optional[str] = None,
        is_image: bool = False,
    ) -> ResolvedPath:
        if not filename:
            filename = f"{resource_type}.json"
        directory = self.resolve_dir(version, language, resource_type, is_image)
        return self.resolve_in(directory, filename)

    def image_candidate(self, version: str, resource_type: str, filename: str) -> Path:
        """Absolute image path for `version` without creating anything."""
        return self.base_dir / relative_dir(version, "", resource_type, True) / filename
