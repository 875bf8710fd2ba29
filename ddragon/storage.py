import json
import os
import threading
from pathlib import Path
from typing import Any, Optional

from util.logging import setup_logger

from .errors import ReadFailure

log = setup_logger("ddragon.storage")

class LocalStore:
    """Disk side of the cache. Owns everything under the upload tree."""

    def read_if_exists(self, abs_path: Path) -> Optional[bytes]:
        path = Path(abs_path)
        if not path.exists():
            return None
        try:
            return path.read_bytes()
        except OSError as e:
            # present but unreadable (permissions, deleted under us): never a cache miss
            raise ReadFailure(str(path), f"cannot read cached file {path}: {e}") from e

    def exists(self, abs_path: Path) -> bool:
        return Path(abs_path).is_file()

    def size(self, abs_path: Path) -> int:
        path = Path(abs_path)
        try:
            return path.stat().st_size
        except OSError as e:
            raise ReadFailure(str(path), f"cannot stat cached file {path}: {e}") from e

    def write_json(self, directory: Path, filename: str, data: Any) -> Path:
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
        path = directory / filename
        self._write(path, payload)
        log.info(f"wrote {path} ({len(payload)} bytes)")
        return path

    def write_binary(self, abs_path: Path, data: bytes) -> Path:
        path = Path(abs_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self._write(path, data)
        log.info(f"wrote {path} ({len(data)} bytes)")
        return path

    def hard_link(self, existing: Path, new: Path) -> bool:
        existing, new = Path(existing), Path(new)
        try:
            if existing.resolve() == new.resolve():
                return True
            new.parent.mkdir(parents=True, exist_ok=True)
            if new.exists():
                new.unlink()
            os.link(existing, new)
        except OSError as e:
            log.warning(f"hard link {existing} -> {new} failed, falling back to a copy: {e}")
            return False
        log.info(f"linked {new} -> {existing}")
        return True

    @staticmethod
    def _write(path: Path, payload: bytes) -> None:
        # write-then-rename so a rewrite never truncates a hard-linked sibling
        tmp = path.with_name(path.name + f".tmp-{os.getpid()}-{threading.get_ident()}")
        try:
            with open(tmp, "wb") as f:
                f.write(payload)
        except Exception:
            tmp.unlink(missing_ok=True)
            raise
        os.replace(tmp, path)
