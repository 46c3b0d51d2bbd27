"""JSON file helpers shared by the file-backed stores."""

import json
import logging
import os
import tempfile
from pathlib import Path

from ..errors import CorruptDataError, StorageError

logger = logging.getLogger(__name__)


def read_json(path: Path):
    """Read and parse a JSON file. The caller checks that it exists."""
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise CorruptDataError(f"Failed to parse {path.name}: {e}") from e
    except OSError as e:
        raise StorageError(f"Failed to read {path}: {e}") from e

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise CorruptDataError(f"Failed to parse {path.name}: {e}") from e


def _target_mode(path: Path) -> int:
    """Mode of the existing file, or the umask default for a new one."""
    try:
        return path.stat().st_mode & 0o777
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_json_atomic(path: Path, data) -> None:
    """
    Serialize data and replace path with it in one step.

    The content goes to a temporary file next to the target which is then
    moved over it, so readers see either the old or the new file.
    """
    content = json.dumps(data, indent=2, ensure_ascii=False) + "\n"

    temp_path: Path | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
        ) as temp_file:
            temp_path = Path(temp_file.name)
            temp_file.write(content)
            temp_file.flush()
            os.fsync(temp_file.fileno())
        # NamedTemporaryFile creates 0600; give the result the mode a plain write would
        os.chmod(temp_path, _target_mode(path))
        os.replace(temp_path, path)
        temp_path = None
    except OSError as e:
        raise StorageError(f"Failed to write {path}: {e}") from e
    finally:
        if temp_path is not None and temp_path.exists():
            try:
                temp_path.unlink()
            except OSError as e:
                logger.warning(f"Failed to remove temporary file {temp_path}: {e}")

    logger.debug(f"Wrote {path} ({len(content)} chars)")
