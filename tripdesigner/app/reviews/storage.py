"""Local file storage for review images."""

import logging
import uuid
from pathlib import Path, PurePath

logger = logging.getLogger(__name__)

IMAGES_SUBDIR = "images"


class LocalImageStorage:
    """Writes uploaded images under <root>/images and returns their public path."""

    def __init__(self, root: str | Path) -> None:
        self._images_dir = Path(root) / IMAGES_SUBDIR

    @property
    def images_dir(self) -> Path:
        return self._images_dir

    def save(self, filename: str, content: bytes) -> str:
        """Store image bytes under a unique name.

        Only the base name of the client-supplied filename is kept.

        Args:
            filename: Original upload filename
            content: Image bytes

        Returns:
            Public path of the stored image, e.g. "/images/<uuid>_photo.jpg"
        """
        # Client filenames may carry either separator style
        base_name = PurePath(filename.replace("\\", "/")).name or "upload"
        stored_name = f"{uuid.uuid4()}_{base_name}"

        self._images_dir.mkdir(parents=True, exist_ok=True)
        (self._images_dir / stored_name).write_bytes(content)

        logger.info(f"[reviews.storage] stored {stored_name} ({len(content)} bytes)")
        return f"/{IMAGES_SUBDIR}/{stored_name}"

    def delete(self, public_path: str) -> None:
        """Remove an image stored by save(); missing files are ignored."""
        stored = self._images_dir / PurePath(public_path).name
        stored.unlink(missing_ok=True)
        logger.info(f"[reviews.storage] removed {stored.name}")
