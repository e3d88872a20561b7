"""JSON folder repository - one file per entity, cached in memory."""

import logging
import threading
import uuid
from pathlib import Path
from typing import Optional, List

from pydantic import ValidationError

from blogdata.exceptions import EntityNotLoadedError, InvalidEntityIdError, SaveIOError
from blogdata.models.entities import E, EntityDescriptor
from blogdata.repositories.base import Repository

logger = logging.getLogger(__name__)


class JsonFileRepository(Repository[E]):
    """
    Repository for one entity type stored as <folder>/<id>.json.

    The folder is read lazily on the first call that needs it. Saves and
    deletes write through to disk and then update the cache. clear_cache()
    drops the cache so the next call reloads from disk.

    All cache access happens under a per-repository lock, so one instance can
    be shared between threads.
    """

    def __init__(self, data_path: Path, descriptor: EntityDescriptor[E]):
        self.folder = Path(data_path) / descriptor.folder
        self.descriptor = descriptor
        self._cache: Optional[List[E]] = None
        self._lock = threading.RLock()

    @property
    def is_loaded(self) -> bool:
        """True once the folder has been read and not cleared since."""
        return self._cache is not None

    def path_for(self, id: str) -> Path:
        """File that holds the entity with this ID.

        Raises:
            InvalidEntityIdError: If the ID is not a plain file name, so the
                file would land outside this repository's folder
        """
        if not id or id in (".", "..") or "\\" in id or Path(id).name != id:
            raise InvalidEntityIdError(self.descriptor.name, id)
        return self.folder / self.descriptor.file_name(id)

    def ensure_loaded(self) -> None:
        """Read every document in the folder into the cache, if not done yet."""
        with self._lock:
            if self._cache is not None:
                return
            self._cache = self._load_folder()

    def list(self) -> List[E]:
        """List all cached entities, in load order followed by new saves."""
        with self._lock:
            self.ensure_loaded()
            if self._cache is None:
                return []
            return list(self._cache)

    def get(self, id: str) -> Optional[E]:
        """Get entity by ID. Returns None when no entity has that ID."""
        with self._lock:
            self.ensure_loaded()
            if self._cache is None:
                raise EntityNotLoadedError(self.descriptor.name)
            return next((item for item in self._cache if item.id == id), None)

    def count(self) -> int:
        with self._lock:
            self.ensure_loaded()
            return len(self._cache) if self._cache is not None else 0

    def save(self, entity: E) -> E:
        """
        Write entity to <folder>/<id>.json and upsert it in the cache.

        An empty ID is replaced with a new UUID, set on the entity only once
        the file is written. The file is fully overwritten. If the write
        fails, SaveIOError is raised and neither the entity nor the cache
        changes. An ID that is not a plain file name raises
        InvalidEntityIdError.
        """
        with self._lock:
            self.ensure_loaded()

            entity_id = entity.id or str(uuid.uuid4())
            path = self.path_for(entity_id)
            stored = entity.model_copy(update={"id": entity_id})
            try:
                self.folder.mkdir(parents=True, exist_ok=True)
                path.write_text(stored.to_json(), encoding='utf-8')
            except OSError as e:
                raise SaveIOError(path, e.strerror or str(e)) from e

            entity.id = entity_id

            if self._cache is None:
                self._cache = []

            for index, cached in enumerate(self._cache):
                if cached.id == entity.id:
                    self._cache[index] = entity
                    break
            else:
                self._cache.append(entity)

            logger.debug("Saved %s %s", self.descriptor.name, entity.id)
            return entity

    def delete(self, id: str) -> bool:
        """
        Delete entity file and drop it from the cache.

        Deletion is best-effort: a missing file or a failed removal is logged
        and otherwise ignored, and the call always reports success. An ID that
        is not a plain file name never touches the disk.
        """
        with self._lock:
            self.ensure_loaded()

            try:
                path = self.path_for(id)
                path.unlink()
            except InvalidEntityIdError:
                logger.warning("Refusing to delete %s with invalid ID %r", self.descriptor.name, id)
            except FileNotFoundError:
                logger.debug("No file to delete for %s %s", self.descriptor.name, id)
            except OSError as e:
                logger.warning("Could not delete %s %s: %s", self.descriptor.name, id, e)

            if self._cache is not None:
                for index, cached in enumerate(self._cache):
                    if cached.id == id:
                        del self._cache[index]
                        break

            return True

    def clear_cache(self) -> None:
        """Forget cached entities. Files on disk are not touched."""
        with self._lock:
            self._cache = None

    def _load_folder(self) -> List[E]:
        """Parse every readable document in the folder, skipping bad ones."""
        items: List[E] = []

        try:
            entries = sorted(self.folder.iterdir())
        except FileNotFoundError:
            logger.debug("No %s folder at %s", self.descriptor.name, self.folder)
            return items
        except OSError as e:
            logger.warning("Could not list %s: %s", self.folder, e)
            return items

        for path in entries:
            if not path.is_file():
                continue
            try:
                items.append(self.descriptor.parse(path.read_text(encoding='utf-8')))
            except (OSError, UnicodeDecodeError, ValidationError) as e:
                logger.warning("Skipping unreadable %s file %s: %s", self.descriptor.name, path, e)

        logger.debug("Loaded %d %s from %s", len(items), self.descriptor.name, self.folder)
        return items
