# src/task_tracker/store/json_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any, Generic, TypeVar

from ..errors import TaskTrackerError
from .errors import StoreError

logger = logging.getLogger(__name__)

EMPTY_ARRAY = "[]"
EMPTY_OBJECT = "{}"
INIT_DATA_SHAPES = (EMPTY_ARRAY, EMPTY_OBJECT)
JSON_EXTENSION = ".json"

DocT = TypeVar("DocT")


def _identity(value: Any) -> Any:
    return value


class JSONFileStore(Generic[DocT]):
    """
    Single-file JSON document store.

    The store knows nothing about what the document means. Callers that want a
    typed document (e.g. a task collection) pass two hooks:
    - encode: document -> plain JSON-compatible value (dict/list/str/...)
    - decode: plain JSON value -> document (raise ValueError/TypeError on bad data)

    Every public method opens and closes its own file handle; nothing is cached
    between calls, so two sequential loads always observe the latest file on disk.
    """

    def __init__(
        self,
        dest_dir: str | Path,
        filename: str,
        init_data: str = EMPTY_OBJECT,
        *,
        encode: Callable[[DocT], Any] | None = None,
        decode: Callable[[Any], DocT] | None = None,
    ) -> None:
        # "", Path("") and "." all normalise to "."; treat them as no directory given.
        self.dest_dir = Path(dest_dir) if str(Path(dest_dir)) != "." else None
        self.filename = filename
        self.init_data = init_data
        self._encode: Callable[[DocT], Any] = encode or _identity
        self._decode: Callable[[Any], DocT] = decode or _identity

    @property
    def filepath(self) -> Path:
        return (self.dest_dir or Path()) / self.filename

    # ---- init ----

    def init_file(self) -> Path:
        """
        Make sure the destination file exists and return its path.

        Steps (first failure wins, each reported as a StoreError):
        - init_data must be exactly "[]" or "{}"
        - filename must end in ".json"
        - destination directory is created recursively if missing
        - the file is created with init_data if missing

        An existing file is left untouched, so calling this twice is harmless.
        """
        self._validate_init_data()
        self._validate_filename()
        self._create_dest_dir()
        created = self._create_file()
        logger.info("JSONFileStore ready path=%s created=%s", self.filepath, created)
        return self.filepath

    def _validate_init_data(self) -> None:
        if self.init_data not in INIT_DATA_SHAPES:
            raise StoreError(
                "validating data structure",
                f"init data must be either '{EMPTY_ARRAY}' or '{EMPTY_OBJECT}', got {self.init_data!r}",
            )

    def _validate_filename(self) -> None:
        name = self.filename or ""
        if Path(name).name != name or Path(name).suffix != JSON_EXTENSION:
            raise StoreError(
                "validating filename",
                f"filename must be a plain file name with a '{JSON_EXTENSION}' extension, got {name!r}",
            )

    def _create_dest_dir(self) -> None:
        if self.dest_dir is None:
            raise StoreError("creating destination directory", "destination directory is empty")
        try:
            self.dest_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError("creating destination directory", str(e), cause=e) from e

    def _create_file(self) -> bool:
        try:
            with open(self.filepath, "x", encoding="utf-8") as fh:
                fh.write(self.init_data)
        except FileExistsError:
            return False
        except OSError as e:
            raise StoreError("creating file", str(e), cause=e) from e
        return True

    # ---- load ----

    def load(self, filepath: str | Path | None = None) -> DocT:
        """Read and parse the whole file. Missing, unreadable or malformed files raise StoreError."""
        path = Path(filepath) if filepath is not None else self.filepath

        try:
            fh = open(path, "rb")
        except OSError as e:
            raise StoreError("opening file in read-only mode", str(e), cause=e) from e

        with fh:
            try:
                raw = fh.read()
            except OSError as e:
                raise StoreError("reading file content", str(e), cause=e) from e

        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
            raise StoreError("unmarshalling JSON data", str(e), cause=e) from e

        try:
            document = self._decode(data)
        except (TypeError, ValueError, KeyError, TaskTrackerError) as e:
            raise StoreError("decoding document", str(e), cause=e) from e

        logger.debug("Loaded document path=%s bytes=%d", path, len(raw))
        return document

    # ---- save ----

    def save(self, document: DocT, filepath: str | Path | None = None) -> None:
        """
        Serialize the whole document and replace the file with it.

        The JSON text is fully built in memory first and written to a sibling
        temp file which then replaces the target, so a failure at any step
        leaves the previous file content in place.
        """
        path = Path(filepath) if filepath is not None else self.filepath

        try:
            payload = self._encode(document)
        except (TypeError, ValueError, KeyError, AttributeError) as e:
            raise StoreError("encoding document", str(e), cause=e) from e

        try:
            data = json.dumps(payload, ensure_ascii=False, indent=2).encode("utf-8")
        except (TypeError, ValueError, RecursionError) as e:
            # UnicodeEncodeError (lone surrogates) is a ValueError.
            raise StoreError("marshalling JSON data", str(e), cause=e) from e

        tmp = path.with_name(path.name + ".tmp")
        try:
            fh = open(tmp, "wb")
        except OSError as e:
            raise StoreError("opening file in write mode", str(e), cause=e) from e

        replaced = False
        try:
            with fh:
                fh.write(data)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp, path)
            replaced = True
        except OSError as e:
            raise StoreError("writing to file", str(e), cause=e) from e
        finally:
            if not replaced:
                with contextlib.suppress(OSError):
                    tmp.unlink()

        logger.debug("Saved document path=%s bytes=%d", path, len(data))
