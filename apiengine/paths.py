"""Filesystem paths, directories and binary files."""

import os
from pathlib import Path

from apiengine.base import EngineError


class EnginePath:
    """A mutable filesystem path; defaults to the current working directory."""

    def __init__(self, path=None):
        self.path = Path.cwd() if path is None else Path(path)

    def __str__(self):
        return str(self.path)

    def __fspath__(self):
        return os.fspath(self.path)

    def __repr__(self):
        return f"{type(self).__name__}({str(self.path)!r})"

    def exists(self):
        return self.path.exists()

    def is_directory(self):
        return self.path.is_dir()

    def is_file(self):
        return not self.is_directory()

    def move_parent(self):
        self.path = self.path.parent

    def file_name(self):
        """File name with extension; only valid for non-directories."""
        if self.is_directory():
            raise EngineError(f"file_name is only valid for file paths: {self.path}")
        return self.path.name

    def directory_name(self):
        if not self.is_directory():
            raise EngineError(f"directory_name is only valid for directory paths: {self.path}")
        return self.path.name

    def extension(self):
        return self.path.suffix

    def move_parent_to_directory(self, name):
        """Walk up from this directory until one containing ``name`` is found.

        On success the path becomes that entry and True is returned; the
        filesystem root itself is not searched.
        """
        if not self.is_directory():
            raise EngineError("move_parent_to_directory needs a directory path")
        root = Path(self.path.anchor)
        current = self.path
        while current != root:
            candidate = current / name
            if candidate.exists():
                self.path = candidate
                return True
            parent = current.parent
            if parent == current:
                break
            current = parent
        return False

    def append(self, name):
        self.path = self.path / name


class EngineDirectory(EnginePath):
    """A directory whose contents can be listed."""

    def get_all_files(self, recursive=True):
        """All files in the directory, descending into subdirectories if asked."""
        return list(self._walk_files(self.path, recursive))

    def get_all_directories(self):
        return [EngineDirectory(entry) for entry in sorted(self.path.iterdir()) if entry.is_dir()]

    def _walk_files(self, directory, recursive):
        for entry in sorted(directory.iterdir()):
            if entry.is_dir():
                if recursive:
                    yield from self._walk_files(entry, True)
                continue
            yield EngineFile(entry)


class EngineFile(EnginePath):
    """A file that can be opened for binary reading and writing."""

    def __init__(self, path=None):
        super().__init__(path)
        self._handle = None

    @property
    def is_open(self):
        return self._handle is not None

    def open(self, mode="rb"):
        """Open the file in binary mode and return self."""
        self.close()
        if "b" not in mode:
            mode += "b"
        try:
            self._handle = open(self.path, mode)
        except OSError as exc:
            raise EngineError(f"could not open file: {self.path}") from exc
        return self

    def write(self, data):
        if not data:
            raise EngineError("cannot write zero-sized data")
        if self._handle is None:
            raise EngineError("tried to write to a file that is not open")
        self._handle.write(bytes(data))

    def read(self, size):
        if size <= 0:
            raise EngineError("cannot read zero-sized data")
        if self._handle is None:
            raise EngineError("tried to read from a file that is not open")
        return self._handle.read(size)

    def close(self):
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()