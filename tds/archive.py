"""Packing files and directories into .tar.gz archives and back."""

from __future__ import annotations

import os
import shutil
import tarfile
from pathlib import Path


def compress(file_path: str | Path, dest: str | Path) -> None:
    """Write file_path (a file or directory tree) to dest as a gzipped tar.

    Members are named '/<dir>/.../<file>'; directories get no entries.
    """
    source = Path(file_path)
    source.stat()
    with tarfile.open(dest, "w:gz", dereference=True) as tar:
        _add(tar, source, "")


def _add(tar: tarfile.TarFile, path: Path, prefix: str) -> None:
    name = path.name or path.resolve().name
    if path.is_dir():
        inner = f"{prefix}/{name}"
        for child in sorted(path.iterdir()):
            _add(tar, child, inner)
        return
    info = tar.gettarinfo(str(path), arcname=name)
    info.name = f"{prefix}/{name}"
    with open(path, "rb") as handle:
        tar.addfile(info, handle)


def decompress(tar_file: str | Path, dest: str | Path) -> None:
    """Extract a gzipped tar, placing each member at dest + member name."""
    with tarfile.open(tar_file, "r:gz") as tar:
        for member in tar:
            target = f"{dest}{member.name}"
            if member.isdir():
                os.makedirs(target, exist_ok=True)
                continue
            parent = os.path.dirname(target)
            if parent:
                os.makedirs(parent, exist_ok=True)
            content = tar.extractfile(member)
            with open(target, "wb") as sink:
                if content is not None:
                    shutil.copyfileobj(content, sink)