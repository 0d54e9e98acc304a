"""Concurrent reading of transaction and script directories."""

import asyncio
import os
from pathlib import Path
from typing import Awaitable, Iterable, List, Sequence, TypeVar, Union

from .exceptions import SourceDirectoryError, SourceFileError
from .logging import get_logger
from .types import SourceFile

logger = get_logger(__name__)

T = TypeVar("T")


async def gather_or_cancel(awaitables: Iterable[Awaitable[T]]) -> List[T]:
    """
    Await all awaitables concurrently, failing as a unit.

    On the first failure every task still pending is cancelled and awaited
    before the failure is re-raised, so nothing keeps running in the background.

    Returns:
        Results in the order the awaitables were given
    """
    tasks = [asyncio.ensure_future(aw) for aw in awaitables]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


def _list_files(directory: Path) -> List[Path]:
    """List direct child files of a directory, skipping subdirectories."""
    files = []
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.is_dir():
                logger.debug("Skipping subdirectory %s", entry.path)
                continue
            files.append(Path(entry.path))
    return files


async def read_source_file(path: Path) -> SourceFile:
    """
    Read one file's raw bytes on a worker thread.

    Raises:
        SourceFileError: If the file cannot be read
    """
    try:
        content = await asyncio.to_thread(path.read_bytes)
    except OSError as e:
        raise SourceFileError(e.errno, f"Cannot read source file: {e.strerror}", str(path)) from e
    return SourceFile(name=path.name, content=content)


async def read_directory(directory: Union[Path, str]) -> List[SourceFile]:
    """
    Read every direct child file of a directory.

    Args:
        directory: Directory containing Cadence files

    Returns:
        List of SourceFile in listing order (not sorted); empty for an empty directory

    Raises:
        SourceDirectoryError: If the directory does not exist or cannot be listed
        SourceFileError: If any contained file cannot be read
    """
    directory = Path(directory)
    try:
        paths = await asyncio.to_thread(_list_files, directory)
    except OSError as e:
        raise SourceDirectoryError(
            e.errno, f"Cannot read source directory: {e.strerror}", str(directory)
        ) from e

    logger.debug("Reading %d file(s) from %s", len(paths), directory)
    if not paths:
        return []

    return await gather_or_cancel(read_source_file(path) for path in paths)


async def read_directories(directories: Sequence[Union[Path, str]]) -> List[SourceFile]:
    """
    Read several directories concurrently and flatten their files.

    Files keep the order of the directories they came from.
    """
    per_directory = await gather_or_cancel(read_directory(d) for d in directories)
    return [source for files in per_directory for source in files]
