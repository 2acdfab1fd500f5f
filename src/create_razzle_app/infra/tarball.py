"""Infrastructure: tarball download and selective extraction.

Shared by the GitHub, official-example and npm strategies.  All three
produce a gzip tarball whose members live under a single top-level
directory (``<owner>-<repo>-<sha>/`` for GitHub, ``package/`` for npm);
that directory is stripped and an optional sub-directory is selected.

Rules
-----
* Only regular files and directories are written; links and device
  entries are skipped.
* Members with absolute paths or ``..`` components abort the
  extraction.
"""

from __future__ import annotations

import shutil
import tarfile
from pathlib import Path, PurePosixPath

import httpx

from create_razzle_app.exceptions import ExampleNotFoundError, RetrievalError

_CHUNK_SIZE: int = 8192


def download_file(client: httpx.Client, url: str, target: Path) -> Path:
    """Stream *url* into *target* and return *target*.

    Raises
    ------
    ExampleNotFoundError
        When the server answers 404.
    RetrievalError
        For any other HTTP or transport failure.
    """
    try:
        with client.stream("GET", url) as response:
            if response.status_code == 404:
                raise ExampleNotFoundError(
                    f"Nothing found at {url}",
                    hint="Check the repository, branch and path of the example.",
                )
            response.raise_for_status()
            with target.open("wb") as fh:
                for chunk in response.iter_bytes(chunk_size=_CHUNK_SIZE):
                    fh.write(chunk)
    except httpx.HTTPStatusError as exc:
        raise RetrievalError(
            f"Download failed with {exc.response.status_code} for {url}",
        ) from exc
    except httpx.HTTPError as exc:
        raise RetrievalError(
            f"Could not download {url}: {exc}",
            hint="Check your network connection.",
        ) from exc
    return target


def extract_tarball(
    archive: Path,
    dest: Path,
    *,
    subdir: str | None = None,
) -> int:
    """Extract *archive* into *dest*, returning the number of files written.

    The archive's top-level directory is stripped.  When *subdir* is
    given only members below it are extracted, re-rooted at *dest*.

    Raises
    ------
    ExampleNotFoundError
        When no file lies below *subdir* (or the archive is empty).
    RetrievalError
        When the archive is corrupt or contains unsafe member names.
    """
    prefix = PurePosixPath(subdir.strip("/")).parts if subdir else ()
    written = 0

    try:
        with tarfile.open(archive, "r:*") as tar:
            for member in tar.getmembers():
                member_path = PurePosixPath(member.name)
                if member_path.is_absolute() or ".." in member_path.parts:
                    raise RetrievalError(f"Refusing unsafe archive member: {member.name}")

                relative = member_path.parts[1:]
                if relative[: len(prefix)] != prefix:
                    continue
                relative = relative[len(prefix):]
                if not relative:
                    continue

                target = dest.joinpath(*relative)
                if member.isdir():
                    target.mkdir(parents=True, exist_ok=True)
                elif member.isfile():
                    _write_member(tar, member, target)
                    written += 1
    except tarfile.TarError as exc:
        raise RetrievalError(f"Could not read archive {archive.name}: {exc}") from exc
    except OSError as exc:
        raise RetrievalError(f"Could not write project files: {exc}") from exc

    if written == 0:
        location = "/".join(prefix) if prefix else "the archive root"
        raise ExampleNotFoundError(f"No files found under {location}.")
    return written


def _write_member(tar: tarfile.TarFile, member: tarfile.TarInfo, target: Path) -> None:
    source = tar.extractfile(member)
    if source is None:
        return
    target.parent.mkdir(parents=True, exist_ok=True)
    with source, target.open("wb") as fh:
        shutil.copyfileobj(source, fh)
    if member.mode & 0o111:
        target.chmod(0o755)
