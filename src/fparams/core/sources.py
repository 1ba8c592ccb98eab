import os
from collections.abc import Iterable
from pathlib import Path

_GO_SUFFIX = ".go"

# Directory names the go tool never treats as part of a package.
_SKIPPED_DIR_NAMES = frozenset({"vendor", "testdata"})


def is_go_file(file_path: Path) -> bool:
    return file_path.suffix == _GO_SUFFIX


def _is_skipped_dir(name: str) -> bool:
    return name in _SKIPPED_DIR_NAMES or name.startswith((".", "_"))


def _walk_go_files(directory: Path) -> list[Path]:
    found: list[Path] = []
    for root, dirs, files in os.walk(directory):
        dirs[:] = sorted(d for d in dirs if not _is_skipped_dir(d))
        found.extend(Path(root) / name for name in sorted(files) if is_go_file(Path(name)))
    return found


def discover_go_files(paths: Iterable[str]) -> list[Path]:
    """Expand file and directory arguments into a de-duplicated list of Go files.

    Explicit file arguments are kept even when a directory walk would skip them.
    """
    discovered: list[Path] = []
    seen: set[Path] = set()
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            candidates = _walk_go_files(path)
        elif path.is_file():
            if not is_go_file(path):
                raise ValueError(f"Unsupported file extension: {path.suffix or path.name}")
            candidates = [path]
        else:
            raise FileNotFoundError(f"Path not found: {raw}")

        for candidate in candidates:
            key = candidate.resolve()
            if key not in seen:
                seen.add(key)
                discovered.append(candidate)
    return discovered
