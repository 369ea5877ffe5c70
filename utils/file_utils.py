"""
File Utilities Module
Locating, reading and writing JSX template files.
"""

import os
from pathlib import Path
from typing import List

JSX_EXTENSIONS = ('.jsx', '.tsx')


def normalize_path(path: str | Path) -> Path:
    """Convert string path to normalized Path object."""
    return Path(path).expanduser().resolve()


def is_hidden(path: Path) -> bool:
    return path.name.startswith('.')


def collect_jsx_files(path: str | Path) -> List[Path]:
    """
    Collect JSX template files.

    Args:
        path: A single file, or a directory scanned recursively

    Returns:
        Sorted list of matching files; hidden files and directories are skipped
    """
    base_path = normalize_path(path)
    if base_path.is_file():
        return [base_path]

    matching_files = []
    for root, dirs, files in os.walk(base_path):
        dirs[:] = [d for d in dirs if not is_hidden(Path(root) / d)]
        for file in files:
            file_path = Path(root) / file
            if not is_hidden(file_path) and file.lower().endswith(JSX_EXTENSIONS):
                matching_files.append(file_path)
    return sorted(matching_files)


def read_file_content(file_path: str | Path) -> str:
    """
    Read a template file as UTF-8, tolerating a byte order mark.

    Raises:
        FileNotFoundError: If file doesn't exist
    """
    with open(file_path, 'r', encoding='utf-8-sig') as f:
        return f.read()


def write_file_content(file_path: str | Path, content: str) -> Path:
    """Write text, creating parent directories as needed."""
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding='utf-8')
    return path
