"""``.gitignore``-aware directory copying."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Iterable

import pathspec

from mavenhost.modules.artifactrepo.domain.constants import GITIGNORE_FILENAME

log = logging.getLogger(__name__)

DIR_MODE = 0o755
FILE_MODE = 0o644


class IgnoreRules:
    """Patterns read from a ``.gitignore``, matched with git's own semantics.

    The ``.gitignore`` file itself never matches, so it is always copied.
    """

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        self.spec = pathspec.GitIgnoreSpec.from_lines(list(patterns))

    @classmethod
    def from_directory(cls, root: Path) -> "IgnoreRules":
        path = Path(root) / GITIGNORE_FILENAME
        if not path.is_file():
            return cls()
        return cls(path.read_text(encoding="utf-8", errors="ignore").splitlines())

    def __bool__(self) -> bool:
        return bool(self.spec.patterns)

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if rel_path == GITIGNORE_FILENAME:
            return False
        # a trailing slash lets directory-only patterns apply
        return self.spec.match_file(rel_path + "/" if is_dir else rel_path)


def _chmod(path: Path, mode: int) -> None:
    try:
        os.chmod(path, mode)
    except OSError:
        # not supported on every filesystem
        pass


def copy_tree(source: Path, dest: Path, rules: IgnoreRules | None = None, skip_root_names: Iterable[str] = ()) -> int:
    """Copy ``source`` into ``dest`` and return the number of files copied.

    Ignored directories are pruned, so their descendants are skipped as well.
    """
    rules = rules or IgnoreRules()
    skipped = set(skip_root_names)
    copied = 0
    source = Path(source)
    for current, dirs, files in os.walk(source):
        rel_dir = Path(current).relative_to(source)
        dirs[:] = sorted(d for d in dirs if not rules.matches((rel_dir / d).as_posix(), True))
        target_dir = dest / rel_dir
        target_dir.mkdir(parents=True, exist_ok=True)
        _chmod(target_dir, DIR_MODE)
        for name in sorted(files):
            rel = (rel_dir / name).as_posix()
            if rel in skipped or rules.matches(rel, False):
                continue
            target = target_dir / name
            shutil.copyfile(Path(current) / name, target)
            _chmod(target, FILE_MODE)
            copied += 1
    return copied
