from pathlib import Path
from typing import List


def listing(directory: Path) -> List[str]:
    """Sorted file names in a directory"""
    return sorted(p.name for p in directory.iterdir())
