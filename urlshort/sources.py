"""
Rule file loading.
"""
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def read_file_bytes(path: Optional[str]) -> Optional[bytes]:
    """
    Read a rule file as raw bytes.

    A missing path or an unreadable file yields None, which the chain treats
    exactly like a file that was never supplied.
    """
    if not path:
        return None
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        logger.debug(f"Could not read rule file {path}: {exc}")
        return None
