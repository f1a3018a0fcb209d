"""File operations utilities for envswitch."""

import logging
import os
import shutil
import tempfile

logger = logging.getLogger(__name__)


class FileManager:
    """Manages file operations for envswitch."""

    def __init__(self, verbose: bool = False):
        """Initialize file manager."""
        self.verbose = verbose

    def replace_file(self, source_path: str, target_path: str) -> str:
        """
        Replace target file with a byte-for-byte copy of source file.

        The copy is written to a temporary file next to the target and moved
        into place with os.replace, so readers never see a truncated target.
        The copy takes the source file's permission bits. A symlinked target
        is written through: the file it points to is replaced, the link stays.
        On failure the temporary file is removed and the target is untouched.

        Args:
            source_path: File to copy from
            target_path: File to overwrite

        Returns:
            str: Path to target file

        Raises:
            OSError: If the source cannot be read or the target cannot be written
        """
        real_target = os.path.realpath(target_path)
        target_dir = os.path.dirname(real_target)
        fd, tmp_path = tempfile.mkstemp(prefix=f".{os.path.basename(real_target)}.", suffix=".tmp", dir=target_dir)
        os.close(fd)

        try:
            shutil.copyfile(source_path, tmp_path)
            shutil.copymode(source_path, tmp_path)
            os.replace(tmp_path, real_target)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

        logger.debug("Copied %s to %s", source_path, target_path)
        if self.verbose:
            print(f"Copied {source_path} -> {target_path}")

        return target_path
