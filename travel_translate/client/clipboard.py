# File: travel_translate/client/clipboard.py

import logging
import os
import shutil
import subprocess
import sys
from typing import List, Optional

logger = logging.getLogger(__name__)


class ClipboardWriter:
    """Writes text to the system clipboard through the platform's copy tool."""

    def copy_text(self, text: str) -> bool:
        command = self._command()
        if command is None:
            logger.warning("No clipboard tool found")
            return False
        try:
            subprocess.run(command, input=text, text=True, check=True,
                           stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        except (OSError, subprocess.CalledProcessError) as e:
            logger.warning("Clipboard copy failed: %s", e)
            return False
        return True

    def _command(self) -> Optional[List[str]]:
        if sys.platform == "darwin":
            cmd = shutil.which("pbcopy")
            return [cmd] if cmd else None
        if os.environ.get("XDG_SESSION_TYPE", "").casefold() == "wayland":
            cmd = shutil.which("wl-copy")
            if cmd is not None:
                return [cmd, "--type", "text/plain"]
        cmd = shutil.which("xclip")
        if cmd is not None:
            return [cmd, "-selection", "clipboard"]
        cmd = shutil.which("xsel")
        if cmd is not None:
            return [cmd, "--clipboard", "--input"]
        return None
