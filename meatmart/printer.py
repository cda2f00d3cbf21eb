"""Send receipts to a CUPS printer using lpr."""

from __future__ import annotations

import shutil
import subprocess


class Printer:
    """Print plain text with the system lpr command."""

    @staticmethod
    def print_text(text: str, printer_name: str | None = None) -> None:
        """Pipe text to lpr.

        Args:
            text: Content to print, typically a formatted receipt.
            printer_name: Specific printer name. Uses default if None.

        Raises:
            RuntimeError: If lpr is not available or printing fails.
        """
        if shutil.which("lpr") is None:
            raise RuntimeError(
                "lpr command not found. Check that CUPS is installed:\n"
                "  Ubuntu/Debian: sudo apt install cups\n"
                "  Fedora/RHEL:   sudo dnf install cups"
            )

        cmd = ["lpr"]
        if printer_name:
            cmd.extend(["-P", printer_name])

        try:
            result = subprocess.run(
                cmd,
                input=text,
                capture_output=True,
                text=True,
                timeout=30,
            )
        except subprocess.TimeoutExpired:
            raise RuntimeError("Print job timed out.")
        if result.returncode != 0:
            raise RuntimeError(f"Printing failed: {result.stderr.strip()}")
