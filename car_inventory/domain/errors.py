"""Errors raised while setting up or running an inventory load."""
from __future__ import annotations

from pathlib import Path


class InventoryLoadError(Exception):
    """Loading cannot proceed; the inventory stays empty."""


class InputFileMissingError(InventoryLoadError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Error: Could not open file '{path}'")
        self.path = path


class InputFileEmptyError(InventoryLoadError):
    def __init__(self, path: Path) -> None:
        super().__init__("Input file is empty")
        self.path = path


class RejectionLogError(InventoryLoadError):
    def __init__(self, path: Path) -> None:
        super().__init__("Error: Could not create error file")
        self.path = path
