"""
Target models — what a generate/clean operation applies to.
"""

from __future__ import annotations

import os
from typing import Literal

from pydantic import BaseModel, ConfigDict

TargetMode = Literal["file", "folder"]


class InputInfo(BaseModel):
    """The path handed to the generator and the label shown to the user."""

    model_config = ConfigDict(frozen=True)

    input_path: str
    display_name: str


class TargetResolution(BaseModel):
    """A validated target. ``target_path`` existed when it was resolved."""

    model_config = ConfigDict(frozen=True)

    target_path: str
    is_file: bool

    def input_info(self, mode: TargetMode) -> InputInfo:
        """Derive the generator input and display name for ``mode``.

        A file target in file mode is used as-is. Everything else is
        treated as a directory: the target itself when it is one, its
        parent when it is a file (folder mode on a selected file). A
        directory selected for the single-file command is also used
        as the directory itself.
        """
        if mode == "file" and self.is_file:
            return InputInfo(
                input_path=self.target_path,
                display_name=os.path.basename(self.target_path),
            )

        input_path = os.path.dirname(self.target_path) if self.is_file else self.target_path
        return InputInfo(
            input_path=input_path,
            display_name=os.path.basename(input_path.rstrip(os.sep)) or input_path,
        )
