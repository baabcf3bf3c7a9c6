"""
Settings model — the user's jsongen.yml.

Everything has a default, so an empty or missing settings file gives
the stock dart_json_gen behaviour.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

DEFAULT_MAX_OUTPUT_BYTES = 10 * 1024 * 1024  # 10 MB


class GeneratorSettings(BaseModel):
    """How to find, run and recognise the output of the generator."""

    binary: str = "dart_json_gen"
    package_runner: str = "dart pub global run dart_json_annotations:dart_json_gen"
    install_command: str = "dart pub global activate dart_json_annotations"
    help_flag: str = "--help"

    source_extension: str = ".dart"
    default_suffix: str = ".gen.dart"

    config_filenames: list[str] = Field(
        default_factory=lambda: ["dart_json_gen.yaml", "dart_json_gen.yml"],
    )
    config_key: str = "generated_extension"

    # Never scanned for artifacts
    excluded_dirs: list[str] = Field(
        default_factory=lambda: [".git", "node_modules", ".dart_tool", "build"],
    )

    max_output_bytes: int = DEFAULT_MAX_OUTPUT_BYTES
    probe_timeout: int = 30

    @field_validator("source_extension", "default_suffix")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value.strip()

    @field_validator("max_output_bytes")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("must be positive")
        return value


class Settings(BaseModel):
    """Top-level settings."""

    show_notifications: bool = True
    verbose_output: bool = False
    generator: GeneratorSettings = Field(default_factory=GeneratorSettings)
