"""Release command logic, independent of the CLI framework."""

from .release import (
    ReleaseService,
    RunOptions,
    list_files,
    validate_create_release,
    validate_list_files,
    validate_update_release,
    validate_upload_assets,
)

__all__ = [
    "ReleaseService",
    "RunOptions",
    "list_files",
    "validate_create_release",
    "validate_list_files",
    "validate_update_release",
    "validate_upload_assets",
]
