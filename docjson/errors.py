"""Exceptions raised when a collaborator of the build fails."""

from typing import Optional


class DocJSONError(RuntimeError):
    """Base class for docjson build failures."""


class ExtractionError(DocJSONError):
    """The component metadata extractor failed on a source file."""

    def __init__(self, message: str, file_name: Optional[str] = None):
        super().__init__(message)
        self.file_name = file_name


class ModuleDocError(DocJSONError):
    """The module documentation tool failed or produced unusable output."""

    def __init__(self, message: str, returncode: Optional[int] = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
