"""netrose-scaffold: NetRose storage API client boilerplate generator."""

from importlib.metadata import PackageNotFoundError, version

from netrose_scaffold._types import BoilerplateKind
from netrose_scaffold.errors import (
    DirectoryCreationFailed,
    OutputAlreadyExists,
    ScaffoldError,
    TemplateNotFound,
    TemplateUnreadable,
    WriteFailed,
)
from netrose_scaffold.scaffolder import PlannedFile, generate, plan
from netrose_scaffold.specs import TemplateSpec

try:
    __version__ = version("netrose-scaffold")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "BoilerplateKind",
    "DirectoryCreationFailed",
    "OutputAlreadyExists",
    "PlannedFile",
    "ScaffoldError",
    "TemplateNotFound",
    "TemplateSpec",
    "TemplateUnreadable",
    "WriteFailed",
    "generate",
    "plan",
]
