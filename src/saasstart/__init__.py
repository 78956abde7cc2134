"""Generate a Next.js SaaS starter wired for auth, payments and email.

The package validates a project name, runs ``create-next-app``, installs the
provider SDKs and overwrites a fixed set of files with boilerplate for either
Firebase or Supabase. The pieces are usable on their own: the catalog is
plain data, and the materializer writes any sequence of entries below a root.
"""

from __future__ import annotations

from .catalog import TemplateCatalog, TemplateEntry, TemplateGroup, entries_for, groups_for
from .config import ScaffoldConfig
from .errors import (
    CatalogError,
    ExternalCommandError,
    MaterializationError,
    ProjectNameError,
    ScaffoldError,
)
from .materializer import FileMaterializer, MaterializationReport, WritePolicy
from .naming import check_project_name, suggest_project_name, validate_project_name
from .orchestrator import ScaffoldOrchestrator, ScaffoldStage
from .variants import ProviderVariant

__all__ = [
    "CatalogError",
    "ExternalCommandError",
    "FileMaterializer",
    "MaterializationError",
    "MaterializationReport",
    "ProjectNameError",
    "ProviderVariant",
    "ScaffoldConfig",
    "ScaffoldError",
    "ScaffoldOrchestrator",
    "ScaffoldStage",
    "TemplateCatalog",
    "TemplateEntry",
    "TemplateGroup",
    "WritePolicy",
    "check_project_name",
    "entries_for",
    "groups_for",
    "suggest_project_name",
    "validate_project_name",
]

__version__ = "0.1.0"
