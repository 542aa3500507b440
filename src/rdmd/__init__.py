"""
rdmd - Build and run single-file D programs

Launcher core: argument preprocessing and build parameter resolution.
"""

__version__ = "0.1.0"

# Re-export core models for convenience
from rdmd.core.args.models import ParsedArgs
from rdmd.core.config.models import RdmdConfig
from rdmd.core.jobs.models import BuildJob, BuildSettings

__all__ = ["BuildJob", "BuildSettings", "ParsedArgs", "RdmdConfig", "__version__"]
