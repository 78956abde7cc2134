"""Static file contents written into generated projects."""

from .env import EnvGroup, env_groups_for, render_env_file

__all__ = ["EnvGroup", "env_groups_for", "render_env_file"]
