"""Version information for nozombie."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to CLI flags or config keys
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.2.0 - Layered config (YAML, env, flags), `list` command, delete failure summary
#         - tsconfig/jsconfig baseUrl discovery for --absolute-imports
#         - Multiple exported components in one file are treated as ambiguous
# 0.1.0 - Initial release
#         - Component discovery, usage resolution, interactive and forced deletion
