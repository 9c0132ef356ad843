"""Version information for synthdata."""

__version__ = "0.3.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history
# 0.3.0 - Explicit startup sequence, injected collaborators instead of a service registry
# 0.2.0 - Row count clamping, page chrome links, preflight check
# 0.1.0 - Initial release: hash codec and translations
