"""Todo lists kept in the Django session"""

__version__ = "0.1.0"
__version_info__ = tuple([int(num) for num in __version__.split(".")])
