"""Version information for jmw package"""

__version__ = "2.0.0"
__version_info__ = tuple(int(part) for part in __version__.split("."))
__author__ = "ppowo"
__license__ = "MIT"
