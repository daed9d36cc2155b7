"""Exceptions raised by PV Organizer"""


class PVOrgError(Exception):
    """Base class for application errors"""


class ConfigError(PVOrgError):
    """The configuration document is missing, unreadable or malformed"""


class ThumbnailDirectoryError(PVOrgError):
    """The thumbnail output directory could not be created"""
