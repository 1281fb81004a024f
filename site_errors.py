class StaticSiteError(Exception):
    """Base class for every error raised by this program."""


class ConfigurationError(StaticSiteError):
    """A required stack config value is missing or invalid."""


class FilesystemError(StaticSiteError):
    """The local site directory could not be listed or read."""


class ResourceError(StaticSiteError):
    """A resource declaration cannot be realized."""


class AttributeResolutionError(ResourceError):
    """
    A referenced attribute of another resource resolved to nothing.

    Raised inside an Output join, so Pulumi reports it against the
    dependent resource.
    """
