from importlib import metadata

try:
    MEDIATYPES_VERSION = metadata.version("mediatypes")
except metadata.PackageNotFoundError:
    # Local run without installation
    MEDIATYPES_VERSION = "dev"
