import importlib.metadata

try:
    VERSION = importlib.metadata.version("regdump")
except importlib.metadata.PackageNotFoundError:
    # Running from a source checkout without an installed distribution.
    VERSION = "0.0.0-dev"
