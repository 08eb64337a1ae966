from importlib.metadata import PackageNotFoundError, version

try:
    version = version("pulltok")
except PackageNotFoundError:
    version = "0.0.0"
