from importlib.metadata import PackageNotFoundError, version

try:
    version = version("VHexIO")
except PackageNotFoundError:
    version = "0.0.0"
