from importlib.metadata import PackageNotFoundError, version

try:
    version = version("StreamTok")
except PackageNotFoundError:
    version = "0.0.0"
