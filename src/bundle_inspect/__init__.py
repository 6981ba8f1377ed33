"""bundle-inspect - Dump Android SDK bundles and extract device-specific APKs."""

__version__ = "0.1.0"
