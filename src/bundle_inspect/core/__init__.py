"""Core package for the bundle-inspect commands."""

from .dump_sdk_bundle_command import DumpSdkBundleCommand, DumpTarget
from .extract_apks_to_path_command import ExtractApksToPathCommand

__all__ = ["DumpSdkBundleCommand", "DumpTarget", "ExtractApksToPathCommand"]
