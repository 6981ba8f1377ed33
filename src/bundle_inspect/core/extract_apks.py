"""
Extraction of the APKs matching a device out of an APK set, done by bundletool.
"""
import os
import tempfile
import zipfile
from progress.bar import Bar

# core imports
from .bundle_tool import BundleTool

# utility imports

from bundle_inspect.utils.cli_tools import verbosePrint
from bundle_inspect.utils.exceptions import CommandExecutionException


class ExtractApksCommand:
    """Runs 'bundletool extract-apks' for an already decoded device spec."""

    def __init__(self, apksArchivePath, deviceSpec, outputDirectory):
        self.apksArchivePath = apksArchivePath
        self.deviceSpec = deviceSpec
        self.outputDirectory = outputDirectory

    def execute(self):
        before = self.snapshotApks()

        # bundletool only takes the device spec as a file
        with tempfile.TemporaryDirectory() as tmppath:
            specPath = os.path.join(tmppath, "device-spec.json")
            with open(specPath, "w", encoding="utf-8") as f:
                f.write(self.deviceSpec.toJson())

            result = BundleTool.runBundleTool([
                "extract-apks",
                f"--apks={self.apksArchivePath}",
                f"--device-spec={specPath}",
                f"--output-dir={self.outputDirectory}",
            ])
        if not result["ok"]:
            raise CommandExecutionException(
                "bundletool extract-apks exited with code %d: %s",
                result["returncode"], result["stderr"].strip(), path=self.apksArchivePath)

        after = self.snapshotApks()
        # Only files bundletool wrote count, the output directory may already hold other APKs
        written = sorted(path for path, stamp in after.items() if before.get(path) != stamp)
        return self.verifyExtractedApks(written)

    def snapshotApks(self):
        """Map each APK path in the output directory to its (mtime, size)."""
        if not os.path.isdir(self.outputDirectory):
            return {}
        snapshot = {}
        for f in os.listdir(self.outputDirectory):
            if f.lower().endswith(".apk"):
                path = os.path.join(self.outputDirectory, f)
                st = os.stat(path)
                snapshot[path] = (st.st_mtime_ns, st.st_size)
        return snapshot

    def verifyExtractedApks(self, apks):
        if not apks:
            return apks

        bar = Bar('[+] Verifying extracted APKs', max=len(apks))
        verboseOutput = ""
        for apkpath in apks:
            bar.next()
            if not zipfile.is_zipfile(apkpath):
                bar.finish()
                raise CommandExecutionException("Extracted file '%s' is not a valid APK.", apkpath, path=apkpath)
            verboseOutput += "\nExtracted: " + apkpath
        bar.finish()

        verbosePrint(verboseOutput)
        return apks
