"""
The extract-apk command: extracts the APKs matching a device spec from an APK set.
"""
from dataclasses import dataclass
from pathlib import Path

# core imports

from .extract_apks import ExtractApksCommand

# utility imports

from bundle_inspect.utils.cli_tools import getRequiredValue, verbosePrint
from bundle_inspect.utils.device_spec import parseDeviceSpecJson
from bundle_inspect.utils.exceptions import CommandExecutionException
from bundle_inspect.utils.file_preconditions import checkDirectoryOrAbsent, checkFileExistsAndReadable


@dataclass(frozen=True)
class ExtractApksToPathCommand:
    """Extracts APKs for a given device-spec and outputs them to a specified directory."""

    apksArchivePath: Path
    deviceSpecPath: Path
    outputDirectory: Path

    @staticmethod
    def fromFlags(flags):
        apksArchivePath = getRequiredValue(flags, "apks")
        deviceSpecPath = getRequiredValue(flags, "device-spec")
        outputDirectory = getRequiredValue(flags, "output-dir")

        return ExtractApksToPathCommand(Path(apksArchivePath), Path(deviceSpecPath), Path(outputDirectory))

    def execute(self):
        self.validateInput()

        deviceSpec = readDeviceSpec(self.deviceSpecPath)
        verbosePrint("[+] Extracting APKs from " + str(self.apksArchivePath) + " to " + str(self.outputDirectory))

        try:
            return ExtractApksCommand(self.apksArchivePath, deviceSpec, self.outputDirectory).execute()
        except Exception as e:
            raise CommandExecutionException("Failed to extract APKs to the specified path.") from e

    def validateInput(self):
        checkFileExistsAndReadable(self.apksArchivePath)
        checkFileExistsAndReadable(self.deviceSpecPath)
        checkDirectoryOrAbsent(self.outputDirectory)


def readDeviceSpec(deviceSpecPath):
    try:
        with open(deviceSpecPath, "r", encoding="utf-8") as f:
            deviceSpecJson = f.read()
        return parseDeviceSpecJson(deviceSpecJson)
    except (OSError, ValueError) as e:
        raise CommandExecutionException(
            "Failed to read device-spec.json from '%s'.", deviceSpecPath, path=deviceSpecPath) from e
