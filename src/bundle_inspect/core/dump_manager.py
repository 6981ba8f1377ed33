"""
Prints the content of an SDK bundle by asking bundletool for it.
"""
import re

# core imports
from .bundle_tool import BundleTool
from .resource_predicate import ResourceTableEntry

# utility imports

from bundle_inspect.config.constants import DUMP_SDK_BUNDLE_COMMAND
from bundle_inspect.utils.cli_tools import dbgPrint, verbosePrint
from bundle_inspect.utils.exceptions import CommandExecutionException

PACKAGE_LINE = re.compile(r"Package '(?P<package>[^']*)':")
ENTRY_LINE = re.compile(r"0x(?P<id>[0-9a-fA-F]+) - (?P<type>[^/\s]+)/(?P<name>\S+)")


def parseResourceListing(text):
    """
    Parse the resource listing printed by bundletool.

    Returns a list of ``(packageLine, entries)`` where each entry is a
    ``(ResourceTableEntry, lines)`` pair holding the entry's own line followed
    by its config/value lines.
    """
    packages = []
    currentEntries = None
    currentLines = None
    for line in text.splitlines():
        if PACKAGE_LINE.fullmatch(line.strip()):
            currentEntries = []
            currentLines = None
            packages.append((line, currentEntries))
            continue

        m = ENTRY_LINE.fullmatch(line.strip())
        if m and currentEntries is not None:
            entry = ResourceTableEntry(m.group("type"), m.group("name"), int(m.group("id"), 16))
            currentLines = [line]
            currentEntries.append((entry, currentLines))
        elif currentLines is not None:
            currentLines.append(line)
        elif line.strip():
            dbgPrint("[~] Ignoring unexpected line in resource listing: " + line)
    return packages


class DumpSdkBundleManager:
    """Prints the parts of an SDK bundle to an output stream."""

    def __init__(self, outputStream, bundlePath):
        self.outputStream = outputStream
        self.bundlePath = bundlePath

    def _dump(self, target, extraParams=()):
        params = [DUMP_SDK_BUNDLE_COMMAND, target, f"--bundle={self.bundlePath}", *extraParams]
        result = BundleTool.runBundleTool(params)
        if not result["ok"]:
            cause = RuntimeError(result["stderr"].strip() or f"exit code {result['returncode']}")
            raise CommandExecutionException(
                "Failed to run 'bundletool %s %s' on '%s'.", DUMP_SDK_BUNDLE_COMMAND, target, self.bundlePath,
                path=self.bundlePath) from cause
        return result["stdout"]

    def printBundleConfig(self):
        verbosePrint("[+] Dumping bundle config of " + str(self.bundlePath))
        self.outputStream.write(self._dump("config"))

    def printManifest(self, xPathExpression=None):
        verbosePrint("[+] Dumping manifest of " + str(self.bundlePath))
        extra = [f"--xpath={xPathExpression}"] if xPathExpression is not None else []
        self.outputStream.write(self._dump("manifest", extra))

    def printResources(self, resourcePredicate, printValues):
        verbosePrint("[+] Dumping resources of " + str(self.bundlePath))
        extra = ["--values"] if printValues else []
        listing = self._dump("resources", extra)

        printed = 0
        for packageLine, entries in parseResourceListing(listing):
            matching = [lines for entry, lines in entries if resourcePredicate(entry)]
            if not matching:
                continue
            self.outputStream.write(packageLine + "\n")
            for lines in matching:
                self.outputStream.write("\n".join(lines) + "\n")
            printed += len(matching)
        verbosePrint("[+] Printed " + str(printed) + " matching resources.")
