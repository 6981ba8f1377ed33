"""
The dump-sdk-bundle command: prints files or values from an SDK bundle.
"""
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional

# core imports

from .dump_manager import DumpSdkBundleManager
from .resource_predicate import compileResourcePredicate, parseResourceFlag

# utility imports

from bundle_inspect.utils.cli_tools import getRequiredValue, getValue
from bundle_inspect.utils.exceptions import InvalidCommandException
from bundle_inspect.utils.file_preconditions import checkFileExistsAndReadable


class DumpTarget(Enum):
    """Target of the dump."""

    MANIFEST = "manifest"
    RESOURCES = "resources"
    CONFIG = "config"

    def __str__(self):
        return self.value

    @classmethod
    def fromString(cls, subCommand):
        dumpTarget = SUBCOMMAND_TO_TARGET.get(subCommand)
        if dumpTarget is None:
            raise InvalidCommandException(
                "Unrecognized dump target: '%s'. Accepted values are: [%s]",
                subCommand, ", ".join(SUBCOMMAND_TO_TARGET))
        return dumpTarget


SUBCOMMAND_TO_TARGET = {str(target): target for target in DumpTarget}


@dataclass(frozen=True)
class DumpSdkBundleCommand:
    """
    Command that prints information about a given Android SDK Bundle.

    Built once through ``DumpSdkBundleCommand.builder()`` or ``fromFlags()``
    and never modified afterwards. ``resourceId`` and ``resourceName`` are
    mutually exclusive; both only apply when dumping resources, as does
    ``printValues``. ``xPathExpression`` only applies to the manifest.
    """

    bundlePath: Path
    outputStream: Any
    dumpTarget: DumpTarget
    xPathExpression: Optional[str] = None
    resourceId: Optional[int] = None
    resourceName: Optional[str] = None
    printValues: Optional[bool] = None

    @staticmethod
    def builder():
        return DumpSdkBundleCommand.Builder()

    class Builder:
        """Builder for the ``DumpSdkBundleCommand``."""

        def __init__(self):
            self._fields = {}

        def setBundlePath(self, bundlePath):
            self._fields["bundlePath"] = Path(bundlePath)
            return self

        def setOutputStream(self, outputStream):
            self._fields["outputStream"] = outputStream
            return self

        def setDumpTarget(self, dumpTarget):
            self._fields["dumpTarget"] = dumpTarget
            return self

        def setXPathExpression(self, xPathExpression):
            """Sets the XPath expression used to extract only part of the XML file being printed."""
            self._fields["xPathExpression"] = xPathExpression
            return self

        def setResourceId(self, resourceId):
            """Sets the ID of the resource to print. Mutually exclusive with setResourceName()."""
            self._fields["resourceId"] = resourceId
            return self

        def setResourceName(self, resourceName):
            """
            Sets the name of the resource to print, in the format "<type>/<name>",
            e.g. "drawable/icon". Mutually exclusive with setResourceId().
            """
            self._fields["resourceName"] = resourceName
            return self

        def setPrintValues(self, printValues):
            self._fields["printValues"] = printValues
            return self

        def build(self):
            missing = [name for name in ("bundlePath", "dumpTarget") if name not in self._fields]
            if missing:
                raise ValueError("Missing required properties: " + ", ".join(missing))
            fields = dict(self._fields)
            fields.setdefault("outputStream", sys.stdout)
            return DumpSdkBundleCommand(**fields)

    @staticmethod
    def fromFlags(flags):
        dumpTarget = parseDumpTarget(flags)

        bundlePath = getRequiredValue(flags, "bundle")
        xPath = getValue(flags, "xpath")
        printValues = getValue(flags, "values")
        resourceId, resourceName = parseResourceFlag(getValue(flags, "resource"))

        dumpCommand = DumpSdkBundleCommand.builder().setBundlePath(bundlePath).setDumpTarget(dumpTarget)
        if xPath is not None:
            dumpCommand.setXPathExpression(xPath)
        if printValues is not None:
            dumpCommand.setPrintValues(printValues)
        if resourceId is not None:
            dumpCommand.setResourceId(resourceId)
        if resourceName is not None:
            dumpCommand.setResourceName(resourceName)

        return dumpCommand.build()

    def execute(self):
        self.validateInput()

        if self.dumpTarget is DumpTarget.CONFIG:
            DumpSdkBundleManager(self.outputStream, self.bundlePath).printBundleConfig()

        elif self.dumpTarget is DumpTarget.MANIFEST:
            DumpSdkBundleManager(self.outputStream, self.bundlePath).printManifest(self.xPathExpression)

        elif self.dumpTarget is DumpTarget.RESOURCES:
            DumpSdkBundleManager(self.outputStream, self.bundlePath).printResources(
                self.resourcePredicate(), bool(self.printValues))

    def validateInput(self):
        checkFileExistsAndReadable(self.bundlePath)

        if self.resourceId is not None and self.resourceName is not None:
            raise InvalidCommandException("Cannot pass both resource ID and resource name. Pick one!")
        if self.dumpTarget is DumpTarget.RESOURCES and self.xPathExpression is not None:
            raise InvalidCommandException("Cannot pass an XPath expression when dumping resources.")
        if self.dumpTarget is not DumpTarget.MANIFEST and self.xPathExpression is not None:
            raise InvalidCommandException("The XPath expression can only be passed when dumping the manifest.")
        if self.dumpTarget is not DumpTarget.RESOURCES and (
                self.resourceId is not None or self.resourceName is not None):
            raise InvalidCommandException("The resource name/id can only be passed when dumping resources.")
        if self.dumpTarget is not DumpTarget.RESOURCES and self.printValues is not None:
            raise InvalidCommandException("Printing resource values can only be requested when dumping resources.")

        # Compiling checks the <type>/<name> grammar
        if self.dumpTarget is DumpTarget.RESOURCES:
            self.resourcePredicate()

    def resourcePredicate(self):
        return compileResourcePredicate(self.resourceId, self.resourceName)


def parseDumpTarget(flags):
    subCommand = getValue(flags, "target")
    if subCommand is None:
        raise InvalidCommandException("Target of the dump not found.")
    return DumpTarget.fromString(subCommand)
