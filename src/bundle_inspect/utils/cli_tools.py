"""
Command-line interface argument handling.
"""

import argparse
import sys
from termcolor import colored

from bundle_inspect import __version__
from bundle_inspect.config.constants import DUMP_SDK_BUNDLE_COMMAND, EXTRACT_APK_COMMAND
from bundle_inspect.utils.exceptions import InvalidCommandException

DUMP_SDK_BUNDLE_EXAMPLES = """Examples:
1. Prints the AndroidManifest.xml of the SDK bundle:
$ bundle-inspect dump-sdk-bundle manifest --bundle=/tmp/sdk.asb

2. Prints the package of the SDK bundle:
$ bundle-inspect dump-sdk-bundle manifest --bundle=/tmp/sdk.asb --xpath=/manifest/@package

3. Prints all the resources present in the SDK bundle:
$ bundle-inspect dump-sdk-bundle resources --bundle=/tmp/sdk.asb

4. Prints a resource's configs from its resource ID:
$ bundle-inspect dump-sdk-bundle resources --bundle=/tmp/sdk.asb --resource=0x7f0e013a

5. Prints a resource's configs and values from its resource type & name:
$ bundle-inspect dump-sdk-bundle resources --bundle=/tmp/sdk.asb --resource=drawable/icon --values

6. Prints the content of the SDK bundle configuration file:
$ bundle-inspect dump-sdk-bundle config --bundle=/tmp/sdk.asb
"""

EXTRACT_APK_EXAMPLES = """Example:
$ bundle-inspect extract-apk --apks=/tmp/app.apks --device-spec=/tmp/device-spec.json --output-dir=/tmp/apks
"""

BOOLEAN_FLAGS = ("--values",)
EXPLICIT_VALUE_SUFFIX = "-explicit-value"

# Console verbosity, set once by main()
_output = {"verbose": False, "debug": False}


def parseBoolFlag(value):
    lowered = value.lower()
    if lowered in ("true", "1", "yes"):
        return True
    if lowered in ("false", "0", "no"):
        return False
    raise argparse.ArgumentTypeError(f"expected a boolean value, got '{value}'")


def buildParser():
    parser = argparse.ArgumentParser(
        prog="bundle-inspect",
        description="bundle-inspect - Print the content of Android SDK bundles and extract device-specific APKs."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--debug-output", help="Enable debug output.", action="store_true")
    parser.add_argument("-v", "--verbose", help="Enable verbose output.", action="store_true")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    # dump-sdk-bundle
    dump = subparsers.add_parser(
        DUMP_SDK_BUNDLE_COMMAND,
        help="Prints files or extract values from the SDK bundle in a human-readable form.",
        description="Prints files or extract values from the SDK bundle in a human-readable form.",
        epilog=DUMP_SDK_BUNDLE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    # Left unconstrained so unknown targets are reported by DumpTarget.fromString()
    dump.add_argument("target", nargs="?", metavar="{manifest,resources,config}", help="Target of the dump.")
    dump.add_argument("--bundle", metavar="sdk.asb", help="Path to the SDK Bundle.")
    dump.add_argument("--xpath", metavar="/manifest/@package",
        help="XPath expression to extract the value of attributes from the XML file being dumped. Only applies when dumping the manifest.")
    dump.add_argument("--resource", metavar="0x7f030001",
        help="Name or ID of the resource to lookup. Only applies when dumping resources. If a resource ID is provided, "
             "it can be specified either as a decimal or hexadecimal integer. If a resource name is provided, it must "
             "follow the format '<type>/<name>', e.g. 'drawable/icon'")
    dump.add_argument("--values", action="store_const", const=True, default=None,
        help="When set, also prints the values of the resources. Defaults to false. Only applies when dumping the resources. "
             "An explicit value can be given as --values=<true|false>.")
    # Target of the --values=<bool> form, see splitBooleanFlags()
    dump.add_argument("--values" + EXPLICIT_VALUE_SUFFIX, dest="values", type=parseBoolFlag, help=argparse.SUPPRESS)

    # extract-apk
    extract = subparsers.add_parser(
        EXTRACT_APK_COMMAND,
        help="Extracts APKs for a given device-spec and outputs them to a specified directory.",
        description="Extracts APKs for a given device-spec and outputs them to a specified directory.",
        epilog=EXTRACT_APK_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    extract.add_argument("--apks", metavar="app.apks", help="Path to the APK Set archive.")
    extract.add_argument("--device-spec", metavar="device-spec.json", help="Path to the device spec JSON file.")
    extract.add_argument("--output-dir", metavar="DIR", help="Directory the matching APKs are extracted to.")

    return parser


def splitBooleanFlags(argv):
    """Rewrite "--flag=<bool>" for boolean flags so a bare "--flag" never takes the next token."""
    out = []
    for token in argv:
        flag, sep, value = token.partition("=")
        if sep and flag in BOOLEAN_FLAGS:
            out.extend([flag + EXPLICIT_VALUE_SUFFIX, value])
        else:
            out.append(token)
    return out


def getArgs(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    return buildParser().parse_args(splitBooleanFlags(argv))


def getRequiredValue(flags, name):
    value = getattr(flags, name.replace("-", "_"), None)
    if value is None:
        raise InvalidCommandException("Missing the required --%s flag.", name)
    return value


def getValue(flags, name):
    return getattr(flags, name.replace("-", "_"), None)


def configureOutput(verbose=False, debug=False):
    _output["verbose"] = verbose
    _output["debug"] = debug


def isDebugOutput():
    return _output["debug"]


def abort(msg):
    print(colored(msg, "red"), file=sys.stderr)
    sys.exit(1)


def verbosePrint(msg):
    if _output["verbose"]:
        for line in msg.split("\n"):
            print(colored("    " + line, "light_grey"), file=sys.stderr)


def dbgPrint(msg):
    if _output["debug"]:
        print(msg, file=sys.stderr)

####################
# Warning print
####################
def warningPrint(msg):
    print(colored(msg, "yellow"), file=sys.stderr)
