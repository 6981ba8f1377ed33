"""
Main entry point for the bundle-inspect tool.
"""
import sys
from packaging.version import InvalidVersion, parse as parse_version

#   core imports

from bundle_inspect.core import DumpSdkBundleCommand, ExtractApksToPathCommand
from bundle_inspect.core.bundle_tool import BundleTool

#   utility imports

from bundle_inspect.config.constants import DUMP_SDK_BUNDLE_COMMAND, EXTRACT_APK_COMMAND, MIN_BUNDLETOOL_VERSION
from bundle_inspect.utils.cli_tools import abort, configureOutput, dbgPrint, getArgs, isDebugOutput, verbosePrint, warningPrint
from bundle_inspect.utils.exceptions import BundleInspectException

COMMANDS = {
    DUMP_SDK_BUNDLE_COMMAND: DumpSdkBundleCommand,
    EXTRACT_APK_COMMAND: ExtractApksToPathCommand,
}


def checkBundletoolVersion():
    try:
        bundletoolVersion = BundleTool.getBundletoolVersion()
    except (RuntimeError, InvalidVersion) as e:
        warningPrint(f"[!] Could not determine the bundletool version ({e}).")
        return
    verbosePrint(f"[+] Using bundletool v{bundletoolVersion}")
    if bundletoolVersion < parse_version(MIN_BUNDLETOOL_VERSION):
        warningPrint(f"[!] bundletool v{bundletoolVersion} is older than v{MIN_BUNDLETOOL_VERSION}, output may differ.")


def main(argv=None):
    # Grab argz
    args = getArgs(argv)
    configureOutput(verbose=args.verbose, debug=args.debug_output)

    try:
        command = COMMANDS[args.command].fromFlags(args)

        # Validate before looking for bundletool, execute() validates again on its own
        command.validateInput()

        # Check that bundletool is available
        BundleTool.checkAvailable()
        checkBundletoolVersion()

        result = command.execute()
    except BundleInspectException as e:
        cause = e.cause
        while isDebugOutput() and cause is not None:
            dbgPrint(f"Caused by: {type(cause).__name__}: {cause}")
            cause = cause.__cause__
        abort("Error: " + e.message + ("" if isDebugOutput() or e.cause is None else "\nCause: " + str(e.cause)))

    if args.command == EXTRACT_APK_COMMAND:
        print(f"[+] Extracted {len(result)} APK(s) to {args.output_dir}", file=sys.stderr)
    return 0


if __name__ == '__main__':
    sys.exit(main())
