''' bundletool related functions '''

import os
import shlex
import shutil
import subprocess
from packaging.version import parse as parse_version

# util imports

from bundle_inspect.config.constants import BUNDLETOOL_ENV_VAR, DEFAULT_BUNDLETOOL_COMMAND
from bundle_inspect.utils.cli_tools import abort, dbgPrint


class BundleTool:

    '''
    BundleTool class for driving the bundletool executable.

    bundletool does the actual work of reading SDK bundles and APK sets; this
    class only builds its command line and collects what it printed.

    The command used to launch bundletool is read from the BUNDLETOOL
    environment variable (e.g. "java -jar /opt/bundletool.jar") and defaults
    to "bundletool" on the PATH.

    Methods:
        getCommand(): The command line prefix used to launch bundletool.
        runBundleTool(params): Run bundletool with the given parameters.
        getBundletoolVersion(): Get the installed version of bundletool.
        checkAvailable(): Abort if bundletool cannot be launched.

    Examples:
        >>> BundleTool.runBundleTool(["dump-sdk-bundle", "config", "--bundle=sdk.asb"])
    '''

    @staticmethod
    def getCommand():
        configured = os.environ.get(BUNDLETOOL_ENV_VAR, "").strip()
        if configured:
            return shlex.split(configured)
        return [DEFAULT_BUNDLETOOL_COMMAND]

    @staticmethod
    def runBundleTool(params):
        cmd = [*BundleTool.getCommand(), *params]
        dbgPrint("[~] Running " + " ".join(cmd))
        cp = subprocess.run(
            cmd,
            text=True,
            capture_output=True,
            check=False,
        )
        if cp.stderr:
            dbgPrint(cp.stderr.rstrip())
        # Return a simple, uniform dict
        return {
            "returncode": cp.returncode,
            "stdout": cp.stdout,
            "stderr": cp.stderr,
            "ok": (cp.returncode == 0),
        }

    @staticmethod
    def getBundletoolVersion():
        result = BundleTool.runBundleTool(["version"])
        if result["ok"] and result["stdout"].strip():
            version_output = result["stdout"].strip().split("\n")[0].strip()
            return parse_version(version_output.split("-")[0].strip())
        raise RuntimeError("Error: Failed to get bundletool version.")

    @staticmethod
    def checkAvailable():
        exe = BundleTool.getCommand()[0]
        if shutil.which(exe) is None:
            abort("Error, missing dependency, ensure '" + exe + "' is available on the PATH or set the "
                  + BUNDLETOOL_ENV_VAR + " environment variable (e.g. BUNDLETOOL=\"java -jar bundletool.jar\").")
