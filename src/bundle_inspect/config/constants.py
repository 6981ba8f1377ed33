"""
Constants shared by the commands and the bundletool adapters.
"""

#   command names

DUMP_SDK_BUNDLE_COMMAND = "dump-sdk-bundle"
EXTRACT_APK_COMMAND = "extract-apk"

#   bundletool lookup

# Full command line used to run bundletool, e.g. "java -jar /opt/bundletool.jar"
BUNDLETOOL_ENV_VAR = "BUNDLETOOL"
DEFAULT_BUNDLETOOL_COMMAND = "bundletool"
MIN_BUNDLETOOL_VERSION = "1.15.0"

#   resource lookup

RESOURCE_NAME_FORMAT = "<type>/<name>"
RESOURCE_NAME_EXAMPLE = "drawable/icon"
