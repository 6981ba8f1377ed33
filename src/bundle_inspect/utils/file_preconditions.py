import os
from bundle_inspect.utils.exceptions import InvalidCommandException


def checkFileExistsAndReadable(path):
    if not os.path.exists(path):
        raise InvalidCommandException("File '%s' was not found.", path)
    if not os.access(path, os.R_OK):
        raise InvalidCommandException("File '%s' is not readable.", path)


def checkDirectoryOrAbsent(path):
    # An existing regular file would be clobbered by the extracted APKs
    if os.path.exists(path) and not os.path.isdir(path):
        raise InvalidCommandException("Output directory must be a valid directory or a non-existing path.")
