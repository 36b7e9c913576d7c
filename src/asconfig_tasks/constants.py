ASCONFIG_JSON = "asconfig.json"
SETTINGS_DIR_NAME = ".asconfig_tasks"
SETTINGS_FILES = ("config.yaml", "config.yml", "config.json")

FILE_EXTENSION_AS = ".as"
FILE_EXTENSION_MXML = ".mxml"
SOURCE_FILE_EXTENSIONS = (FILE_EXTENSION_AS, FILE_EXTENSION_MXML)

CONFIG_AIR = "air"
CONFIG_AIRMOBILE = "airmobile"

FIELD_CONFIG = "config"
FIELD_APPLICATION = "application"
FIELD_AIR_OPTIONS = "airOptions"
FIELD_WINDOWS = "windows"
FIELD_MAC = "mac"
FIELD_TARGET = "target"

TARGET_BUNDLE = "bundle"

TASK_TYPE = "actionscript"
TASK_GROUP_BUILD = "build"
# Packaging output is not scanned for diagnostics.
MATCHER = "$nextgenas_nomatch"

SOURCE_ACTIONSCRIPT = "ActionScript"
SOURCE_AIR = "Adobe AIR"

EXECUTABLE_NAME = "asconfigc"
EXECUTABLE_NAME_WINDOWS = "asconfigc.cmd"
LOCAL_BIN_DIR = ("node_modules", ".bin")

ENV_ROYALE_HOME = "ROYALE_HOME"
ENV_FLEX_HOME = "FLEX_HOME"
SDK_DESCRIPTION_FILES = (
    "flex-sdk-description.xml",
    "royale-sdk-description.xml",
    "royale-asjs/royale-sdk-description.xml",
)
COMPILER_EXECUTABLE = "mxmlc"
COMPILER_EXECUTABLE_WINDOWS = "mxmlc.bat"

DEFAULT_LOG_LEVEL = "WARNING"
