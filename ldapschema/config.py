import configparser
import os.path


DEFAULTS = {
    "schema": {
        "qualifier-prefix": "X-",
        "warn-unconventional-qualifiers": "yes",
    },
}

CONFIG_FILES = [
    "/etc/ldapschema/global.cfg",
    os.path.expanduser("~/.ldapschema/global.cfg"),
]

__config = None


def loadConfig(configFiles=None, reload=False):
    """
    Load configuration file.
    """
    global __config
    if __config is None or reload:
        x = configparser.ConfigParser()

        for section, options in DEFAULTS.items():
            x.add_section(section)
            for option, value in options.items():
                x.set(section, option, value)

        if configFiles is None:
            configFiles = CONFIG_FILES
        x.read(configFiles)
        __config = x
    return __config


def qualifierPrefix():
    """
    Read configuration file if necessary and return the prefix
    vendor-specific qualifier names are expected to start with.
    """
    cfg = loadConfig()
    return cfg.get("schema", "qualifier-prefix")


def warnUnconventionalQualifiers():
    """
    Read configuration file if necessary and return whether
    to log qualifier names that do not use the qualifier prefix.
    """
    cfg = loadConfig()
    return cfg.getboolean("schema", "warn-unconventional-qualifiers")
