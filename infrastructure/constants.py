from pathlib import Path

# Package data shipped next to this module (overrideable via the registry config)
DATA_DIR = Path(__file__).parent / "data"
IANA_REGISTRY_FILE = DATA_DIR / "character-sets.xml"
EQUIVALENCES_FILE = DATA_DIR / "equivalences.yaml"

# Environment variable naming a registry YAML for the shared default registry
CONFIG_ENV_VAR = "CHARSET_REGISTRY_CONFIG"

# Conventional locations probed when a taxonomy is enabled without an explicit path
ICONV_BINARY = "iconv"
MAPPING_DIR_ALIASES_FILENAME = "aliases"
MAPPING_TABLE_SUFFIXES = (".bin", ".txt")
