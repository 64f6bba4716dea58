"""Constants shared by the classifier, the YAML matcher and the builder."""

# Property source name: configmap:<name>:<namespace>
SOURCE_NAME_PREFIX = "configmap"
SOURCE_NAME_SEPARATOR = ":"

# Basename that is always treated as a config file
DEFAULT_CONFIG_NAME = "application"

# Env vars that each add one more recognized basename
CONFIG_NAME_ENV_VARS = (
    "SPRING_CLOUD_KUBERNETES_CONFIG_NAME",  # this tool
    "SPRING_CONFIG_NAME",                   # host framework
)

# Comma-separated active profiles (CLI default when no --profile is given)
ACTIVE_PROFILES_ENV_VAR = "SPRING_PROFILES_ACTIVE"

YAML_EXTENSIONS = ("yml", "yaml")
PROPERTIES_EXTENSION = "properties"

# Flattened key carrying a YAML document's profile selector
PROFILES_KEY = "spring.profiles"

# Profile that counts as active when the caller supplies none
DEFAULT_PROFILE = "default"

# Key used for a YAML document that is a bare scalar or list
NON_MAPPING_DOCUMENT_KEY = "document"

# Where the pod's service account namespace is mounted in-cluster
SERVICE_ACCOUNT_NAMESPACE_PATH = "/var/run/secrets/kubernetes.io/serviceaccount/namespace"
FALLBACK_NAMESPACE = "default"

# Default settings file read by the CLI
SETTINGS_FILE = "configmap2props.yaml"
