"""Constants for swift-object."""

# Header carrying the auth token on every request
AUTH_TOKEN_HEADER = "X-Auth-Token"

# Reserved prefix marking user-defined object metadata headers
METADATA_HEADER_PREFIX = "X-Object-Meta-"

# Response headers read back into the object
CONTENT_TYPE_HEADER = "Content-Type"
CONTENT_LENGTH_HEADER = "Content-Length"
ETAG_HEADER = "Etag"
LAST_MODIFIED_HEADER = "Last-Modified"

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Environment overrides (see config.load_settings)
ENV_CACHING = "SWIFT_OBJECT_CACHING"
ENV_VERIFY_CONTENT = "SWIFT_OBJECT_VERIFY_CONTENT"
ENV_TIMEOUT = "SWIFT_OBJECT_TIMEOUT"
ENV_INSECURE = "SWIFT_OBJECT_INSECURE"
ENV_AUTH_TOKEN = "SWIFT_AUTH_TOKEN"

# Version
SWIFT_OBJECT_VERSION = "0.1.0"
