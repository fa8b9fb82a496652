from enum import Enum

JSON_MEDIA_TYPE = "application/json"
ANY_MEDIA_TYPE = "*/*"


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EnumHttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"


# Methods whose requests carry a JSON document the router must parse.
BODY_METHODS = frozenset({EnumHttpMethod.POST.value, EnumHttpMethod.PUT.value})
