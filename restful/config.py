from pydantic import BaseModel

PHP_OBJECT_TYPE = "application/php-serialized"
PHP_ARRAY_TYPE = "application/php-serialized-array"
JSON_TYPE = "application/json"


class RESTConfig(BaseModel):
    """
    Configuration for parser and renderer registries.
    """

    default_content_type: str = JSON_TYPE
    freeze_registries: bool = False
    json_logging: bool = False
