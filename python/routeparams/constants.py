import re

# Letters only, the identifier may be empty. Digits and underscores are not
# extracted even though substitution will still replace them.
PLACEHOLDER_PATTERN = re.compile(r'{([a-zA-Z]*)}', re.IGNORECASE)
PLACEHOLDER_FORMAT = '{%s}'

KNOWN_KEYS = ('path', 'method', 'parameters', 'sampleData')

ENV_VAR = 'ROUTEPARAMS_CONFIG'

KEY_ENDPOINT = 'endpoints'
KEY_KNOWN_KEYS = 'known_keys'
ENDPOINT_PATH = 'path'
ENDPOINT_METHOD = 'method'

DEFAULT_METHOD = 'GET'
METHODS = ('GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS', 'TRACE', 'CONNECT')
