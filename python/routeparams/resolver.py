import logging
import os

import yaml

from routeparams import constants
from routeparams import exceptions
from routeparams.endpoint import Request


log = logging.getLogger(__name__)


class EndpointResolver:
    @classmethod
    def from_file(cls, path=None):
        """
        Loads the configuration from a YAML file.

        :raise ConfigError: if no path is given and the environment variable
            is not set
        :param str path: Defaults to the file named by the ROUTEPARAMS_CONFIG
                         environment variable
        :rtype: EndpointResolver
        """
        path = path or os.getenv(constants.ENV_VAR)
        if not path:
            raise exceptions.ConfigError(
                'No configuration given and {} is not set'.format(constants.ENV_VAR)
            )
        with open(path) as f:
            config = yaml.safe_load(f)
        log.debug('Loaded endpoint configuration from %s', path)
        return cls(config or {})

    def __init__(self, config):
        """
        :param dict[str, object]    config:
        """
        if not isinstance(config, dict):
            raise exceptions.ConfigError(
                'Configuration must be a mapping, not {}'.format(type(config).__name__)
            )
        self._config = config
        self._known_keys = self._load_known_keys()
        self._endpoints = {}

        endpoints = self._config.get(constants.KEY_ENDPOINT) or {}
        if not isinstance(endpoints, dict):
            raise exceptions.ConfigError(
                '{} must be a mapping of name to path'.format(constants.KEY_ENDPOINT)
            )
        for name in endpoints:
            self._load_endpoint(name)

    @property
    def endpoints(self):
        """
        Mapping of endpoint name to its (path, method) definition

        :rtype: dict[str, tuple[str, str]]
        """
        return self._endpoints.copy()

    @property
    def known_keys(self):
        """
        :rtype: tuple[str]
        """
        return self._known_keys

    def get_endpoint(self, endpoint_name):
        """
        :raise MissingEndpointError: if no endpoint exists with the name
        :param str  endpoint_name:
        :rtype: tuple[str, str]
        :return: Tuple of (path, method)
        """
        try:
            return self._endpoints[endpoint_name]
        except KeyError:
            raise exceptions.MissingEndpointError(
                'Endpoint {!r} does not exist'.format(endpoint_name)
            )

    def request(self, endpoint_name, fields=None):
        """
        Builds a Request for the named endpoint using the given field values

        :raise MissingEndpointError: if no endpoint exists with the name
        :param str                  endpoint_name:
        :param dict[str, object]    fields:
        :rtype: Request
        """
        path, method = self.get_endpoint(endpoint_name)
        return Request(path, method=method, fields=fields, known_keys=self._known_keys)

    def _load_known_keys(self):
        known_keys = self._config.get(constants.KEY_KNOWN_KEYS)
        if known_keys is None:
            return constants.KNOWN_KEYS
        if (not isinstance(known_keys, (list, tuple)) or
                not all(isinstance(key, str) for key in known_keys)):
            raise exceptions.ConfigError(
                '{} must be a list of strings: {!r}'.format(constants.KEY_KNOWN_KEYS, known_keys)
            )
        return tuple(known_keys)

    def _load_endpoint(self, endpoint_name):
        """
        :param str  endpoint_name:
        :rtype: tuple[str, str]
        """
        # Config is allowed to define a shorthand {name: path}, ensure it's in
        # dictionary format so that both values can be validated the same way
        endpoint_config = self._config[constants.KEY_ENDPOINT][endpoint_name]
        if not isinstance(endpoint_config, dict):
            endpoint_config = {constants.ENDPOINT_PATH: endpoint_config}

        unknown = set(endpoint_config) - {constants.ENDPOINT_PATH, constants.ENDPOINT_METHOD}
        if unknown:
            raise exceptions.EndpointConfigError(
                'Unknown keys for endpoint {!r}: {}'.format(endpoint_name, sorted(unknown))
            )

        path = endpoint_config.get(constants.ENDPOINT_PATH)
        if not isinstance(path, str):
            raise exceptions.EndpointConfigError(
                'Missing or invalid path for endpoint {!r}: {!r}'.format(endpoint_name, path)
            )

        method = str(endpoint_config.get(constants.ENDPOINT_METHOD, constants.DEFAULT_METHOD)).upper()
        if method not in constants.METHODS:
            raise exceptions.EndpointConfigError(
                'Unknown method for endpoint {!r}: {}'.format(endpoint_name, method)
            )

        self._endpoints[endpoint_name] = (path, method)
        return path, method
