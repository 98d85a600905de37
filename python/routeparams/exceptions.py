class RouteParamsError(Exception):
    """ Generic base exception for all routeparams errors """


class ConfigError(RouteParamsError):
    """ Any errors raised from reading an endpoint configuration """


class MissingEndpointError(ConfigError):
    """ Error with a missing endpoint definition """


class EndpointConfigError(ConfigError):
    """ Error with a configuration value for an endpoint """
