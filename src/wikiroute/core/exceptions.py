class WikiRouteError(Exception):
    pass

class ConfigError(WikiRouteError):
    pass

class InvalidProjectConfigError(ConfigError):
    """Project capability table in the configuration is malformed."""
    pass
