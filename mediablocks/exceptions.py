from django.core.exceptions import ImproperlyConfigured


class UnknownBlockSettingError(ImproperlyConfigured):
    """
    Raised when a block carries a setting that its block service does not
    declare in ``configure_settings``.
    """

    def __init__(self, service_name, names):
        self.service_name = service_name
        self.names = sorted(names)
        super().__init__(
            "Block service '%s' does not accept the setting(s): %s"
            % (service_name, ", ".join(self.names))
        )


class BlockServiceNotFound(KeyError):
    """
    Raised when looking up a block service name that has not been registered.
    """

    pass
