import logging

from mediablocks.exceptions import BlockServiceNotFound

logger = logging.getLogger("mediablocks")


class BlockServiceRegistry:
    """
    Lookup table from block type name to the block service handling it.
    """

    def __init__(self):
        self._services = {}

    def __contains__(self, name):
        return name in self._services

    def __iter__(self):
        return iter(self._services.values())

    def __len__(self):
        return len(self._services)

    def register(self, service):
        if service.name in self._services:
            raise KeyError("Block service '%s' is already registered" % service.name)
        self._services[service.name] = service
        logger.info("Registered block service %s", service.name)
        return service

    def unregister(self, service_or_name):
        # handle being passed a service object rather than a name string
        name = getattr(service_or_name, "name", service_or_name)

        try:
            del self._services[name]
        except KeyError:
            raise BlockServiceNotFound(name)

    def get(self, name):
        try:
            return self._services[name]
        except KeyError:
            raise BlockServiceNotFound(name)

    def get_for_block(self, block):
        return self.get(block.type)

    def get_choices(self):
        return [(service.name, service.label) for service in self]


registry = BlockServiceRegistry()


def render_block(block, extra_settings=None):
    """
    Load ``block`` through its service and return the rendered response.
    """
    service = registry.get_for_block(block)
    service.load(block)
    block_context = service.get_block_context(block, extra_settings=extra_settings)
    return service.execute(block_context)
