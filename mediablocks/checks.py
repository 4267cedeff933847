from collections.abc import Mapping

from django.conf import settings
from django.core.checks import Error, Warning, register


@register("mediablocks")
def media_contexts_check(app_configs, **kwargs):
    errors = []

    contexts = getattr(settings, "MEDIABLOCKS_CONTEXTS", None)
    if contexts is None:
        return errors

    if not isinstance(contexts, Mapping):
        errors.append(
            Error(
                "MEDIABLOCKS_CONTEXTS must be a mapping of context names to options.",
                id="mediablocks.E001",
            )
        )
        return errors

    for name, options in contexts.items():
        if not isinstance(options, Mapping) or not isinstance(
            options.get("formats", {}), Mapping
        ):
            errors.append(
                Error(
                    "Media context '%s' is not configured correctly." % name,
                    hint="Each context must be a mapping with a 'formats' mapping.",
                    id="mediablocks.E002",
                )
            )
        elif not options.get("formats"):
            errors.append(
                Warning(
                    "Media context '%s' has no formats." % name,
                    hint="Media blocks in this context cannot choose a display format.",
                    id="mediablocks.W001",
                )
            )

    return errors
