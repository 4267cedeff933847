import os
import shutil
import warnings

import django


def pytest_addoption(parser):
    parser.addoption(
        "--deprecation",
        choices=["all", "pending", "none"],
        default="pending",
    )


def pytest_configure(config):
    deprecation = config.getoption("deprecation")

    only_mediablocks = r"^mediablocks(\.|$)"
    if deprecation == "all":
        # Show all deprecation warnings from all packages
        warnings.simplefilter("default", DeprecationWarning)
        warnings.simplefilter("default", PendingDeprecationWarning)
    elif deprecation == "pending":
        # Show all deprecation warnings from mediablocks
        warnings.filterwarnings(
            "default", category=DeprecationWarning, module=only_mediablocks
        )
        warnings.filterwarnings(
            "default", category=PendingDeprecationWarning, module=only_mediablocks
        )
    elif deprecation == "none":
        # Deprecation warnings are ignored by default
        pass

    # Setup django after processing the pytest arguments
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "mediablocks.test.settings")
    django.setup()

    # Activate a language: This affects HTTP header HTTP_ACCEPT_LANGUAGE sent by
    # the Django test client.
    from django.utils import translation

    translation.activate("en")

    from mediablocks.test.settings import MEDIA_ROOT, STATIC_ROOT

    shutil.rmtree(STATIC_ROOT, ignore_errors=True)
    shutil.rmtree(MEDIA_ROOT, ignore_errors=True)


def pytest_unconfigure(config):
    from mediablocks.test.settings import MEDIA_ROOT, STATIC_ROOT

    shutil.rmtree(STATIC_ROOT, ignore_errors=True)
    shutil.rmtree(MEDIA_ROOT, ignore_errors=True)
