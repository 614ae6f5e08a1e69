import sys
from pathlib import Path

import django
from django.conf import settings


def _configure_django() -> None:
    if settings.configured:
        return
    settings.configure(
        INSTALLED_APPS=["simplemarkup"],
        TEMPLATES=[
            {
                "BACKEND": "django.template.backends.django.DjangoTemplates",
                "APP_DIRS": False,
            }
        ],
    )
    django.setup()


def pytest_configure(config):
    # Ensure repository root is importable as a package root (so 'simplemarkup' works)
    root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(root))
    _configure_django()
