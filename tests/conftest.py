import django
import pytest
from django.conf import settings


def pytest_configure():
    if settings.configured:
        return
    settings.configure(
        DEBUG=False,
        SECRET_KEY="highlighter-tests",
        INSTALLED_APPS=[
            "highlighter",
        ],
        TEMPLATES=[
            {
                "BACKEND": "django.template.backends.django.DjangoTemplates",
                "APP_DIRS": True,
            }
        ],
        DATABASES={},
        USE_TZ=True,
    )
    django.setup()


def _pandoc_available():
    import pypandoc

    try:
        pypandoc.get_pandoc_version()
    except OSError:
        return False
    return True


@pytest.fixture
def requires_pandoc():
    if not _pandoc_available():
        pytest.skip("pandoc binary not installed")
