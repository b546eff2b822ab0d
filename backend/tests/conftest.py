import pytest

from accounts_probe.models import ConnectionConfig


@pytest.fixture
def config():
    return ConnectionConfig(
        host="db.internal",
        port=5432,
        user="reader",
        password="hunter2secret",
        database="bank",
        tls_verify=True,
    )
