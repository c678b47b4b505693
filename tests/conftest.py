from __future__ import annotations

import pytest

from src.app.certificate.service import CertificateService
from src.app.config.settings import RetrySettings, Settings, load_settings

from tests.fakes import FakeFunctionClient, FakeObjectStore, default_routes


@pytest.fixture
def settings() -> Settings:
    loaded = load_settings(environ={})
    return loaded.model_copy(update={"retry": RetrySettings(attempts=2)})


@pytest.fixture
def upstream() -> FakeFunctionClient:
    return FakeFunctionClient(default_routes())


@pytest.fixture
def store() -> FakeObjectStore:
    return FakeObjectStore({("cvs-signature-local", "staff-1.base64"): b"c2lnbmF0dXJl"})


@pytest.fixture
def service(settings: Settings, upstream: FakeFunctionClient, store: FakeObjectStore) -> CertificateService:
    return CertificateService(settings, upstream, store)
