from __future__ import annotations

import asyncio

import pytest

from src.app.certificate.service import CertificateService
from src.app.config.settings import Settings, WelshSettings
from src.app.errors import InvalidTestRecordError

from tests.fakes import DEFECTS_PATH, STATION_PATH, FakeFunctionClient, FakeObjectStore, make_test_result, respond


def _welsh(settings: Settings) -> Settings:
    return settings.model_copy(update={"welsh": WelshSettings(enabled=True)})


def test_cancelled_results_are_rejected(service: CertificateService) -> None:
    with pytest.raises(InvalidTestRecordError, match="Not eligible for certificate generation."):
        service.validate(make_test_result(testStatus="cancelled"))


def test_malformed_test_result_id_is_rejected(service: CertificateService) -> None:
    with pytest.raises(InvalidTestRecordError, match="Bad Test Record: 12345"):
        service.validate(make_test_result(testResultId="12345"))


def test_bilingual_needs_welsh_switch(service: CertificateService, upstream: FakeFunctionClient) -> None:
    upstream.routes[STATION_PATH] = respond({"testStationCountry": "Wales"})

    assert service.is_bilingual(make_test_result()) is False
    assert upstream.count(STATION_PATH) == 0


def test_bilingual_for_welsh_station(settings: Settings, upstream: FakeFunctionClient, store: FakeObjectStore) -> None:
    upstream.routes[STATION_PATH] = respond({"testStationCountry": "Wales"})
    service = CertificateService(_welsh(settings), upstream, store)

    assert service.is_bilingual(make_test_result()) is True
    assert service.is_bilingual(make_test_result({"testResult": "abandoned"})) is False


def test_not_bilingual_for_english_station(
    settings: Settings, upstream: FakeFunctionClient, store: FakeObjectStore
) -> None:
    service = CertificateService(_welsh(settings), upstream, store)

    assert service.is_bilingual(make_test_result()) is False


def test_prepare_returns_document_and_payload(service: CertificateService) -> None:
    result = asyncio.run(service.prepare(make_test_result()))

    assert result["documentName"] == "CommercialVehicles/VTG5.pdf"
    assert result["documentDirectory"] == "CVS"
    assert result["certificateKind"] == "PASS_DATA"
    assert result["bilingual"] is False
    assert result["payload"]["DATA"]["RawVRM"] == "CT70VRL"


def test_prepare_bilingual_certificate(settings: Settings, upstream: FakeFunctionClient, store: FakeObjectStore) -> None:
    upstream.routes[STATION_PATH] = respond({"testStationCountry": "Wales"})
    service = CertificateService(_welsh(settings), upstream, store)

    result = asyncio.run(service.prepare(make_test_result({"testResult": "fail"})))

    assert result["documentName"] == "CommercialVehicles/VTG30_BILINGUAL.pdf"
    assert result["certificateKind"] == "FAIL_DATA"
    assert result["bilingual"] is True
    assert upstream.count(DEFECTS_PATH) == 1


def test_prepare_rejects_before_any_lookup(service: CertificateService, upstream: FakeFunctionClient) -> None:
    with pytest.raises(InvalidTestRecordError):
        asyncio.run(service.prepare(make_test_result(testStatus="cancelled")))
    assert upstream.calls == []


def test_production_branch_clears_watermark(
    settings: Settings, upstream: FakeFunctionClient, store: FakeObjectStore
) -> None:
    service = CertificateService(settings.model_copy(update={"branch": "prod"}), upstream, store)

    result = asyncio.run(service.prepare(make_test_result()))

    assert result["payload"]["Watermark"] == ""
