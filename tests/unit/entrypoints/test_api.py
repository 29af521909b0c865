"""Tests for the HTTP entrypoint.

Tests cover:
- POST /api/payments passes the raw body to PaymentService.process
- GET /api/payments/{id} passes the id to PaymentService.find_by_id
- InvalidRequestError -> 400, other domain errors -> 409
- Request id propagation and request logging
"""

import io

import pytest
from fastapi.testclient import TestClient
from structlog.testing import capture_logs

from payments_service.application.payment_service import PaymentService
from payments_service.application.validator import PaymentRequestValidator
from payments_service.config import Settings
from payments_service.domain.entities import Payment
from payments_service.entrypoints import api
from payments_service.entrypoints.api import create_app
from payments_service.infrastructure.notifiers import EmailNotifier, SmsNotifier
from payments_service.infrastructure.payment_repository import (
    InMemoryPaymentRepository,
    StubPaymentRepository,
)
from payments_service.infrastructure.time_provider import FixedTimeProvider

# fixed_time fixture (2024-01-15T12:00:00Z) in epoch milliseconds
FIXED_MILLIS = 1705320000000

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def email_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def stub_service(time_provider: FixedTimeProvider, email_stream: io.StringIO) -> PaymentService:
    return PaymentService(
        repository=StubPaymentRepository(time_provider),
        notifier=EmailNotifier(stream=email_stream),
        validator=PaymentRequestValidator(),
    )


@pytest.fixture
def client(stub_service: PaymentService) -> TestClient:
    return TestClient(create_app(service=stub_service, settings=Settings()))


# =============================================================================
# POST /api/payments
# =============================================================================


class TestCreatePayment:
    def test_returns_ok_as_plain_text(self, client: TestClient) -> None:
        response = client.post("/api/payments", content="buy widget")

        assert response.status_code == 200
        assert response.text == "OK"
        assert response.headers["content-type"].startswith("text/plain")

    def test_sends_notification(self, client: TestClient, email_stream: io.StringIO) -> None:
        client.post("/api/payments", content="buy widget")

        assert email_stream.getvalue() == f"Email: Payment processed: PAY-{FIXED_MILLIS}\n"

    def test_empty_body_returns_400(self, client: TestClient, email_stream: io.StringIO) -> None:
        response = client.post("/api/payments", content="")

        assert response.status_code == 400
        assert response.text == "Request cannot be empty"
        assert email_stream.getvalue() == ""

    def test_body_is_passed_verbatim(self, time_provider: FixedTimeProvider) -> None:
        received: list[str | None] = []

        class SpyValidator(PaymentRequestValidator):
            def validate(self, request: str | None) -> None:
                received.append(request)
                super().validate(request)

        service = PaymentService(
            repository=StubPaymentRepository(time_provider),
            notifier=EmailNotifier(stream=io.StringIO()),
            validator=SpyValidator(),
        )
        client = TestClient(create_app(service=service, settings=Settings()))

        client.post("/api/payments", content='{"amount": 100}')

        assert received == ['{"amount": 100}']

    def test_non_utf8_body_returns_400(self, client: TestClient, email_stream: io.StringIO) -> None:
        response = client.post("/api/payments", content=b"\xff\xfe buy")

        assert response.status_code == 400
        assert response.text == "Request body must be UTF-8 text"
        assert email_stream.getvalue() == ""

    def test_pipeline_runs_in_threadpool(
        self, client: TestClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        offloaded: list[object] = []
        original = api.run_in_threadpool

        async def recording_run_in_threadpool(func, *args):
            offloaded.append(func)
            return await original(func, *args)

        monkeypatch.setattr(api, "run_in_threadpool", recording_run_in_threadpool)

        response = client.post("/api/payments", content="buy widget")

        assert response.text == "OK"
        assert [getattr(func, "__name__", None) for func in offloaded] == ["process"]

    def test_domain_error_returns_409(self, time_provider: FixedTimeProvider) -> None:
        class ReassigningRepository(StubPaymentRepository):
            def save(self, payment: Payment) -> None:
                super().save(payment)
                super().save(payment)

        service = PaymentService(
            repository=ReassigningRepository(time_provider),
            notifier=EmailNotifier(stream=io.StringIO()),
            validator=PaymentRequestValidator(),
        )
        client = TestClient(create_app(service=service, settings=Settings()))

        response = client.post("/api/payments", content="buy widget")

        assert response.status_code == 409
        assert "cannot reassign" in response.text


# =============================================================================
# GET /api/payments/{id}
# =============================================================================


class TestGetPayment:
    def test_returns_formatted_payment(self, client: TestClient) -> None:
        response = client.get("/api/payments/PAY-123")

        assert response.status_code == 200
        assert response.text == "Payment{id='PAY-123', amount=100}"

    def test_repeated_lookups_are_equal(self, client: TestClient) -> None:
        first = client.get("/api/payments/PAY-123").text
        second = client.get("/api/payments/PAY-123").text

        assert first == second

    def test_not_found_with_memory_backend(self, time_provider: FixedTimeProvider) -> None:
        service = PaymentService(
            repository=InMemoryPaymentRepository(time_provider),
            notifier=EmailNotifier(stream=io.StringIO()),
            validator=PaymentRequestValidator(),
        )
        client = TestClient(create_app(service=service, settings=Settings()))

        response = client.get("/api/payments/PAY-404")

        assert response.status_code == 200
        assert response.text == "Not found"

    def test_created_payment_is_found_with_memory_backend(
        self, time_provider: FixedTimeProvider
    ) -> None:
        service = PaymentService(
            repository=InMemoryPaymentRepository(time_provider),
            notifier=EmailNotifier(stream=io.StringIO()),
            validator=PaymentRequestValidator(),
        )
        client = TestClient(create_app(service=service, settings=Settings()))

        client.post("/api/payments", content="buy widget")
        response = client.get(f"/api/payments/PAY-{FIXED_MILLIS}")

        assert response.text == f"Payment{{id='PAY-{FIXED_MILLIS}', amount=100}}"

    def test_blank_id_returns_fabricated_payment(self, client: TestClient) -> None:
        response = client.get("/api/payments/%20")

        assert response.status_code == 200
        assert response.text == "Payment{id=' ', amount=100}"


# =============================================================================
# Monitoring & Middleware
# =============================================================================


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestRequestContext:
    def test_generates_request_id_header(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.headers["X-Request-ID"]

    def test_echoes_incoming_request_id(self, client: TestClient) -> None:
        response = client.get("/health", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    def test_logs_request_lifecycle(self, client: TestClient) -> None:
        with capture_logs() as logs:
            client.post("/api/payments", content="buy widget")

        events = [log["event"] for log in logs]
        assert events[0] == "request_started"
        assert events[-1] == "request_completed"
        assert "payment_saved" in events
        assert logs[-1]["status_code"] == 200

    def test_logs_completion_when_handler_fails(self, time_provider: FixedTimeProvider) -> None:
        service = PaymentService(
            repository=StubPaymentRepository(time_provider),
            notifier=SmsNotifier(),
            validator=PaymentRequestValidator(),
        )
        client = TestClient(
            create_app(service=service, settings=Settings()), raise_server_exceptions=False
        )

        with capture_logs() as logs:
            response = client.post("/api/payments", content="buy widget")

        assert response.status_code == 500
        completed = [log for log in logs if log["event"] == "request_completed"]
        assert len(completed) == 1
        assert completed[0]["status_code"] == 500


class TestCreateAppDefaults:
    def test_builds_service_from_settings(self) -> None:
        app = create_app(settings=Settings(repository_backend="memory"))

        response = TestClient(app).get("/api/payments/PAY-1")

        assert response.text == "Not found"
        assert app.state.settings.repository_backend == "memory"
