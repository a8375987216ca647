"""Unit tests for logging configuration, PII redaction and audit events."""

import logging
from pathlib import Path
from logging.handlers import RotatingFileHandler

import pytest

from patient_store.logging_audit import (
    PIIRedactingFormatter,
    configure_logging,
    get_logger,
    log_audit_event,
)
from patient_store.logging_audit.logger import BACKUP_COUNT, MAX_LOG_FILE_SIZE


def _make_record(message: str) -> logging.LogRecord:
    return logging.LogRecord(
        name="patient_store.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=None,
        exc_info=None,
    )


class TestConfigureLogging:
    """Test configure_logging."""

    def test_configure_logging_creates_log_file(self, tmp_path: Path) -> None:
        """Test the log directory and file are created."""
        # Arrange
        log_file = tmp_path / "nested" / "logs" / "store.log"

        # Act
        configure_logging(level="INFO", log_file=log_file)
        get_logger("patient_store.test").info("hello from test")
        for handler in logging.getLogger().handlers:
            handler.flush()

        # Assert
        assert log_file.exists()
        assert "hello from test" in log_file.read_text(encoding="utf-8")

    def test_configure_logging_handler_levels(self, tmp_path: Path) -> None:
        """Test console uses requested level and file always logs DEBUG."""
        # Act
        configure_logging(level="warning", log_file=tmp_path / "store.log")

        # Assert
        handlers = logging.getLogger().handlers
        file_handlers = [h for h in handlers if isinstance(h, RotatingFileHandler)]
        console_handlers = [
            h for h in handlers if type(h) is logging.StreamHandler
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].level == logging.DEBUG
        assert file_handlers[0].maxBytes == MAX_LOG_FILE_SIZE
        assert file_handlers[0].backupCount == BACKUP_COUNT
        assert len(console_handlers) == 1
        assert console_handlers[0].level == logging.WARNING

    def test_configure_logging_is_idempotent(self, tmp_path: Path) -> None:
        """Test repeated configuration does not duplicate handlers."""
        # Act
        configure_logging(log_file=tmp_path / "store.log")
        configure_logging(log_file=tmp_path / "store.log")

        # Assert
        file_handlers = [
            h for h in logging.getLogger().handlers if isinstance(h, RotatingFileHandler)
        ]
        assert len(file_handlers) == 1

    def test_configure_logging_invalid_level(self, tmp_path: Path) -> None:
        """Test invalid log level raises ValueError."""
        with pytest.raises(ValueError, match="Invalid log level: LOUD"):
            configure_logging(level="LOUD", log_file=tmp_path / "store.log")

    def test_configure_logging_env_log_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test PATIENT_STORE_LOG_FILE is used when no log file is given."""
        # Arrange
        log_file = tmp_path / "env" / "store.log"
        monkeypatch.setenv("PATIENT_STORE_LOG_FILE", str(log_file))

        # Act
        configure_logging()

        # Assert
        assert log_file.parent.exists()
        file_handlers = [
            h for h in logging.getLogger().handlers if isinstance(h, RotatingFileHandler)
        ]
        assert Path(file_handlers[0].baseFilename) == log_file.resolve()

    def test_configure_logging_applies_redaction(self, tmp_path: Path) -> None:
        """Test the redact_pii flag reaches the handler formatters."""
        # Act
        configure_logging(log_file=tmp_path / "store.log", redact_pii=True)

        # Assert
        handlers = [
            h
            for h in logging.getLogger().handlers
            if isinstance(h, RotatingFileHandler) or type(h) is logging.StreamHandler
        ]
        assert len(handlers) == 2
        for handler in handlers:
            assert isinstance(handler.formatter, PIIRedactingFormatter)
            assert handler.formatter.redact_pii is True


class TestPIIRedactingFormatter:
    """Test PIIRedactingFormatter."""

    def test_redaction_disabled_passes_message_through(self) -> None:
        """Test messages are untouched when redaction is off."""
        formatter = PIIRedactingFormatter(fmt="%(message)s", redact_pii=False)

        assert formatter.format(_make_record("name=Jane phone=555-555-1234")) == (
            "name=Jane phone=555-555-1234"
        )

    def test_redacts_demographic_fields(self) -> None:
        """Test name, date of birth, address and phone values are masked."""
        # Arrange
        formatter = PIIRedactingFormatter(fmt="%(message)s", redact_pii=True)
        record = _make_record(
            'Row 2: name="Jane Doe" | date_of_birth=1990-05-12 | '
            "address='12 Harbor Lane' | phone=5555551234"
        )

        # Act
        output = formatter.format(record)

        # Assert
        assert "Jane" not in output
        assert "1990-05-12" not in output
        assert "Harbor" not in output
        assert "5555551234" not in output
        assert "name=[NAME-REDACTED]" in output
        assert "date_of_birth=[DOB-REDACTED]" in output
        assert "address=[ADDRESS-REDACTED]" in output
        assert "phone=[PHONE-REDACTED]" in output

    @pytest.mark.parametrize("phone", ["555-555-1234", "(555) 555-1234"])
    def test_redacts_free_standing_phone_numbers(self, phone: str) -> None:
        """Test phone numbers outside key/value pairs are masked."""
        formatter = PIIRedactingFormatter(fmt="%(message)s", redact_pii=True)

        output = formatter.format(_make_record(f"Call {phone} to confirm"))

        assert output == "Call [PHONE-REDACTED] to confirm"

    def test_audit_lines_unchanged(self) -> None:
        """Test audit lines without field values survive redaction intact."""
        formatter = PIIRedactingFormatter(fmt="%(message)s", redact_pii=True)
        message = "AUDIT [PATIENT_UPDATED] | status=success | patient_id=3 | fields=name,phone"

        assert formatter.format(_make_record(message)) == message


class TestAuditEvents:
    """Test log_audit_event."""

    def test_success_event_logged_at_info(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test success events are INFO with ordered key fields."""
        # Act
        with caplog.at_level(logging.INFO):
            log_audit_event(
                "PATIENT_CREATED",
                {
                    "status": "success",
                    "patient_id": 4,
                    "fields": ["name", "gender"],
                    "correlation_id": "abc-123",
                },
            )

        # Assert
        record = caplog.records[-1]
        assert record.levelno == logging.INFO
        assert record.getMessage() == (
            "AUDIT [PATIENT_CREATED] | status=success | patient_id=4 | "
            "fields=name,gender | correlation_id=abc-123"
        )

    def test_failure_event_logged_at_error(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test failure events are logged at ERROR."""
        # Act
        with caplog.at_level(logging.INFO):
            log_audit_event(
                "VALIDATION_FAILED",
                {
                    "status": "failure",
                    "operation": "create",
                    "error_field": "gender",
                    "error_message": "Gender must be one of: male, female, other.",
                },
            )

        # Assert
        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        message = record.getMessage()
        assert message.startswith("AUDIT [VALIDATION_FAILED] | status=failure")
        assert "error_field=gender" in message
        assert "operation=create" in message
        assert "correlation_id=" in message
        assert "timestamp" not in message

    def test_empty_field_list_rendered_as_dash(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test an update with no fields renders a placeholder."""
        with caplog.at_level(logging.INFO):
            log_audit_event("PATIENT_UPDATED", {"status": "success", "patient_id": 1, "fields": []})

        assert "fields=-" in caplog.records[-1].getMessage()

    def test_details_not_mutated(self) -> None:
        """Test caller's details dictionary is left unchanged."""
        details = {"status": "success", "patient_id": 1}

        log_audit_event("PATIENT_DELETED", details)

        assert details == {"status": "success", "patient_id": 1}
