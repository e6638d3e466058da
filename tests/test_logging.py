"""
Unit Tests for retry_core.logging
=================================
"""

import json
import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def restore_logging():
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    structlog.reset_defaults()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


class TestSetupLogging:
    """Tests for structured logging setup."""
    
    def test_json_output(self, capsys):
        """Should render structlog events as JSON lines on stdout."""
        from retry_core.logging import setup_logging, get_logger
        
        setup_logging(service_name="billing-worker", level="INFO")
        get_logger("billing").info("invoice.sent", invoice_id="inv_123")
        
        lines = [line for line in capsys.readouterr().out.splitlines() if line]
        record = json.loads(lines[-1])
        
        assert record["event"] == "invoice.sent"
        assert record["invoice_id"] == "inv_123"
        assert record["service"] == "billing-worker"
        assert record["level"] == "info"
        assert record["logger"] == "billing"
        assert "timestamp" in record
    
    def test_level_filtering(self, capsys):
        from retry_core.logging import setup_logging, get_logger
        
        setup_logging(service_name="billing-worker", level="WARNING")
        logger = get_logger("billing")
        logger.info("hidden.event")
        logger.warning("shown.event")
        
        out = capsys.readouterr().out
        
        assert "hidden.event" not in out
        assert "shown.event" in out
    
    def test_plain_output(self, capsys):
        from retry_core.logging import setup_logging, get_logger
        
        setup_logging(service_name="billing-worker", json_output=False)
        get_logger("billing").info("invoice.sent", invoice_id="inv_123")
        
        out = capsys.readouterr().out
        
        assert "invoice.sent" in out
        assert "invoice_id=inv_123" in out
    
    def test_stdlib_records_use_same_format(self, capsys):
        from retry_core.logging import setup_logging
        
        setup_logging(service_name="billing-worker")
        logging.getLogger("legacy").warning("plain stdlib message")
        
        lines = [line for line in capsys.readouterr().out.splitlines() if line]
        record = json.loads(lines[-1])
        
        assert record["event"] == "plain stdlib message"
        assert record["service"] == "billing-worker"
    
    @pytest.mark.asyncio
    async def test_retry_events_reach_root_logger(self, capsys):
        from retry_core.logging import setup_logging
        from retry_core.retry import RetryConfig, retry
        
        setup_logging(service_name="billing-worker")
        
        async def always_fail():
            raise ValueError("boom")
        
        with pytest.raises(ValueError):
            await retry(always_fail, RetryConfig(retries=1, initial_delay_ms=0))
        
        records = [
            json.loads(line)
            for line in capsys.readouterr().out.splitlines()
            if line
        ]
        events = [record["event"] for record in records]
        
        assert "Retrying after failure" in events
        assert "Retry exhausted" in events
