"""
Unit Tests for Fallback Helpers
===============================
"""
import pytest
import sys
import os

# Setup test environment
os.environ.setdefault('VERBOSE_DEBUG', 'false')
os.environ.setdefault('LOG_TO_FILE', 'false')

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from news_translator.config.constants import FallbackStage
from news_translator.services.fallback import (
    FallbackStep,
    accept_non_empty,
    first_acceptable,
    retry_with_backoff
)
from tests.helpers import FakeProvider, SleepRecorder


def reject_all(source, candidate):
    return None


class TestFirstAcceptable:
    """Test first_acceptable combinator."""

    def test_primary_wins(self):
        primary = FakeProvider('a', output="birinci sonuç")
        secondary = FakeProvider('b', output="ikinci sonuç")
        outcome = first_acceptable("text", [
            FallbackStep(FallbackStage.PRIMARY, primary, accept_non_empty),
            FallbackStep(FallbackStage.SECONDARY, secondary, accept_non_empty),
        ])
        assert outcome.text == "birinci sonuç"
        assert outcome.stage == FallbackStage.PRIMARY
        assert outcome.provider == 'a'
        assert secondary.calls == []

    def test_falls_through_failure(self):
        primary = FakeProvider('a', output=None)
        secondary = FakeProvider('b', output="ikinci sonuç")
        outcome = first_acceptable("text", [
            FallbackStep(FallbackStage.PRIMARY, primary, accept_non_empty),
            FallbackStep(FallbackStage.SECONDARY, secondary, accept_non_empty),
        ])
        assert outcome.stage == FallbackStage.SECONDARY
        assert len(outcome.errors) == 1

    def test_falls_through_exception(self):
        primary = FakeProvider('a', exc=RuntimeError("boom"))
        secondary = FakeProvider('b', output="ikinci sonuç")
        outcome = first_acceptable("text", [
            FallbackStep(FallbackStage.PRIMARY, primary, accept_non_empty),
            FallbackStep(FallbackStage.SECONDARY, secondary, accept_non_empty),
        ])
        assert outcome.text == "ikinci sonuç"
        assert "boom" in outcome.errors[0]

    def test_falls_through_rejection(self):
        primary = FakeProvider('a', output="English output")
        tertiary = FakeProvider('c', output="üçüncü sonuç")
        outcome = first_acceptable("text", [
            FallbackStep(FallbackStage.PRIMARY, primary, reject_all),
            FallbackStep(FallbackStage.TERTIARY, tertiary, accept_non_empty),
        ])
        assert outcome.stage == FallbackStage.TERTIARY
        assert outcome.errors == ["a: rejected"]

    def test_skips_unconfigured(self):
        primary = FakeProvider('a', output="birinci", configured=False)
        secondary = FakeProvider('b', output="ikinci sonuç")
        outcome = first_acceptable("text", [
            FallbackStep(FallbackStage.PRIMARY, primary, accept_non_empty),
            FallbackStep(FallbackStage.SECONDARY, secondary, accept_non_empty),
        ])
        assert primary.calls == []
        assert outcome.provider == 'b'

    def test_exhausted(self):
        outcome = first_acceptable("text", [
            FallbackStep(FallbackStage.PRIMARY, FakeProvider('a'), accept_non_empty),
            FallbackStep(FallbackStage.SECONDARY, FakeProvider('b', exc=ValueError("x")), accept_non_empty),
        ])
        assert outcome.exhausted
        assert outcome.text is None
        assert len(outcome.errors) == 2

    def test_passes_options_and_target(self):
        provider = FakeProvider('a', output="sonuç metni")
        first_acceptable("text", [
            FallbackStep(FallbackStage.PRIMARY, provider, accept_non_empty, {'endpoint': True}),
        ], target_lang='tr')
        assert provider.calls[0]['options'] == {'endpoint': True}
        assert provider.calls[0]['target_lang'] == 'tr'

    def test_accept_non_empty(self):
        assert accept_non_empty("x", "  sonuç ") == "sonuç"
        assert accept_non_empty("x", "   ") is None
        assert accept_non_empty("x", None) is None


class TestRetryWithBackoff:
    """Test retry_with_backoff helper."""

    def test_returns_first_success(self):
        sleep = SleepRecorder()
        assert retry_with_backoff(lambda: "ok", 3, 1.0, sleep=sleep) == "ok"
        assert sleep.delays == []

    def test_retries_then_succeeds(self):
        sleep = SleepRecorder()
        attempts = []

        def flaky():
            attempts.append(1)
            if len(attempts) < 3:
                raise RuntimeError("temporary")
            return "ok"

        assert retry_with_backoff(flaky, 3, 1.5, sleep=sleep) == "ok"
        assert sleep.delays == [1.5, 3.0]

    def test_reraises_last_error(self):
        sleep = SleepRecorder()
        errors = iter([RuntimeError("first"), RuntimeError("second")])

        def failing():
            raise next(errors)

        with pytest.raises(RuntimeError, match="second"):
            retry_with_backoff(failing, 2, 1.0, sleep=sleep)
        assert sleep.delays == [1.0]

    def test_invalid_attempts(self):
        with pytest.raises(ValueError):
            retry_with_backoff(lambda: "ok", 0, 1.0)
