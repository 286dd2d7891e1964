"""Tests for retry_with_backoff."""

from unittest.mock import AsyncMock

import pytest

from seo_metadata.services.retry import MaxRetriesReachedError, retry_with_backoff


class TestRetryWithBackoff:
    """Test retry with exponential backoff."""

    @pytest.mark.asyncio
    async def test_succeeds_on_first_try(self, sleep):
        func = AsyncMock(return_value="ok")
        result = await retry_with_backoff(func, sleep=sleep)
        assert result == "ok"
        func.assert_awaited_once()
        assert sleep.delays == []

    @pytest.mark.asyncio
    async def test_retries_on_transient_failure(self, sleep):
        call_count = 0

        async def flaky():
            nonlocal call_count
            call_count += 1
            if call_count < 3:
                raise TimeoutError("timeout")
            return "success"

        result = await retry_with_backoff(flaky, sleep=sleep)
        assert result == "success"
        assert call_count == 3
        assert sleep.delays == [1.0, 2.0]

    @pytest.mark.asyncio
    async def test_always_failing_makes_three_attempts(self, sleep):
        func = AsyncMock(side_effect=ConnectionError("down"))

        with pytest.raises(ConnectionError, match="down"):
            await retry_with_backoff(func, max_retries=3, base_delay_ms=1000, sleep=sleep)

        assert func.await_count == 3
        assert sleep.delays == [1.0, 2.0]

    @pytest.mark.asyncio
    async def test_propagates_last_error_unchanged(self, sleep):
        errors = [ValueError("first"), KeyError("second"), RuntimeError("third")]
        func = AsyncMock(side_effect=errors)

        with pytest.raises(RuntimeError) as exc_info:
            await retry_with_backoff(func, sleep=sleep)

        assert exc_info.value is errors[2]

    @pytest.mark.asyncio
    async def test_custom_schedule(self, sleep):
        func = AsyncMock(side_effect=OSError("nope"))

        with pytest.raises(OSError):
            await retry_with_backoff(func, max_retries=4, base_delay_ms=250, sleep=sleep)

        assert sleep.delays == [0.25, 0.5, 1.0]

    @pytest.mark.asyncio
    async def test_zero_retries_raises_max_retries_reached(self, sleep):
        func = AsyncMock(return_value="never")

        with pytest.raises(MaxRetriesReachedError, match="Max retries reached"):
            await retry_with_backoff(func, max_retries=0, sleep=sleep)

        func.assert_not_awaited()
