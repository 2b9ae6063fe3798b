"""Testes do correlation_id por contexto."""

from __future__ import annotations

import asyncio

import pytest

from conecta_saber.observability import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)


class TestCorrelationId:
    def test_set_and_reset(self) -> None:
        assert get_correlation_id() == ""
        token = set_correlation_id("abc")
        assert get_correlation_id() == "abc"
        reset_correlation_id(token)
        assert get_correlation_id() == ""

    def test_generates_when_missing(self) -> None:
        token = set_correlation_id()
        try:
            assert len(get_correlation_id()) == 36
        finally:
            reset_correlation_id(token)
        assert generate_correlation_id() != generate_correlation_id()

    @pytest.mark.asyncio
    async def test_concurrent_tasks_do_not_share_ids(self) -> None:
        async def worker(value: str) -> str:
            token = set_correlation_id(value)
            try:
                await asyncio.sleep(0)
                return get_correlation_id()
            finally:
                reset_correlation_id(token)

        assert await asyncio.gather(worker("a"), worker("b")) == ["a", "b"]
