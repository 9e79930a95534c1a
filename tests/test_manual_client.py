"""Tests for the interactive block form."""

import asyncio
from datetime import date

import click
import pytest
import questionary

from sevenday.clients.manual import ManualInputClient
from sevenday.models.block import BlockType


class FakeQuestion:
    def __init__(self, answer):
        self.answer = answer

    async def ask_async(self):
        return self.answer


@pytest.fixture
def accept_defaults(monkeypatch):
    """Answer every prompt by pressing enter on its default."""
    monkeypatch.setattr(questionary, "select", lambda *a, **kw: FakeQuestion(kw["default"]))
    monkeypatch.setattr(questionary, "text", lambda *a, **kw: FakeQuestion(kw["default"]))


class TestCollectBlock:
    """Tests for ManualInputClient.collect_block."""

    def test_defaults_from_options(self, accept_defaults):
        fields = asyncio.run(
            ManualInputClient().collect_block(
                default_start_weight=185.0,
                defaults={
                    "type": BlockType.BULK,
                    "start_date": date(2024, 3, 4),
                    "weeks": None,
                    "start_weight": 190.0,
                    "rate": 0.25,
                },
            )
        )

        assert fields == {
            "type": BlockType.BULK,
            "start_date": date(2024, 3, 4),
            "weeks": 12,
            "start_weight": 190.0,
            "rate": 0.25,
        }

    def test_cancel_on_first_prompt_aborts(self, monkeypatch):
        monkeypatch.setattr(questionary, "select", lambda *a, **kw: FakeQuestion(None))

        with pytest.raises(click.Abort):
            asyncio.run(ManualInputClient().collect_block(default_start_weight=180.0))

    def test_cancel_mid_form_aborts(self, monkeypatch):
        monkeypatch.setattr(questionary, "select", lambda *a, **kw: FakeQuestion(BlockType.CUT))
        monkeypatch.setattr(questionary, "text", lambda *a, **kw: FakeQuestion(None))

        with pytest.raises(click.Abort):
            asyncio.run(ManualInputClient().collect_block(default_start_weight=180.0))
