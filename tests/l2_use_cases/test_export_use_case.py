"""Tests for ExportTranscriptUseCase — uses FakeExportPersistence."""

from __future__ import annotations

from dictaphone.l1_entities.export_format import ExportFormat
from dictaphone.l1_entities.segment import Segment
from dictaphone.l2_use_cases.export_use_case import ExportTranscriptUseCase
from tests.conftest import FakeExportPersistence, make_segments


class TestExportTranscript:
    def test_renders_and_saves(self, fake_persistence: FakeExportPersistence):
        uc = ExportTranscriptUseCase(fake_persistence)

        result = uc.execute(make_segments(), ExportFormat.SRT)

        assert result.cue_count == 2
        assert not result.empty
        assert result.content.startswith('1\n00:00:00,000 --> 00:00:10,000')
        assert result.path is not None
        assert result.path.name == 'original_transcript.srt'
        assert fake_persistence.export_calls == [(ExportFormat.SRT, result.content, False)]

    def test_translated_variant(self, fake_persistence: FakeExportPersistence):
        uc = ExportTranscriptUseCase(fake_persistence)
        segments = [Segment(start_time=0, end_time=1, original_text='hola', translated_text='hello')]

        result = uc.execute(segments, ExportFormat.VTT, use_translated=True)

        assert result.filename == 'translated_transcript.vtt'
        assert 'hello' in result.content
        assert fake_persistence.export_calls[0][2] is True

    def test_nothing_to_export_is_reported_not_raised(self, fake_persistence: FakeExportPersistence):
        uc = ExportTranscriptUseCase(fake_persistence)

        result = uc.execute([], ExportFormat.VTT)

        assert result.empty
        assert result.content == 'WEBVTT\n\n'

    def test_no_persistence_configured(self):
        result = ExportTranscriptUseCase().execute(make_segments(), ExportFormat.TXT)
        assert result.path is None
        assert result.cue_count == 2

    def test_save_false_skips_gateway(self, fake_persistence: FakeExportPersistence):
        uc = ExportTranscriptUseCase(fake_persistence)
        uc.execute(make_segments(), ExportFormat.TXT, save=False)
        assert fake_persistence.export_calls == []
