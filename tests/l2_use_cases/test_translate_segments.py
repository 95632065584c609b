"""Tests for TranslateSegmentsUseCase — uses FakeTranslator, not a real backend."""

from __future__ import annotations

import asyncio

import pytest

from dictaphone.l1_entities.segment import Segment
from dictaphone.l2_use_cases.translate_segments_use_case import TranslateSegmentsUseCase
from tests.conftest import FakeTranslator


def _three_segments() -> list[Segment]:
    return [
        Segment(start_time=0, end_time=10, original_text='one'),
        Segment(start_time=10, end_time=20, original_text='two'),
        Segment(start_time=20, end_time=30, original_text='three'),
    ]


class TestExecute:
    @pytest.mark.asyncio
    async def test_translates_every_segment(self, fake_translator):
        uc = TranslateSegmentsUseCase(fake_translator)
        segments = _three_segments()

        batch = await uc.execute(segments, 'en-US', 'es')

        assert batch.ok
        assert [s.translated_text for s in batch.segments] == ['T:one', 'T:two', 'T:three']
        assert batch.translated_count == 3
        assert fake_translator.calls[0] == ('one', 'en-US', 'es')

    @pytest.mark.asyncio
    async def test_does_not_mutate_input(self, fake_translator):
        uc = TranslateSegmentsUseCase(fake_translator)
        segments = _three_segments()

        await uc.execute(segments, 'en-US', 'es')

        assert all(s.translated_text == '' for s in segments)

    @pytest.mark.asyncio
    async def test_one_failure_does_not_abort_batch(self, fake_translator):
        fake_translator.fail_on('two')
        uc = TranslateSegmentsUseCase(fake_translator)
        segments = _three_segments()

        batch = await uc.execute(segments, 'en-US', 'es')

        assert not batch.ok
        assert batch.failed_ids == [segments[1].id]
        assert [s.translated_text for s in batch.segments] == ['T:one', '', 'T:three']

    @pytest.mark.asyncio
    async def test_empty_translation_counts_as_failure(self, fake_translator):
        async def _blank(text, source_language, target_language):
            return '   '

        fake_translator.translate = _blank
        uc = TranslateSegmentsUseCase(fake_translator)

        batch = await uc.execute(_three_segments(), 'en-US', 'es')

        assert len(batch.failed_ids) == 3

    @pytest.mark.asyncio
    async def test_generations_increase(self, fake_translator):
        uc = TranslateSegmentsUseCase(fake_translator)
        first = await uc.execute([], 'en', 'es')
        second = await uc.execute([], 'en', 'es')
        assert (first.generation, second.generation) == (1, 2)
        assert uc.latest_generation == 2

    @pytest.mark.asyncio
    async def test_concurrency_is_bounded(self):
        in_flight = 0
        peak = 0

        class _Slow:
            async def translate(self, text, source_language, target_language):
                nonlocal in_flight, peak
                in_flight += 1
                peak = max(peak, in_flight)
                await asyncio.sleep(0)
                in_flight -= 1
                return text.upper()

        uc = TranslateSegmentsUseCase(_Slow(), max_concurrency=2)
        segments = [Segment(start_time=i, end_time=i + 1, original_text=f'w{i}') for i in range(6)]

        batch = await uc.execute(segments, 'en', 'es')

        assert batch.ok
        assert peak <= 2


class TestApply:
    @pytest.mark.asyncio
    async def test_merges_by_id_and_keeps_new_segments(self, fake_translator):
        uc = TranslateSegmentsUseCase(fake_translator)
        segments = _three_segments()[:2]
        batch = await uc.execute(segments, 'en', 'es')

        late = Segment(start_time=20, end_time=30, original_text='late')
        merged = uc.apply(batch, [*segments, late])

        assert merged is not None
        assert [s.translated_text for s in merged] == ['T:one', 'T:two', '']
        assert merged[2] is late

    @pytest.mark.asyncio
    async def test_failed_segment_keeps_previous_translation(self, fake_translator):
        uc = TranslateSegmentsUseCase(fake_translator)
        segments = [Segment(start_time=0, end_time=1, original_text='one', translated_text='uno')]
        fake_translator.fail_on('one')

        batch = await uc.execute(segments, 'en', 'es')
        merged = uc.apply(batch, segments)

        assert merged[0].translated_text == 'uno'

    @pytest.mark.asyncio
    async def test_older_batch_finishing_last_is_discarded(self, fake_translator):
        uc = TranslateSegmentsUseCase(fake_translator)
        segments = _three_segments()
        gate = fake_translator.hold('one')

        slow = asyncio.create_task(uc.execute(segments, 'en', 'es'))
        while len(fake_translator.calls) < 3:
            await asyncio.sleep(0)
        fake_translator.set_prefix('NEW:')
        fake_translator.release_holds()
        fast = await uc.execute(segments, 'en', 'es')
        assert uc.apply(fast, segments) is not None
        assert not slow.done()

        gate.set()
        stale = await slow
        assert uc.is_stale(stale)
        assert uc.apply(stale, segments) is None

    @pytest.mark.asyncio
    async def test_older_batch_finishing_first_is_overwritten(self, fake_translator):
        uc = TranslateSegmentsUseCase(fake_translator)
        segments = _three_segments()
        first = await uc.execute(segments, 'en', 'es')
        fake_translator.set_prefix('NEW:')
        second = await uc.execute(segments, 'en', 'es')

        current = uc.apply(first, segments)
        current = uc.apply(second, current)

        assert [s.translated_text for s in current] == ['NEW:one', 'NEW:two', 'NEW:three']

    @pytest.mark.asyncio
    async def test_reset_makes_in_flight_batches_stale(self, fake_translator):
        uc = TranslateSegmentsUseCase(fake_translator)
        batch = await uc.execute(_three_segments(), 'en', 'es')
        uc.reset()
        assert uc.apply(batch, []) is None
