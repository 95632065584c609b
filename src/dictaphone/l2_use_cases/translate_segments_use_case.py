"""Use case: overlay translations onto a snapshot of finalized segments."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from dictaphone.l1_entities.segment import Segment
from dictaphone.l2_use_cases.ports.translator import Translator

log = logging.getLogger('dph.translate')


@dataclass(frozen=True)
class TranslationBatch:
    """Outcome of one translate-all run over a segment snapshot."""

    generation: int
    segments: list[Segment] = field(default_factory=list)
    failed_ids: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed_ids

    @property
    def translated_count(self) -> int:
        return sum(1 for seg in self.segments if seg.id not in self.failed_ids and seg.is_translated)


class TranslateSegmentsUseCase:
    """Runs translation batches and decides which results are authoritative.

    Every ``execute()`` call is tagged with a generation number. ``apply()``
    accepts a batch only if no newer batch has already been applied, so a
    slow older batch can never overwrite a newer one.
    """

    def __init__(self, translator: Translator, max_concurrency: int = 4) -> None:
        self._translator = translator
        self._max_concurrency = max_concurrency
        self._issued = 0
        self._applied = 0

    @property
    def latest_generation(self) -> int:
        return self._issued

    async def execute(
        self,
        segments: list[Segment],
        source_language: str,
        target_language: str,
    ) -> TranslationBatch:
        """Translate every segment of *segments* (a snapshot is taken first)."""
        self._issued += 1
        generation = self._issued
        snapshot = [seg.model_copy() for seg in segments]
        log.info(
            'Translation batch #%d: %d segments %s -> %s',
            generation,
            len(snapshot),
            source_language,
            target_language,
        )

        sem = asyncio.Semaphore(self._max_concurrency)

        async def _one(seg: Segment) -> tuple[Segment, bool]:
            if not seg.original_text.strip():
                return seg, True
            async with sem:
                try:
                    translated = await self._translator.translate(seg.original_text, source_language, target_language)
                except Exception as e:
                    log.error('Translation failed for segment %s: %s: %s', seg.id, type(e).__name__, e, exc_info=True)
                    return seg, False
            if not translated or not translated.strip():
                log.warning('Empty translation for segment %s', seg.id)
                return seg, False
            return seg.model_copy(update={'translated_text': translated.strip()}), True

        results = await asyncio.gather(*(_one(seg) for seg in snapshot))
        translated_segments = [seg for seg, _ in results]
        failed = [seg.id for seg, ok in results if not ok]
        if failed:
            log.warning('Translation batch #%d: %d of %d segments failed', generation, len(failed), len(snapshot))
        return TranslationBatch(generation=generation, segments=translated_segments, failed_ids=failed)

    def is_stale(self, batch: TranslationBatch) -> bool:
        return batch.generation < self._applied

    def apply(self, batch: TranslationBatch, current: list[Segment]) -> list[Segment] | None:
        """Merge *batch* into *current*. Returns None when the batch is stale.

        Segments finalized after the batch started are left untouched, and
        a failed segment keeps whatever translation it already had.
        """
        if self.is_stale(batch):
            log.info('Discarding stale translation batch #%d (applied #%d)', batch.generation, self._applied)
            return None
        self._applied = batch.generation

        failed = set(batch.failed_ids)
        by_id = {seg.id: seg for seg in batch.segments if seg.id not in failed}
        merged: list[Segment] = []
        for seg in current:
            done = by_id.get(seg.id)
            if done is None:
                merged.append(seg)
            else:
                merged.append(seg.model_copy(update={'translated_text': done.translated_text}))
        return merged

    def reset(self) -> None:
        """Forget applied generations; batches issued before now become stale."""
        self._issued += 1
        self._applied = self._issued
