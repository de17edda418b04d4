"""JSON file corpus store.

The corpus is one JSON array of ``{title, source, text, ts, embedding}``
records. Reads fail soft (empty corpus); writes go to a temp file that is
then swapped in with ``os.replace`` so readers never see a torn file.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path

from news_rag.application.ports.corpus_store_port import CorpusStorePort
from news_rag.domain.errors import CorpusError
from news_rag.domain.models import Chunk

logger = logging.getLogger(__name__)


class JsonCorpusStore(CorpusStorePort):
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    async def load(self) -> list[Chunk]:
        return await asyncio.to_thread(self._read)

    async def save(self, chunks: Sequence[Chunk]) -> None:
        await asyncio.to_thread(self._write, list(chunks))

    def _read(self) -> list[Chunk]:
        if not self.path.exists():
            return []
        try:
            parsed = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as ex:
            logger.warning("Corpus at %s is unreadable, treating as empty: %s", self.path, ex)
            return []
        if not isinstance(parsed, list):
            logger.warning("Corpus at %s is not a JSON array, treating as empty", self.path)
            return []

        chunks: list[Chunk] = []
        skipped = 0
        for record in parsed:
            if not isinstance(record, dict) or not isinstance(record.get("embedding"), list):
                skipped += 1
                continue
            try:
                chunks.append(Chunk.from_record(record))
            except (TypeError, ValueError):
                skipped += 1
        if skipped:
            logger.warning("Skipped %d malformed corpus records in %s", skipped, self.path)
        return chunks

    def _write(self, chunks: list[Chunk]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump([c.to_record() for c in chunks], fh)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as ex:
            raise CorpusError(f"could not write corpus to {self.path}: {ex}") from ex
