#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: duvlab/logic/duv/session.py

from collections import deque
from typing import Deque, Iterable, Iterator, List, Optional, Tuple

from duvlab.core.duv import calc_duv
from duvlab.shared.logger import log
from duvlab.shared.sanitizer import parse_chunk


class DuvSession:
    """
    Pairs parsed values into (x, y) chromaticities and computes their Duv.

    Values are queued in arrival order. Every complete pair is consumed as
    soon as it is available; a lone trailing value waits for the next chunk.
    """

    def __init__(self) -> None:
        self._buffer: Deque[float] = deque()

    @property
    def pending(self) -> int:
        return len(self._buffer)

    def extend(self, values: Iterable[float]) -> None:
        self._buffer.extend(values)

    def pairs(self) -> Iterator[Tuple[float, float]]:
        """Drain the buffer two values at a time, oldest first."""
        while len(self._buffer) >= 2:
            x = self._buffer.popleft()
            y = self._buffer.popleft()
            yield x, y

    def feed(self, chunk: Optional[str]) -> List[float]:
        """Parse one chunk and return the Duv of every pair it completes."""
        values, errors = parse_chunk(chunk)
        for message in errors:
            log("error", message)
        self.extend(values)
        return [calc_duv(x, y) for x, y in self.pairs()]
