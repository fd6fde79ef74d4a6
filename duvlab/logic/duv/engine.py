#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: duvlab/logic/duv/engine.py

import sys
from typing import List, Optional, TextIO

from duvlab.shared.formatting import format_duv
from .session import DuvSession


def process_chunk(session: DuvSession, chunk: Optional[str], out: TextIO) -> None:
    for duv in session.feed(chunk):
        print(format_duv(duv), file=out)


def run_values(values: List[str], out: TextIO = None) -> DuvSession:
    """Arguments mode: all values form a single chunk."""
    if out is None:
        out = sys.stdout
    session = DuvSession()
    process_chunk(session, " ".join(values), out)
    return session


def run_stream(stream: TextIO = None, out: TextIO = None) -> DuvSession:
    """Stream mode: every line is a chunk, results are flushed as lines arrive."""
    if stream is None:
        stream = sys.stdin
    if out is None:
        out = sys.stdout
    session = DuvSession()
    for line in stream:
        process_chunk(session, line, out)
        out.flush()
    return session


def run(values: List[str]) -> None:
    """Main execution engine for the Duv command"""
    if values:
        run_values(values)
    else:
        run_stream()
