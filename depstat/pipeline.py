"""
Analyse pipeline: ingest every edge, then build the report.
"""
from __future__ import annotations

import sys
import time
from typing import Iterable

from depstat.analytics.accumulator import accumulate
from depstat.analytics.ranking import is_ranked
from depstat.config import AnalyseOptions
from depstat.report import Report, build_report


def analyse(lines: Iterable[str], options: AnalyseOptions, verbose: bool = False) -> Report:
    t0 = time.time()
    modules = accumulate(lines)
    if verbose:
        print(f"  {len(modules)} modules accumulated in {round(time.time()-t0, 2)}s",
              file=sys.stderr, flush=True)
        shape = f"ranked by {options.order}" if is_ranked(options.order) else "unordered"
        print(f"  report: {shape}", file=sys.stderr, flush=True)
    return build_report(modules, options)
