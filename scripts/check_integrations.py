"""Run connectivity checks against the text and image providers."""

from __future__ import annotations

import asyncio
import sys
from typing import Iterable

from marketing_generator.integrations import IntegrationCheckResult, run_all_checks


def _format_result(result: IntegrationCheckResult) -> str:
    status = "OK  " if result.success else "FAIL"
    return f"[{status}] {result.name}: {result.message}"


def print_results(results: Iterable[IntegrationCheckResult]) -> None:
    for result in results:
        print(_format_result(result))


def main() -> int:
    results = asyncio.run(run_all_checks())
    print_results(results)
    return 0 if all(result.success for result in results) else 1


if __name__ == "__main__":
    sys.exit(main())
