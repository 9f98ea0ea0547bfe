from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from tqdm import tqdm


@dataclass(slots=True)
class ProgressOptions:
    enabled: bool = True
    ncols: int | None = None
    leave: bool = True
    unit_scale: bool = True


class ProgressReporter(Protocol):
    def report(
        self,
        current: int,
        total: int,
        label: str | None = None,
        options: ProgressOptions | None = None,
    ) -> None: ...

    def close(self) -> None: ...


class NullReporter:
    def report(
        self,
        current: int,
        total: int,
        label: str | None = None,
        options: ProgressOptions | None = None,
    ) -> None:
        return None

    def close(self) -> None:
        return None


class TqdmReporter:
    """Byte-based progress bar.

    The bar is created on the first report, so a tree without regular files
    never draws one. ``current`` is written as an absolute position rather
    than an increment because the copy engine reports running totals.
    """

    def __init__(self, options: ProgressOptions | None = None) -> None:
        self.options = options or ProgressOptions()
        self._bar: tqdm | None = None

    def _ensure_bar(self, total: int, options: ProgressOptions) -> tqdm:
        if self._bar is None:
            self._bar = tqdm(
                total=total,
                unit="B",
                unit_scale=options.unit_scale,
                unit_divisor=1024,
                ncols=options.ncols,
                leave=options.leave,
                desc="Copying",
            )
        elif self._bar.total != total:
            self._bar.total = total
        return self._bar

    def report(
        self,
        current: int,
        total: int,
        label: str | None = None,
        options: ProgressOptions | None = None,
    ) -> None:
        effective = options or self.options
        if not effective.enabled:
            return
        bar = self._ensure_bar(total, effective)
        bar.n = current
        if label is not None:
            bar.set_postfix_str(label, refresh=False)
        bar.refresh()

    def close(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None


def build_reporter(options: ProgressOptions) -> ProgressReporter:
    if not options.enabled:
        return NullReporter()
    return TqdmReporter(options)
