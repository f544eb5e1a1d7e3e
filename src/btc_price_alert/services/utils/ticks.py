"""Fixed-interval tick generator for the polling loop."""
import asyncio
from collections.abc import AsyncIterator


async def interval_ticks(
    interval_seconds: float,
    *,
    stop_event: asyncio.Event | None = None,
) -> AsyncIterator[int]:
    """Yield tick numbers on a fixed wall-clock schedule.

    The first tick fires immediately; tick k is due at start + k * interval.
    When a cycle overruns, the missed ticks are skipped and the next tick
    fires at the next nominal slot, so delays never stack into catch-up bursts.

    Args:
        interval_seconds: Spacing between nominal ticks; must be positive.
        stop_event: When set, the generator stops before the next tick, even
            if it is set while waiting for that tick.

    Yields:
        The index of the nominal slot the tick belongs to.
    """
    if interval_seconds <= 0:
        raise ValueError("interval_seconds must be positive")
    loop = asyncio.get_running_loop()
    start = loop.time()
    slot = 0
    while stop_event is None or not stop_event.is_set():
        delay = start + slot * interval_seconds - loop.time()
        if delay > 0:
            if stop_event is None:
                await asyncio.sleep(delay)
            else:
                try:
                    await asyncio.wait_for(stop_event.wait(), delay)
                except asyncio.TimeoutError:
                    pass
                else:
                    return
        yield slot
        elapsed = loop.time() - start
        slot = max(slot + 1, int(elapsed // interval_seconds) + 1)
