from __future__ import annotations

import asyncio


async def sleep(ms: float) -> None:
    """Suspende la tarea actual `ms` milisegundos."""

    await asyncio.sleep(ms / 1000)
