"""Async file traversal strategies.

Producers read directories concurrently and push file paths into a
shared buffer, waking the consumer through a Coordinator. The consumer
side is an async generator that drains the buffer after every wake.

Output of the async walkers is unordered: only the set of paths matches
the synchronous depth-first walk.
"""

import asyncio
import logging
import os
from abc import ABC, abstractmethod
from typing import AsyncIterator, List, Optional

from ..._common import is_excluded, resolve_root
from ...config import PathLike, TraversalConfig, TraversalStrategy, parse_strategy
from ..adapters.filesystem import AsyncFileSystemAdapter
from .adapter import AsyncDirectoryAdapter
from .coordinator import Coordinator

logger = logging.getLogger(__name__)


class AsyncFileTraverser(ABC):
    """Abstract base class for async file traversers.

    Subclasses only implement ``_produce``: the coroutine that reads
    directories, fills the buffer and finally closes (or fails) the
    coordinator. Buffer draining, cancellation and the non-directory root
    case are shared.

    Producers start no new read while undelivered paths are buffered and
    the consumer is not waiting, so an iteration that is abandoned without
    ``aclose()`` stalls after the reads already in flight.
    """

    def __init__(self,
                 adapter: Optional[AsyncDirectoryAdapter] = None,
                 config: Optional[TraversalConfig] = None):
        """Initialize traverser.

        Args:
            adapter: Async directory adapter (AsyncFileSystemAdapter if None)
            config: Traversal configuration (defaults if None)
        """
        self.adapter = adapter if adapter is not None else AsyncFileSystemAdapter()
        self.config = config or TraversalConfig()

    async def traverse(self, root: PathLike) -> AsyncIterator[str]:
        """Yield every file path beneath ``root`` as reads complete.

        A root that is not a directory is yielded alone, as given.

        Raises:
            OSError: The first failing read, once the consumer wakes
        """
        if not await self.adapter.is_directory(os.fspath(root)):
            yield os.fspath(root)
            return

        top = resolve_root(root, self.config)
        logger.debug(
            "Async traversal of %s started (%s, max_concurrent=%d)",
            top, self.__class__.__name__, self.config.max_concurrent,
        )

        buffer: List[str] = []
        coordinator = Coordinator()
        cancelled = asyncio.Event()
        producer = asyncio.ensure_future(self._drive(top, buffer, coordinator, cancelled))

        count = 0
        try:
            while True:
                more = await coordinator.wait()
                while buffer:
                    count += 1
                    yield buffer.pop()
                if not more:
                    break
            logger.debug("Async traversal of %s finished: %d files", top, count)
        finally:
            cancelled.set()
            producer.cancel()
            await asyncio.gather(producer, return_exceptions=True)

    async def _drive(self, top, buffer, coordinator, cancelled) -> None:
        """Run ``_produce``; anything it raises rejects the coordinator."""
        try:
            await self._produce(top, buffer, coordinator, cancelled)
        except Exception as error:
            coordinator.fail(error)

    @abstractmethod
    async def _produce(self,
                       top: str,
                       buffer: List[str],
                       coordinator: Coordinator,
                       cancelled: asyncio.Event) -> None:
        """Read the tree under ``top`` into ``buffer``.

        Must end by calling ``coordinator.close()`` on success or
        ``coordinator.fail()`` on error, and should check ``cancelled``
        before dispatching each new read.
        """
        pass

    async def _read(self, dirname: str, buffer: List[str], subdirs: list) -> None:
        """List one directory: files go to ``buffer``, kept subdirs to ``subdirs``."""
        entries = await self.adapter.list_entries(dirname)
        for entry in entries:
            path = os.path.join(dirname, entry.name)
            if not entry.is_dir:
                buffer.append(path)
            elif not is_excluded(path, self.config):
                subdirs.append(path)


class AsyncWorkerPoolTraverser(AsyncFileTraverser):
    """Bounded worker pool pulling directories from a shared queue.

    ``max_concurrent`` workers each take a directory, read it, queue its
    subdirectories and signal the consumer. The walk is complete when the
    queue has no unfinished items left.
    """

    async def _produce(self, top, buffer, coordinator, cancelled):
        frontier: asyncio.Queue = asyncio.Queue()
        if not is_excluded(top, self.config):
            frontier.put_nowait(top)

        async def worker() -> None:
            while True:
                dirname = await frontier.get()
                try:
                    if buffer:
                        await coordinator.demanded()
                    if cancelled.is_set() or coordinator.is_rejected:
                        continue
                    subdirs: List[str] = []
                    await self._read(dirname, buffer, subdirs)
                    for subdir in subdirs:
                        frontier.put_nowait(subdir)
                    coordinator.signal()
                except Exception as error:
                    logger.debug("Reading %s failed: %r", dirname, error)
                    coordinator.fail(error)
                finally:
                    frontier.task_done()

        workers = [
            asyncio.ensure_future(worker())
            for _ in range(self.config.max_concurrent)
        ]
        try:
            await frontier.join()
            coordinator.close()
        finally:
            for task in workers:
                task.cancel()
            await asyncio.gather(*workers, return_exceptions=True)


class AsyncLevelTraverser(AsyncFileTraverser):
    """Level-by-level traversal with concurrent reads inside a level.

    All directories of the current frontier are read concurrently (at
    most ``max_concurrent`` at a time); their subdirectories form the next
    frontier, and levels run strictly one after another.
    """

    async def _produce(self, top, buffer, coordinator, cancelled):
        semaphore = asyncio.Semaphore(self.config.max_concurrent)
        frontier = [] if is_excluded(top, self.config) else [top]

        async def expand(dirname: str, next_frontier: List[str]) -> None:
            async with semaphore:
                if buffer:
                    await coordinator.demanded()
                if cancelled.is_set() or coordinator.is_rejected:
                    return
                try:
                    await self._read(dirname, buffer, next_frontier)
                except Exception as error:
                    logger.debug("Reading %s failed: %r", dirname, error)
                    coordinator.fail(error)
                    return
            coordinator.signal()

        while frontier and not (cancelled.is_set() or coordinator.is_rejected):
            next_frontier: List[str] = []
            await asyncio.gather(*(expand(dirname, next_frontier) for dirname in frontier))
            frontier = next_frontier

        coordinator.close()


def create_traverser(strategy,
                     adapter: Optional[AsyncDirectoryAdapter] = None,
                     config: Optional[TraversalConfig] = None) -> AsyncFileTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy or its name ('pool', 'level')
        adapter: Async directory adapter
        config: Traversal configuration

    Returns:
        AsyncFileTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        TraversalStrategy.WORKER_POOL: AsyncWorkerPoolTraverser,
        TraversalStrategy.LEVEL_ORDER: AsyncLevelTraverser,
    }

    strategy = parse_strategy(strategy)
    if strategy not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy!r}. "
            f"Choose from: {', '.join(s.value for s in strategies)}"
        )

    return strategies[strategy](adapter, config)
