"""
Preview Pipeline

Asynchronous, cancellable preview generation for one consumer (an editor pane,
a catalog thumbnail), plus a PreviewBoard that runs many consumers side by side.

Per consumer the pipeline is a state machine:

    IDLE -> GENERATING -> READY | FAILED
    READY / FAILED -> GENERATING       (new request)
    any -> IDLE                        (close)

Every request takes a new generation token. When a generation finishes, its
result is applied only if its token is still the newest one; older results are
discarded and never wrapped in a handle. A consumer owns at most one live
artifact handle: a new handle releases the previous one, a failure releases it
too, and close() releases whatever is live. Each handle is released exactly once.

Example:
    store = ArtifactStore()
    generate = compositor_generator(resume, settings)
    async with PreviewPipeline(generate, store, consumer_id="editor") as pipeline:
        snapshot = await pipeline.request(PreviewKey("modern", "#7c3aed"))
        print(snapshot.state, snapshot.handle.uri)
"""

import asyncio
import functools
import os
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Dict, List, Mapping, Optional

from dotenv import load_dotenv

from resumekit.contexts.rendering.artifact_store import ArtifactHandle, ArtifactStore
from resumekit.contexts.rendering.compositor import BinaryArtifact, compose
from resumekit.contexts.rendering.exceptions import PreviewClosedError
from resumekit.contexts.rendering.logger import (
    log_preview_closed,
    log_preview_failure,
    log_preview_stale,
    log_preview_transition,
)
from resumekit.contexts.rendering.serializer import Serializer
from resumekit.contexts.templating.resume_data_structure import ResumeData, ResumeSettings
from resumekit.contexts.templating.template_registry import TemplateRegistry

load_dotenv()
PREVIEW_DEBOUNCE_S = float(os.getenv("RESUMEKIT_PREVIEW_DEBOUNCE_S", "0"))


class PreviewState(str, Enum):
    IDLE = "idle"
    GENERATING = "generating"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class PreviewKey:
    """What a preview shows: a template and an accent (None = template default)."""

    template_id: str
    accent_color: Optional[str] = None


@dataclass(frozen=True)
class PreviewError:
    """
    Structured failure exposed to the consumer in the FAILED state.

    Attributes:
        key: Request that failed
        error_type: Exception class name
        message: Exception message
    """

    key: PreviewKey
    error_type: str
    message: str

    @classmethod
    def from_exception(cls, key: PreviewKey, error: Exception) -> "PreviewError":
        return cls(key=key, error_type=type(error).__name__, message=str(error))


@dataclass(frozen=True)
class PreviewSnapshot:
    """Immutable view of a consumer's preview state."""

    consumer_id: str
    state: PreviewState
    token: int
    key: Optional[PreviewKey] = None
    handle: Optional[ArtifactHandle] = None
    error: Optional[PreviewError] = None


Generator = Callable[[PreviewKey], Awaitable[BinaryArtifact]]
ChangeCallback = Callable[[PreviewSnapshot], None]


class PreviewPipeline:
    """
    Preview state machine for a single consumer.

    Args:
        generate: Coroutine function producing an artifact for a key
        store: Store issuing the artifact handles
        consumer_id: Name used in logs and snapshots
        debounce_s: Wait this long before generating; a newer request during
            the wait supersedes this one without generating at all
        on_change: Called with a snapshot after every state transition
    """

    def __init__(
        self,
        generate: Generator,
        store: ArtifactStore,
        consumer_id: str = "preview",
        debounce_s: float = PREVIEW_DEBOUNCE_S,
        on_change: Optional[ChangeCallback] = None,
    ):
        self._generate = generate
        self._store = store
        self.consumer_id = consumer_id
        self.debounce_s = debounce_s
        self.on_change = on_change

        self._token = 0
        self._state = PreviewState.IDLE
        self._key: Optional[PreviewKey] = None
        self._handle: Optional[ArtifactHandle] = None
        self._error: Optional[PreviewError] = None
        self._closed = False

    @property
    def state(self) -> PreviewState:
        return self._state

    @property
    def handle(self) -> Optional[ArtifactHandle]:
        return self._handle

    @property
    def error(self) -> Optional[PreviewError]:
        return self._error

    @property
    def token(self) -> int:
        return self._token

    @property
    def closed(self) -> bool:
        return self._closed

    def snapshot(self) -> PreviewSnapshot:
        return PreviewSnapshot(
            consumer_id=self.consumer_id,
            state=self._state,
            token=self._token,
            key=self._key,
            handle=self._handle,
            error=self._error,
        )

    def _transition(self, new_state: PreviewState) -> None:
        log_preview_transition(self.consumer_id, self._state, new_state, self._token)
        self._state = new_state
        if self.on_change is not None:
            self.on_change(self.snapshot())

    def _is_current(self, token: int) -> bool:
        return token == self._token and not self._closed

    def _release_handle(self) -> bool:
        if self._handle is None:
            return False
        handle, self._handle = self._handle, None
        self._store.revoke(handle)
        return True

    def _fail(self, key: PreviewKey, error: Exception) -> PreviewSnapshot:
        """Drop the previous preview and record the failure for this request."""
        self._release_handle()
        self._error = PreviewError.from_exception(key, error)
        log_preview_failure(self.consumer_id, key, error)
        self._transition(PreviewState.FAILED)
        return self.snapshot()

    async def request(self, key: PreviewKey) -> PreviewSnapshot:
        """
        Request a preview, superseding any in-flight request.

        Returns after this request's generation settles. The returned snapshot
        reflects the consumer's state at that point, which belongs to a newer
        request when this one was superseded.

        Raises:
            PreviewClosedError: If the pipeline was closed
        """
        if self._closed:
            raise PreviewClosedError(self.consumer_id)

        self._token += 1
        token = self._token
        self._key = key
        self._error = None
        self._transition(PreviewState.GENERATING)

        try:
            if self.debounce_s > 0:
                await asyncio.sleep(self.debounce_s)
                if not self._is_current(token):
                    log_preview_stale(self.consumer_id, token, self._token)
                    return self.snapshot()
            artifact = await self._generate(key)
        except asyncio.CancelledError:
            if self._is_current(token):
                self._transition(PreviewState.READY if self._handle else PreviewState.IDLE)
            raise
        except Exception as e:
            if not self._is_current(token):
                log_preview_stale(self.consumer_id, token, self._token)
                return self.snapshot()
            return self._fail(key, e)

        if not self._is_current(token):
            log_preview_stale(self.consumer_id, token, self._token)
            return self.snapshot()

        try:
            handle = self._store.create(artifact)
        except Exception as e:
            return self._fail(key, e)
        self._release_handle()
        self._handle = handle
        self._transition(PreviewState.READY)
        return self.snapshot()

    def close(self) -> None:
        """Invalidate in-flight work and release the live handle. Idempotent."""
        if self._closed:
            return
        self._closed = True
        self._token += 1
        released = self._release_handle()
        self._error = None
        self._transition(PreviewState.IDLE)
        log_preview_closed(self.consumer_id, released)

    async def __aenter__(self) -> "PreviewPipeline":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()


def compositor_generator(
    data: ResumeData,
    base_settings: ResumeSettings,
    registry: Optional[TemplateRegistry] = None,
    serializer: Optional[Serializer] = None,
) -> Generator:
    """
    Generator that composes previews of one resume.

    Composition is CPU-bound, so it runs in the event loop's default executor.
    """

    async def generate(key: PreviewKey) -> BinaryArtifact:
        settings = base_settings.with_selection(key.template_id, key.accent_color)
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, functools.partial(compose, key.template_id, data, settings, registry, serializer)
        )

    return generate


class PreviewBoard:
    """
    Many independent preview consumers sharing one generator and store.

    Each consumer has its own pipeline, so one consumer's failure or staleness
    never affects its siblings.
    """

    def __init__(
        self,
        generate: Generator,
        store: Optional[ArtifactStore] = None,
        debounce_s: float = PREVIEW_DEBOUNCE_S,
        on_change: Optional[ChangeCallback] = None,
    ):
        self._generate = generate
        self._owns_store = store is None
        self.store = store or ArtifactStore()
        self.debounce_s = debounce_s
        self.on_change = on_change
        self._pipelines: Dict[str, PreviewPipeline] = {}

    def pipeline(self, consumer_id: str) -> PreviewPipeline:
        """Get (or create) the pipeline for a consumer."""
        if consumer_id not in self._pipelines:
            self._pipelines[consumer_id] = PreviewPipeline(
                self._generate,
                self.store,
                consumer_id=consumer_id,
                debounce_s=self.debounce_s,
                on_change=self.on_change,
            )
        return self._pipelines[consumer_id]

    async def request(self, consumer_id: str, key: PreviewKey) -> PreviewSnapshot:
        return await self.pipeline(consumer_id).request(key)

    async def request_many(self, requests: Mapping[str, PreviewKey]) -> Dict[str, PreviewSnapshot]:
        """Request previews for several consumers concurrently."""
        consumer_ids = list(requests)
        snapshots = await asyncio.gather(*(self.request(cid, requests[cid]) for cid in consumer_ids))
        return dict(zip(consumer_ids, snapshots))

    def snapshots(self) -> List[PreviewSnapshot]:
        return [pipeline.snapshot() for pipeline in self._pipelines.values()]

    def close(self) -> None:
        """Close every pipeline (and the store, when the board created it)."""
        for pipeline in self._pipelines.values():
            pipeline.close()
        if self._owns_store:
            self.store.close()

    async def __aenter__(self) -> "PreviewBoard":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()
